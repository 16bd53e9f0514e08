"""
Controller para gerenciamento de orçamentos (padrão MVC)
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..database.config import get_db
from ..exceptions import (
    OrcamentoCiclicoError, OrcamentoError, OrcamentoNaoEncontradoError,
    SubOrcamentoVinculadoError, TransicaoInvalidaError
)
from ..patterns.business_object import CacheDeProxies, OrcamentoBO


class OrcamentoCreate(BaseModel):
    """Schema para criação de orçamento vazio"""
    descricao: Optional[str] = Field(None, description="Descrição livre do orçamento", max_length=200)


class ItemCreate(BaseModel):
    """Schema para adicionar um item (folha) ao orçamento"""
    valor: float = Field(..., description="Valor monetário do item", examples=[300.0])
    descricao: Optional[str] = Field(None, max_length=200)


class SubOrcamentoCreate(BaseModel):
    """Schema para aninhar um orçamento existente"""
    sub_orcamento_id: int = Field(..., description="ID do orçamento a ser aninhado")


class OrcamentoResponse(BaseModel):
    """Schema de resposta para orçamento com entradas diretas"""
    id: int
    descricao: Optional[str] = None
    estado: str = Field(..., examples=["em_aprovacao", "aprovado", "reprovado", "finalizado"])
    estado_display: str
    parent_id: Optional[int] = None
    valor: float = Field(..., description="Soma recursiva das entradas")
    desconto_extra: float
    valor_com_desconto: float
    quantidade_itens: int = Field(..., ge=0)
    itens: List[Dict[str, Any]]


class DescontoResponse(OrcamentoResponse):
    desconto_aplicado: float


class ValorCacheResponse(BaseModel):
    orcamento_id: int
    valor: float
    servido_do_cache: bool


class ImpostoResponse(BaseModel):
    orcamento_id: int
    imposto: str
    valor: float


class ExportacaoResponse(BaseModel):
    valor: float
    quantidade_itens: int


def erro_http(erro: OrcamentoError) -> HTTPException:
    """Converte exceções de domínio em respostas HTTP"""
    if isinstance(erro, OrcamentoNaoEncontradoError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(erro, (OrcamentoCiclicoError, SubOrcamentoVinculadoError, TransicaoInvalidaError)):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail={"code": erro.code, "message": erro.message})


class OrcamentoController:
    """Controller para operações de orçamentos"""

    def __init__(self, proxies: Optional[CacheDeProxies] = None):
        self.router = APIRouter(prefix="/orcamentos", tags=["Orçamentos"])
        self.proxies = proxies if proxies is not None else CacheDeProxies()
        self._setup_routes()

    def _bo(self, db: Session) -> OrcamentoBO:
        return OrcamentoBO(db, self.proxies)

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.post("", response_model=OrcamentoResponse, status_code=status.HTTP_201_CREATED)
        async def criar_orcamento(dados: OrcamentoCreate, db: Session = Depends(get_db)):
            """Cria um orçamento vazio no estado 'Em aprovação'"""
            return self._bo(db).criar_orcamento(dados.descricao)

        @self.router.get("", response_model=List[OrcamentoResponse])
        async def listar_orcamentos(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
            """Lista os orçamentos de nível mais alto"""
            return self._bo(db).listar_orcamentos(skip, limit)

        @self.router.get("/{orcamento_id}", response_model=OrcamentoResponse)
        async def obter_orcamento(orcamento_id: int, db: Session = Depends(get_db)):
            """Detalha o orçamento recalculando o valor (sem cache)"""
            try:
                return self._bo(db).detalhar(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.post("/{orcamento_id}/itens", response_model=OrcamentoResponse)
        async def adicionar_item(orcamento_id: int, item: ItemCreate, db: Session = Depends(get_db)):
            try:
                return self._bo(db).adicionar_item(orcamento_id, item.valor, item.descricao)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.post("/{orcamento_id}/sub-orcamentos", response_model=OrcamentoResponse)
        async def adicionar_sub_orcamento(orcamento_id: int, dados: SubOrcamentoCreate,
                                          db: Session = Depends(get_db)):
            """
            Aninha um orçamento existente (padrão Composite)

            **Erros:**
            - 409 se o vínculo criar um ciclo ou se o orçamento já tiver pai
            """
            try:
                return self._bo(db).adicionar_sub_orcamento(orcamento_id, dados.sub_orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.get("/{orcamento_id}/valor", response_model=ValorCacheResponse)
        def obter_valor_em_cache(orcamento_id: int, db: Session = Depends(get_db)):
            """
            Valor do orçamento servido pelo Proxy de cache

            A primeira chamada calcula o valor (lento); as seguintes respondem do
            cache. O cache não é invalidado quando o orçamento muda.
            """
            try:
                return self._bo(db).valor_em_cache(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.post("/{orcamento_id}/aprovar", response_model=OrcamentoResponse)
        async def aprovar(orcamento_id: int, db: Session = Depends(get_db)):
            try:
                return self._bo(db).aprovar(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.post("/{orcamento_id}/reprovar", response_model=OrcamentoResponse)
        async def reprovar(orcamento_id: int, db: Session = Depends(get_db)):
            try:
                return self._bo(db).reprovar(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.post("/{orcamento_id}/finalizar", response_model=OrcamentoResponse)
        async def finalizar(orcamento_id: int, db: Session = Depends(get_db)):
            try:
                return self._bo(db).finalizar(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.post("/{orcamento_id}/desconto-extra", response_model=DescontoResponse)
        async def aplicar_desconto_extra(orcamento_id: int, db: Session = Depends(get_db)):
            """Aplica o desconto extra do estado atual (5% em aprovação, 2% aprovado)"""
            try:
                return self._bo(db).aplicar_desconto_extra(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)

        @self.router.get("/{orcamento_id}/impostos/{nome_imposto}", response_model=ImpostoResponse)
        async def calcular_imposto(orcamento_id: int, nome_imposto: str, db: Session = Depends(get_db)):
            try:
                return self._bo(db).calcular_imposto(orcamento_id, nome_imposto)
            except OrcamentoError as e:
                raise erro_http(e)
            except ValueError as e:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        @self.router.get("/{orcamento_id}/exportacao", response_model=ExportacaoResponse)
        async def exportar(orcamento_id: int, db: Session = Depends(get_db)):
            try:
                return self._bo(db).exportar(orcamento_id)
            except OrcamentoError as e:
                raise erro_http(e)
