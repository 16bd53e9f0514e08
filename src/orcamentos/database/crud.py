from typing import List, Optional

from sqlalchemy.orm import Session

from ..exceptions import OrcamentoCiclicoError, SubOrcamentoVinculadoError
from ..patterns.composite import ItemOrcamento, Orcamento
from ..patterns.state import estado_por_chave
from .models import EstadoOrcamentoEnum, ItemOrcamentoModel, OrcamentoModel


class BaseRepository:
    """Repositório base com operações CRUD"""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def create(self, obj):
        """Cria um novo registro"""
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def get_by_id(self, id: int):
        """Busca por ID"""
        return self.db.query(self.model).filter(self.model.id == id).first()

    def update(self, id: int, **kwargs):
        """Atualiza um registro"""
        obj = self.get_by_id(id)
        if obj:
            for key, value in kwargs.items():
                setattr(obj, key, value)
            self.db.commit()
            self.db.refresh(obj)
        return obj


class OrcamentoRepository(BaseRepository):
    """Repositório para orçamentos e seus itens"""

    def __init__(self, db: Session):
        super().__init__(db, OrcamentoModel)

    def create_orcamento(self, descricao: Optional[str] = None) -> OrcamentoModel:
        return self.create(OrcamentoModel(descricao=descricao))

    def listar_raizes(self, skip: int = 0, limit: int = 100) -> List[OrcamentoModel]:
        """Lista orçamentos que não estão aninhados em outro"""
        return (
            self.db.query(OrcamentoModel)
            .filter(OrcamentoModel.parent_id.is_(None))
            .order_by(OrcamentoModel.id)
            .offset(skip).limit(limit).all()
        )

    def _proxima_posicao(self, orcamento: OrcamentoModel) -> int:
        posicoes = [i.posicao for i in orcamento.itens]
        posicoes += [s.posicao for s in orcamento.sub_orcamentos if s.posicao is not None]
        return max(posicoes, default=-1) + 1

    def add_item(self, orcamento: OrcamentoModel, valor: float, descricao: Optional[str] = None) -> ItemOrcamentoModel:
        """Adiciona um item ao final do orçamento"""
        item = ItemOrcamentoModel(
            valor=valor,
            descricao=descricao,
            posicao=self._proxima_posicao(orcamento),
            orcamento_id=orcamento.id
        )
        return self.create(item)

    def add_sub_orcamento(self, orcamento: OrcamentoModel, sub_orcamento: OrcamentoModel) -> OrcamentoModel:
        """Aninha `sub_orcamento` ao final de `orcamento`.

        Percorre a cadeia de pais do receptor antes de vincular: se o
        sub-orçamento estiver nela, o vínculo criaria um ciclo.
        """
        if sub_orcamento.parent_id is not None:
            raise SubOrcamentoVinculadoError(sub_orcamento.id, sub_orcamento.parent_id)

        ancestral = orcamento
        while ancestral is not None:
            if ancestral.id == sub_orcamento.id:
                raise OrcamentoCiclicoError()
            ancestral = ancestral.parent

        sub_orcamento.posicao = self._proxima_posicao(orcamento)
        sub_orcamento.parent_id = orcamento.id
        self.db.commit()
        self.db.refresh(sub_orcamento)
        self.db.refresh(orcamento)
        return sub_orcamento

    def update_estado(self, orcamento_id: int, estado: EstadoOrcamentoEnum) -> Optional[OrcamentoModel]:
        return self.update(orcamento_id, estado=estado)

    def update_desconto_extra(self, orcamento_id: int, desconto_extra: float) -> Optional[OrcamentoModel]:
        return self.update(orcamento_id, desconto_extra=desconto_extra)

    def carregar_arvore(self, orcamento: OrcamentoModel) -> Orcamento:
        """Monta o Composite de domínio a partir dos registros do banco"""
        arvore = Orcamento()
        arvore.estado_atual = estado_por_chave(orcamento.estado.value)
        arvore.desconto_extra = orcamento.desconto_extra or 0.0

        entradas = [(item.posicao, item) for item in orcamento.itens]
        entradas += [(sub.posicao, sub) for sub in orcamento.sub_orcamentos]
        for _, entrada in sorted(entradas, key=lambda e: e[0]):
            if isinstance(entrada, OrcamentoModel):
                arvore.add_item(self.carregar_arvore(entrada))
            else:
                arvore.add_item(ItemOrcamento(entrada.valor))
        return arvore
