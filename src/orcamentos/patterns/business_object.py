"""
Padrão Business Object para encapsular lógica de negócio
Orquestra o repositório de orçamentos e os padrões GoF
"""
import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from ..config import Configuracoes, carregar_configuracoes
from ..database.crud import OrcamentoRepository
from ..database.models import EstadoOrcamentoEnum, OrcamentoModel
from ..exceptions import OrcamentoNaoEncontradoError
from .composite import Orcamento
from .decorator import OrcamentoLento
from .exportacao import OrcamentoExportado
from .proxy import CacheOrcamentoProxy
from .strategy import CalculadoraDeImpostos, imposto_por_nome

logger = logging.getLogger(__name__)


class CacheDeProxies:
    """Mantém um CacheOrcamentoProxy por orçamento durante a vida da aplicação"""

    def __init__(self):
        self._proxies: Dict[int, CacheOrcamentoProxy] = {}
        self._lock = threading.Lock()

    def obter(self, orcamento_id: int, criar: Callable[[], CacheOrcamentoProxy]) -> CacheOrcamentoProxy:
        with self._lock:
            proxy = self._proxies.get(orcamento_id)
            if proxy is None:
                proxy = criar()
                self._proxies[orcamento_id] = proxy
            return proxy

    def __contains__(self, orcamento_id: int) -> bool:
        return orcamento_id in self._proxies

    def __len__(self) -> int:
        return len(self._proxies)


class OrcamentoBO:
    def __init__(self, db: Session, proxies: Optional[CacheDeProxies] = None,
                 configuracoes: Optional[Configuracoes] = None):
        self.db = db
        self.orcamento_repo = OrcamentoRepository(db)
        self.proxies = proxies if proxies is not None else CacheDeProxies()
        self.configuracoes = configuracoes or carregar_configuracoes()

    def _obter_model(self, orcamento_id: int) -> OrcamentoModel:
        orcamento = self.orcamento_repo.get_by_id(orcamento_id)
        if not orcamento:
            raise OrcamentoNaoEncontradoError(orcamento_id)
        return orcamento

    def _carregar(self, orcamento_id: int) -> Orcamento:
        return self.orcamento_repo.carregar_arvore(self._obter_model(orcamento_id))

    def criar_orcamento(self, descricao: Optional[str] = None) -> dict:
        orcamento = self.orcamento_repo.create_orcamento(descricao)
        logger.info("Orçamento %s criado", orcamento.id)
        return self.detalhar(orcamento.id)

    def listar_orcamentos(self, skip: int = 0, limit: int = 100) -> List[dict]:
        return [self.detalhar(o.id) for o in self.orcamento_repo.listar_raizes(skip, limit)]

    def adicionar_item(self, orcamento_id: int, valor: float, descricao: Optional[str] = None) -> dict:
        orcamento = self._obter_model(orcamento_id)
        self.orcamento_repo.add_item(orcamento, valor, descricao)
        return self.detalhar(orcamento_id)

    def adicionar_sub_orcamento(self, orcamento_id: int, sub_orcamento_id: int) -> dict:
        orcamento = self._obter_model(orcamento_id)
        sub_orcamento = self._obter_model(sub_orcamento_id)
        self.orcamento_repo.add_sub_orcamento(orcamento, sub_orcamento)
        logger.info("Orçamento %s aninhado em %s", sub_orcamento_id, orcamento_id)
        return self.detalhar(orcamento_id)

    def detalhar(self, orcamento_id: int) -> dict:
        """Detalhes do orçamento com o valor recalculado (sem cache)"""
        model = self._obter_model(orcamento_id)
        arvore = self.orcamento_repo.carregar_arvore(model)

        entradas: List[Dict[str, Any]] = [
            {"tipo": "item", "id": i.id, "descricao": i.descricao, "valor": i.valor, "posicao": i.posicao}
            for i in model.itens
        ]
        entradas += [
            {
                "tipo": "orcamento",
                "id": s.id,
                "descricao": s.descricao,
                "valor": self.orcamento_repo.carregar_arvore(s).valor(),
                "posicao": s.posicao
            }
            for s in model.sub_orcamentos
        ]
        entradas.sort(key=lambda e: e["posicao"])

        return {
            "id": model.id,
            "descricao": model.descricao,
            "estado": arvore.estado_atual.chave,
            "estado_display": str(arvore.estado_atual),
            "parent_id": model.parent_id,
            "valor": arvore.valor(),
            "desconto_extra": arvore.desconto_extra,
            "valor_com_desconto": arvore.valor_com_desconto(),
            "quantidade_itens": arvore.quantidade_itens,
            "itens": entradas,
        }

    def valor_em_cache(self, orcamento_id: int) -> dict:
        """Valor servido pelo proxy de cache do orçamento.

        O proxy não é invalidado: itens adicionados depois da primeira
        leitura não alteram o valor retornado aqui.
        """
        def criar_proxy():
            arvore = self._carregar(orcamento_id)
            return CacheOrcamentoProxy(OrcamentoLento(arvore, self.configuracoes.atraso_calculo))

        proxy = self.proxies.obter(orcamento_id, criar_proxy)
        em_cache = proxy.em_cache
        return {
            "orcamento_id": orcamento_id,
            "valor": proxy.valor(),
            "servido_do_cache": em_cache,
        }

    def _transicionar(self, orcamento_id: int, acao: str) -> dict:
        arvore = self._carregar(orcamento_id)
        estado_anterior = str(arvore.estado_atual)
        getattr(arvore, acao)()
        self.orcamento_repo.update_estado(orcamento_id, EstadoOrcamentoEnum(arvore.estado_atual.chave))
        logger.info(
            "Orçamento %s: '%s' -> '%s'", orcamento_id, estado_anterior, arvore.estado_atual
        )
        return self.detalhar(orcamento_id)

    def aprovar(self, orcamento_id: int) -> dict:
        return self._transicionar(orcamento_id, "aprova")

    def reprovar(self, orcamento_id: int) -> dict:
        return self._transicionar(orcamento_id, "reprova")

    def finalizar(self, orcamento_id: int) -> dict:
        return self._transicionar(orcamento_id, "finaliza")

    def aplicar_desconto_extra(self, orcamento_id: int) -> dict:
        arvore = self._carregar(orcamento_id)
        desconto = arvore.aplica_desconto_extra()
        self.orcamento_repo.update_desconto_extra(orcamento_id, arvore.desconto_extra)
        detalhes = self.detalhar(orcamento_id)
        detalhes["desconto_aplicado"] = desconto
        return detalhes

    def calcular_imposto(self, orcamento_id: int, nome_imposto: str) -> dict:
        imposto = imposto_por_nome(nome_imposto)
        arvore = self._carregar(orcamento_id)
        return {
            "orcamento_id": orcamento_id,
            "imposto": imposto.get_descricao(),
            "valor": CalculadoraDeImpostos().calcula(arvore, imposto),
        }

    def exportar(self, orcamento_id: int) -> dict:
        return OrcamentoExportado(self._carregar(orcamento_id)).conteudo()
