"""
Padrão Adapter para envio HTTP

`HttpAdapter` é a capacidade de transporte; qualquer cliente HTTP pode ser
adaptado a ela sem alterar `RegistroOrcamento`.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..config import carregar_configuracoes
from ..exceptions import RegistroNaoPermitidoError
from .composite import Orcamento
from .state import Finalizado

logger = logging.getLogger(__name__)


class HttpAdapter(ABC):
    @abstractmethod
    def post(self, url: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass


class RegistroOrcamento:
    """Registra orçamentos finalizados em uma API externa"""

    def __init__(self, http: HttpAdapter, url: Optional[str] = None):
        self._http = http
        self._url = url or carregar_configuracoes().api_registro_url

    def registra(self, orcamento: Orcamento) -> None:
        if not isinstance(orcamento.estado_atual, Finalizado):
            raise RegistroNaoPermitidoError(str(orcamento.estado_atual))

        dados = {
            "valor": orcamento.valor(),
            "quantidade_itens": orcamento.quantidade_itens,
        }
        logger.info("Registrando orçamento em %s", self._url)
        self._http.post(self._url, dados)
