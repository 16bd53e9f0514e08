"""
Padrão Proxy: cache do valor de um orçamento

O proxy expõe o mesmo contrato `valor()` do orçamento encapsulado, calcula o
valor uma única vez e passa a responder do cache. O cache nunca é invalidado:
o orçamento encapsulado deve ser tratado como imutável depois da primeira
leitura pelo proxy, caso contrário o valor devolvido fica desatualizado.
"""
import logging
import threading
import time
from typing import Optional

from .composite import Orcavel

logger = logging.getLogger(__name__)


class CacheOrcamentoProxy(Orcavel):

    def __init__(self, orcamento: Orcavel):
        self._orcamento = orcamento
        self._valor_cache: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def orcamento(self) -> Orcavel:
        return self._orcamento

    @property
    def em_cache(self) -> bool:
        return self._valor_cache is not None

    def valor(self) -> float:
        valor_cache = self._valor_cache
        if valor_cache is not None:
            logger.debug("Valor servido do cache: %s", valor_cache)
            return valor_cache

        with self._lock:
            # Outra thread pode ter preenchido o cache enquanto esperávamos
            if self._valor_cache is None:
                inicio = time.perf_counter()
                self._valor_cache = self._orcamento.valor()
                logger.debug(
                    "Valor calculado e armazenado em cache: %s (%.3fs)",
                    self._valor_cache, time.perf_counter() - inicio
                )
            return self._valor_cache
