import time

from .composite import Orcavel


class OrcamentoDecorator(Orcavel):
    """Decorator base: delega o valor ao orçamento encapsulado"""

    def __init__(self, orcamento: Orcavel):
        self._orcamento = orcamento

    def valor(self) -> float:
        return self._orcamento.valor()


class OrcamentoLento(OrcamentoDecorator):
    """Simula um cálculo custoso atrasando cada chamada a valor()"""

    def __init__(self, orcamento: Orcavel, atraso_segundos: float = 5.0):
        super().__init__(orcamento)
        self._atraso_segundos = atraso_segundos

    def valor(self) -> float:
        if self._atraso_segundos > 0:
            time.sleep(self._atraso_segundos)
        return self._orcamento.valor()
