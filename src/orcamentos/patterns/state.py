from abc import ABC, abstractmethod

from ..exceptions import TransicaoInvalidaError


class EstadoOrcamento(ABC):
    """Estado de aprovação de um orçamento (padrão State)"""

    chave: str = ""

    @abstractmethod
    def calcula_desconto_extra(self, orcamento) -> float:
        pass

    @abstractmethod
    def __str__(self):
        pass

    def aprova(self, orcamento):
        raise TransicaoInvalidaError(str(self), "aprovar")

    def reprova(self, orcamento):
        raise TransicaoInvalidaError(str(self), "reprovar")

    def finaliza(self, orcamento):
        raise TransicaoInvalidaError(str(self), "finalizar")

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))


class EmAprovacao(EstadoOrcamento):
    chave = "em_aprovacao"

    def calcula_desconto_extra(self, orcamento) -> float:
        return orcamento.valor() * 0.05

    def aprova(self, orcamento):
        orcamento.estado_atual = Aprovado()

    def reprova(self, orcamento):
        orcamento.estado_atual = Reprovado()

    def __str__(self):
        return "Em aprovação"


class Aprovado(EstadoOrcamento):
    chave = "aprovado"

    def calcula_desconto_extra(self, orcamento) -> float:
        return orcamento.valor() * 0.02

    def finaliza(self, orcamento):
        orcamento.estado_atual = Finalizado()

    def __str__(self):
        return "Aprovado"


class Reprovado(EstadoOrcamento):
    chave = "reprovado"

    def calcula_desconto_extra(self, orcamento) -> float:
        raise TransicaoInvalidaError(str(self), "aplicar desconto extra")

    def finaliza(self, orcamento):
        orcamento.estado_atual = Finalizado()

    def __str__(self):
        return "Reprovado"


class Finalizado(EstadoOrcamento):
    chave = "finalizado"

    def calcula_desconto_extra(self, orcamento) -> float:
        raise TransicaoInvalidaError(str(self), "aplicar desconto extra")

    def __str__(self):
        return "Finalizado"


def estado_por_chave(chave: str) -> EstadoOrcamento:
    """Mapeia a chave persistida no banco para a classe State"""
    estado_map = {
        "em_aprovacao": EmAprovacao,
        "aprovado": Aprovado,
        "reprovado": Reprovado,
        "finalizado": Finalizado,
    }
    try:
        return estado_map[chave]()
    except KeyError:
        raise ValueError(f"Estado desconhecido: '{chave}'")
