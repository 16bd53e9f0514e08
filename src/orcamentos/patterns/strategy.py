from abc import ABC, abstractmethod

from .composite import Orcavel


class Imposto(ABC):
    """Interface Strategy para cálculo de impostos"""

    @abstractmethod
    def calcula(self, orcamento: Orcavel) -> float:
        """Calcula o imposto sobre o valor do orçamento"""
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        pass


class Icms(Imposto):
    def calcula(self, orcamento: Orcavel) -> float:
        """10% sobre o valor"""
        return orcamento.valor() * 0.10

    def get_descricao(self) -> str:
        return "ICMS (10%)"


class Iss(Imposto):
    def calcula(self, orcamento: Orcavel) -> float:
        """6% sobre o valor"""
        return orcamento.valor() * 0.06

    def get_descricao(self) -> str:
        return "ISS (6%)"


class CalculadoraDeImpostos:
    """Contexto que aplica a strategy de imposto escolhida"""

    def calcula(self, orcamento: Orcavel, imposto: Imposto) -> float:
        return imposto.calcula(orcamento)


def imposto_por_nome(nome: str) -> Imposto:
    impostos = {
        "icms": Icms,
        "iss": Iss,
    }
    try:
        return impostos[nome.lower()]()
    except KeyError:
        raise ValueError(f"Imposto desconhecido: '{nome}'")
