"""
Padrão Composite para orçamentos

Um `Orcamento` agrega itens (`ItemOrcamento`) e outros orçamentos; ambos
atendem ao contrato `Orcavel.valor()`, e o valor total é a soma recursiva
das entradas.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from ..exceptions import OrcamentoCiclicoError
from .state import EmAprovacao, EstadoOrcamento


class Orcavel(ABC):
    """Interface comum a tudo que possui valor monetário"""

    @abstractmethod
    def valor(self) -> float:
        pass


class ItemOrcamento(Orcavel):
    """Folha do Composite"""

    def __init__(self, valor: float = 0.0):
        self.valor_item = valor

    def valor(self) -> float:
        return self.valor_item

    def __repr__(self):
        return f"ItemOrcamento(valor={self.valor_item!r})"


class Orcamento(Orcavel):
    """Composite: soma recursivamente o valor das entradas a cada chamada"""

    def __init__(self):
        self._itens: List[Orcavel] = []
        self.estado_atual: EstadoOrcamento = EmAprovacao()
        self.desconto_extra = 0.0

    @property
    def itens(self) -> Tuple[Orcavel, ...]:
        return tuple(self._itens)

    @property
    def quantidade_itens(self) -> int:
        return len(self._itens)

    def add_item(self, item: Orcavel):
        """Adiciona uma entrada ao final do orçamento.

        Recusa com OrcamentoCiclicoError um orçamento que seja o próprio
        receptor ou que o contenha em qualquer nível.
        """
        if isinstance(item, Orcamento) and item.contem(self):
            raise OrcamentoCiclicoError()
        self._itens.append(item)

    def contem(self, alvo: "Orcamento") -> bool:
        """Verifica se `alvo` é este orçamento ou está aninhado nele"""
        pendentes = [self]
        visitados = set()
        while pendentes:
            atual = pendentes.pop()
            if atual is alvo:
                return True
            if id(atual) in visitados:
                continue
            visitados.add(id(atual))
            pendentes.extend(i for i in atual._itens if isinstance(i, Orcamento))
        return False

    def valor(self) -> float:
        return sum((item.valor() for item in self._itens), 0)

    # Estados (padrão State)
    def aprova(self):
        self.estado_atual.aprova(self)

    def reprova(self):
        self.estado_atual.reprova(self)

    def finaliza(self):
        self.estado_atual.finaliza(self)

    def aplica_desconto_extra(self) -> float:
        """Acumula o desconto do estado atual e retorna o valor descontado"""
        desconto = self.estado_atual.calcula_desconto_extra(self)
        self.desconto_extra += desconto
        return desconto

    def valor_com_desconto(self) -> float:
        return self.valor() - self.desconto_extra

    def __repr__(self):
        return f"Orcamento(itens={self.quantidade_itens}, estado='{self.estado_atual}')"
