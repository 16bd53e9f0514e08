"""
Padrão Flyweight para pedidos

Os dados extrínsecos (cliente e data de finalização) são imutáveis e
compartilhados entre todos os pedidos que os referenciam.
"""
from dataclasses import dataclass
from datetime import datetime

from .composite import Orcamento


@dataclass(frozen=True)
class DadosExtrinsecosPedido:
    nome_cliente: str
    data_finalizacao: datetime


class Pedido:
    def __init__(self, orcamento: Orcamento, dados: DadosExtrinsecosPedido):
        self.orcamento = orcamento
        self.dados = dados

    @property
    def nome_cliente(self) -> str:
        return self.dados.nome_cliente

    @property
    def data_finalizacao(self) -> datetime:
        return self.dados.data_finalizacao
