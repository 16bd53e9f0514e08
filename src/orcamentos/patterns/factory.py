from datetime import date, datetime
from typing import Callable, Dict, Optional, Tuple

from .composite import ItemOrcamento, Orcamento
from .flyweight import DadosExtrinsecosPedido, Pedido


class CriadorDePedido:
    """Factory de pedidos que reaproveita os dados extrínsecos (Flyweight)"""

    def __init__(self, relogio: Optional[Callable[[], datetime]] = None):
        self._relogio = relogio or datetime.now
        self._dados: Dict[Tuple[str, date], DadosExtrinsecosPedido] = {}

    def cria_pedido(self, nome_cliente: str, valor_orcamento: float, numero_itens: int) -> Pedido:
        """Cria um pedido cujo orçamento tem `numero_itens` itens somando `valor_orcamento`"""
        dados = self._obter_dados(nome_cliente)

        orcamento = Orcamento()
        if numero_itens > 0:
            valor_por_item = valor_orcamento / numero_itens
            for _ in range(numero_itens):
                orcamento.add_item(ItemOrcamento(valor_por_item))

        return Pedido(orcamento, dados)

    def _obter_dados(self, nome_cliente: str) -> DadosExtrinsecosPedido:
        agora = self._relogio()
        chave = (nome_cliente, agora.date())
        if chave not in self._dados:
            self._dados[chave] = DadosExtrinsecosPedido(nome_cliente, agora)
        return self._dados[chave]

    @property
    def quantidade_dados_em_cache(self) -> int:
        return len(self._dados)
