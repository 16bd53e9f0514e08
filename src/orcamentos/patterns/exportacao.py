from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .composite import Orcavel
from .flyweight import Pedido


class ConteudoExportado(ABC):
    """Conteúdo a ser exportado, independente do formato do arquivo"""

    @abstractmethod
    def conteudo(self) -> Dict[str, Any]:
        pass


class OrcamentoExportado(ConteudoExportado):
    def __init__(self, orcamento: Orcavel, quantidade_itens: Optional[int] = None):
        self._orcamento = orcamento
        if quantidade_itens is None:
            quantidade_itens = getattr(orcamento, "quantidade_itens", 0)
        self._quantidade_itens = quantidade_itens

    def conteudo(self) -> Dict[str, Any]:
        return {
            "valor": self._orcamento.valor(),
            "quantidade_itens": self._quantidade_itens,
        }


class PedidoExportado(ConteudoExportado):
    def __init__(self, pedido: Pedido):
        self._pedido = pedido

    def conteudo(self) -> Dict[str, Any]:
        return {
            "data_finalizacao": self._pedido.data_finalizacao.strftime("%d/%m/%Y"),
            "nome_cliente": self._pedido.nome_cliente,
        }


class ArquivoExportado(ABC):
    """Formato de arquivo (XML, ZIP, ...) que salva um conteúdo exportado"""

    @abstractmethod
    def salvar(self, conteudo_exportado: ConteudoExportado) -> str:
        """Salva o conteúdo e retorna o nome do arquivo ou o payload gerado"""
        pass
