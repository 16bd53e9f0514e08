"""
Padrões GoF implementados para o sistema de orçamentos
"""
from .adapter import HttpAdapter, RegistroOrcamento
from .composite import ItemOrcamento, Orcamento, Orcavel
from .decorator import OrcamentoDecorator, OrcamentoLento
from .exportacao import ArquivoExportado, ConteudoExportado, OrcamentoExportado, PedidoExportado
from .factory import CriadorDePedido
from .flyweight import DadosExtrinsecosPedido, Pedido
from .proxy import CacheOrcamentoProxy
from .state import Aprovado, EmAprovacao, EstadoOrcamento, Finalizado, Reprovado, estado_por_chave
from .strategy import CalculadoraDeImpostos, Icms, Imposto, Iss, imposto_por_nome

__all__ = [
    # Composite Pattern
    'Orcavel',
    'ItemOrcamento',
    'Orcamento',

    # Proxy Pattern
    'CacheOrcamentoProxy',

    # Decorator Pattern
    'OrcamentoDecorator',
    'OrcamentoLento',

    # State Pattern
    'EstadoOrcamento',
    'EmAprovacao',
    'Aprovado',
    'Reprovado',
    'Finalizado',
    'estado_por_chave',

    # Strategy Pattern
    'Imposto',
    'Icms',
    'Iss',
    'CalculadoraDeImpostos',
    'imposto_por_nome',

    # Flyweight / Factory
    'DadosExtrinsecosPedido',
    'Pedido',
    'CriadorDePedido',

    # Adapter Pattern
    'HttpAdapter',
    'RegistroOrcamento',

    # Exportação
    'ConteudoExportado',
    'OrcamentoExportado',
    'PedidoExportado',
    'ArquivoExportado'
]
