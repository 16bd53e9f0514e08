"""
Controllers do padrão MVC para o sistema de orçamentos
"""

from .orcamento_controller import OrcamentoController

__all__ = [
    'OrcamentoController'
]
