"""
Sistema de Orçamentos - Padrões GoF
Composite de orçamentos com Proxy de cache e padrões auxiliares
"""

__version__ = "1.0.0"
