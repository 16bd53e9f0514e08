"""
Módulo de banco de dados
"""
from .config import Base, get_db, init_db
from .crud import BaseRepository, OrcamentoRepository
from .models import EstadoOrcamentoEnum, ItemOrcamentoModel, OrcamentoModel
from .seeds import run_seeds

__all__ = [
    'Base',
    'get_db',
    'init_db',
    'run_seeds',
    'BaseRepository',
    'OrcamentoRepository',
    'OrcamentoModel',
    'ItemOrcamentoModel',
    'EstadoOrcamentoEnum'
]
