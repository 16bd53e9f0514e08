"""
Configurações da aplicação lidas do ambiente (.env)
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Configuracoes:
    database_url: str
    atraso_calculo: float
    api_registro_url: str
    log_level: str


def carregar_configuracoes() -> Configuracoes:
    """Lê as variáveis de ambiente no momento da chamada"""
    return Configuracoes(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./orcamentos.db"),
        atraso_calculo=float(os.getenv("ORCAMENTO_ATRASO_CALCULO", "0")),
        api_registro_url=os.getenv("ORCAMENTO_API_URL", "http://api.registrar/orcamentos"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
