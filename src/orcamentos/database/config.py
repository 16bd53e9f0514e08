"""
Configuração do banco de dados SQLite
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from ..config import carregar_configuracoes

DATABASE_URL = carregar_configuracoes().database_url


def criar_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # Necessário para SQLite
    return create_engine(url, connect_args=connect_args)


engine = criar_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency para obter sessão do banco"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Inicializa o banco criando todas as tabelas"""
    from . import models  # noqa: F401  registra as tabelas no metadata
    Base.metadata.create_all(bind=bind or engine)
