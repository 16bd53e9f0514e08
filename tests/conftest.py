import threading

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from orcamentos.app import create_app
from orcamentos.database import get_db, init_db
from orcamentos.patterns import ItemOrcamento, Orcamento, Orcavel


class OrcamentoContado(Orcavel):
    """Conta quantas vezes o valor do orçamento encapsulado foi calculado"""

    def __init__(self, orcamento: Orcavel):
        self._orcamento = orcamento
        self._lock = threading.Lock()
        self.chamadas = 0

    def valor(self) -> float:
        with self._lock:
            self.chamadas += 1
        return self._orcamento.valor()


def novo_orcamento(*valores) -> Orcamento:
    orcamento = Orcamento()
    for valor in valores:
        orcamento.add_item(ItemOrcamento(valor))
    return orcamento


@pytest.fixture
def orcamento_exemplo():
    """300 + 500 + [150] + [50, 100] = 1100"""
    orcamento = novo_orcamento(300, 500)
    orcamento.add_item(novo_orcamento(150))
    orcamento.add_item(novo_orcamento(50, 100))
    return orcamento


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
