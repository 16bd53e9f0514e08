"""
Sistema de Seeds para popular o banco de dados
"""
from typing import Optional

from sqlalchemy.orm import Session

from .config import SessionLocal
from .crud import OrcamentoRepository
from .models import OrcamentoModel


def create_orcamento_exemplo(db: Session) -> OrcamentoModel:
    """Cria o orçamento de exemplo: 300 + 500 + [150] + [50, 100] = 1100"""
    repo = OrcamentoRepository(db)

    orcamento = repo.create_orcamento("Orçamento atual")
    repo.add_item(orcamento, 300, "Item 1")
    repo.add_item(orcamento, 500, "Item 2")

    orcamento_antigo = repo.create_orcamento("Orçamento antigo")
    repo.add_item(orcamento_antigo, 150, "Item 3")

    orcamento_mais_antigo = repo.create_orcamento("Orçamento mais antigo ainda")
    repo.add_item(orcamento_mais_antigo, 50, "Item 4")
    repo.add_item(orcamento_mais_antigo, 100, "Item 5")

    repo.add_sub_orcamento(orcamento, orcamento_antigo)
    repo.add_sub_orcamento(orcamento, orcamento_mais_antigo)
    return orcamento


def run_seeds(db: Optional[Session] = None):
    """Popula o banco caso ainda não existam orçamentos"""
    sessao = db or SessionLocal()
    try:
        if sessao.query(OrcamentoModel).count() > 0:
            print("⚠️ Orçamentos já existem no banco, pulando criação...")
            return None
        orcamento = create_orcamento_exemplo(sessao)
        print(f"✅ Orçamento de exemplo criado (id={orcamento.id})")
        return orcamento
    finally:
        if db is None:
            sessao.close()
