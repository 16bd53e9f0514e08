"""
Modelos SQLAlchemy para o banco de dados
"""
import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .config import Base


class EstadoOrcamentoEnum(enum.Enum):
    EM_APROVACAO = "em_aprovacao"
    APROVADO = "aprovado"
    REPROVADO = "reprovado"
    FINALIZADO = "finalizado"


class OrcamentoModel(Base):
    __tablename__ = "orcamentos"

    id = Column(Integer, primary_key=True, index=True)
    descricao = Column(String(200))
    estado = Column(Enum(EstadoOrcamentoEnum), default=EstadoOrcamentoEnum.EM_APROVACAO, nullable=False)
    desconto_extra = Column(Float, default=0.0, nullable=False)
    posicao = Column(Integer)  # posição dentro do orçamento pai
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relacionamentos
    parent_id = Column(Integer, ForeignKey("orcamentos.id"))
    parent = relationship("OrcamentoModel", remote_side=[id], back_populates="sub_orcamentos")
    sub_orcamentos = relationship("OrcamentoModel", back_populates="parent")
    itens = relationship("ItemOrcamentoModel", back_populates="orcamento")


class ItemOrcamentoModel(Base):
    __tablename__ = "itens_orcamento"

    id = Column(Integer, primary_key=True, index=True)
    valor = Column(Float, nullable=False)
    descricao = Column(String(200))
    posicao = Column(Integer, nullable=False)

    # Relacionamentos
    orcamento_id = Column(Integer, ForeignKey("orcamentos.id"), nullable=False)
    orcamento = relationship("OrcamentoModel", back_populates="itens")
