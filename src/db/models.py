"""SQLAlchemy declarative base for all ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.types import JSON


class Base(DeclarativeBase):
    """Base class for all database models."""


class AgentModel(Base):
    """ORM model for a saved NPC agent."""

    __tablename__ = "village_agents"

    name: Mapped[str] = mapped_column(String, primary_key=True)
    # 로스터 순서 보존
    seq: Mapped[int] = mapped_column(Integer, nullable=False)
    x: Mapped[float] = mapped_column(Float, nullable=False)
    y: Mapped[float] = mapped_column(Float, nullable=False)
    personality: Mapped[dict] = mapped_column(JSON, nullable=False)
    emotion: Mapped[dict] = mapped_column(JSON, nullable=False)
    relationships: Mapped[dict] = mapped_column(JSON, default=dict)
    saved_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    memories: Mapped[list["MemoryModel"]] = relationship(
        "MemoryModel",
        back_populates="agent",
        cascade="all, delete-orphan",
        order_by="MemoryModel.seq",
    )


class MemoryModel(Base):
    """ORM model for one stored memory."""

    __tablename__ = "village_memories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    agent_name: Mapped[str] = mapped_column(
        String, ForeignKey("village_agents.name", ondelete="CASCADE"), nullable=False
    )
    # MemoryStore 내 순서
    seq: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    importance: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[float] = mapped_column(Float, nullable=False)

    agent: Mapped["AgentModel"] = relationship("AgentModel", back_populates="memories")
