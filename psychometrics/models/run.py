"""
LLM Psychometrics — ModelRun model (one persisted test run).
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, String, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from psychometrics.config import get_settings
from psychometrics.database import Base

JSONType = JSON().with_variant(JSONB(), "postgresql")


class ModelRun(Base):
    __tablename__ = "runs"
    __table_args__ = (
        Index("ix_runs_model_persona", "model_name", "persona"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    model_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    persona: Mapped[str] = mapped_column(
        String, nullable=False, default=lambda: get_settings().DEFAULT_PERSONA
    )
    config: Mapped[dict | None] = mapped_column(
        JSONType, nullable=True, comment='{"systemPrompt": ...}'
    )
    results: Mapped[dict] = mapped_column(
        JSONType, nullable=False, comment="inventory key -> InventoryResult"
    )
    logs: Mapped[list | None] = mapped_column(
        JSONType, nullable=True, comment="Array of verification log entries"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<ModelRun model={self.model_name!r} "
            f"persona={self.persona!r} results={sorted(self.results or {})}>"
        )
