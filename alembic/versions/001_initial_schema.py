"""Initial schema — runs table.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "runs",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("model_name", sa.String, nullable=False),
        sa.Column(
            "persona",
            sa.String,
            server_default="Base Model",
            nullable=False,
        ),
        sa.Column(
            "config",
            JSONType,
            nullable=True,
            comment='{"systemPrompt": ...}',
        ),
        sa.Column(
            "results",
            JSONType,
            nullable=False,
            comment="inventory key -> InventoryResult",
        ),
        sa.Column(
            "logs",
            JSONType,
            nullable=True,
            comment="Array of verification log entries",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_runs_model_name", "runs", ["model_name"])
    op.create_index("ix_runs_model_persona", "runs", ["model_name", "persona"])


def downgrade() -> None:
    op.drop_index("ix_runs_model_persona", table_name="runs")
    op.drop_index("ix_runs_model_name", table_name="runs")
    op.drop_table("runs")
