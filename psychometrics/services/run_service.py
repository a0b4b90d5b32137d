"""
LLM Psychometrics — RunService: persistence of completed test runs.

Each run is one row in ``runs``.  The stored shape mirrors the profile:
``config`` holds ``{"systemPrompt": ...}``, ``results`` the per-inventory
results keyed by inventory name, ``logs`` the verification log, and
``created_at`` the profile timestamp.

All public methods accept an optional ``db_session`` parameter.  When
omitted, the service opens (and commits) its own session via
``async_session_factory``.  When an existing session is supplied, the
caller owns the transaction and the service only flushes.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from psychometrics.config import get_settings
from psychometrics.database import async_session_factory
from psychometrics.models.run import ModelRun
from psychometrics.schemas.inventory import ModelProfile
from psychometrics.schemas.run import RunRecord, RunSummary

logger = structlog.get_logger("psychometrics.run_service")


class RunService:
    """Save, fetch and list persisted runs."""

    # ══════════════════════════════════════════════════════════════════════
    # 1. save_run
    # ══════════════════════════════════════════════════════════════════════

    async def save_run(
        self,
        profile: ModelProfile,
        db_session: AsyncSession | None = None,
    ) -> str:
        """Persist ``profile`` and return the new run id.

        Parameters
        ----------
        profile:
            A completed ``ModelProfile``.  A missing persona is stored as
            ``DEFAULT_PERSONA``; missing logs as an empty list.
        db_session:
            An active async SQLAlchemy session, or ``None`` to auto-manage.
        """
        run = ModelRun(
            id=uuid.uuid4(),
            model_name=profile.model_name,
            persona=profile.persona or get_settings().DEFAULT_PERSONA,
            config={"systemPrompt": profile.system_prompt},
            results={
                name: result.model_dump(mode="json")
                for name, result in profile.results.items()
            },
            logs=[entry.model_dump(mode="json") for entry in profile.logs or []],
            created_at=datetime.fromtimestamp(profile.timestamp / 1000, tz=timezone.utc),
        )
        log = logger.bind(run_id=str(run.id), model_name=run.model_name, persona=run.persona)

        if db_session is not None:
            db_session.add(run)
            await db_session.flush()
        else:
            async with async_session_factory() as session:
                session.add(run)
                await session.commit()

        log.info("run_saved", inventories=sorted(run.results))
        return str(run.id)

    # ══════════════════════════════════════════════════════════════════════
    # 2. get_run
    # ══════════════════════════════════════════════════════════════════════

    async def get_run(
        self,
        run_id: str,
        db_session: AsyncSession | None = None,
    ) -> Optional[RunRecord]:
        """Return the stored run, or ``None`` when the id is unknown or malformed."""
        try:
            key = uuid.UUID(str(run_id))
        except ValueError:
            logger.info("get_run_invalid_id", run_id=run_id)
            return None

        async def _execute(session: AsyncSession) -> Optional[ModelRun]:
            return await session.get(ModelRun, key)

        if db_session is not None:
            row = await _execute(db_session)
        else:
            async with async_session_factory() as session:
                row = await _execute(session)

        if row is None:
            logger.info("get_run_not_found", run_id=run_id)
            return None
        return self._row_to_record(row)

    # ══════════════════════════════════════════════════════════════════════
    # 3. list_runs
    # ══════════════════════════════════════════════════════════════════════

    async def list_runs(
        self,
        limit: Optional[int] = None,
        model_name: Optional[str] = None,
        db_session: AsyncSession | None = None,
    ) -> list[RunRecord]:
        """Return stored runs, newest first.

        Parameters
        ----------
        limit:
            Maximum rows to return; defaults to ``RUN_QUERY_LIMIT``.
        model_name:
            Restrict to runs of a single model.
        """
        limit = limit or get_settings().RUN_QUERY_LIMIT
        stmt = select(ModelRun).order_by(ModelRun.created_at.desc()).limit(limit)
        if model_name is not None:
            stmt = stmt.where(ModelRun.model_name == model_name)

        async def _execute(session: AsyncSession) -> list[ModelRun]:
            result = await session.execute(stmt)
            return list(result.scalars().all())

        if db_session is not None:
            rows = await _execute(db_session)
        else:
            async with async_session_factory() as session:
                rows = await _execute(session)

        logger.info("list_runs_complete", count=len(rows), model_name=model_name)
        return [self._row_to_record(row) for row in rows]

    async def list_profiles(
        self,
        limit: Optional[int] = None,
        model_name: Optional[str] = None,
        db_session: AsyncSession | None = None,
    ) -> list[ModelProfile]:
        records = await self.list_runs(limit, model_name, db_session)
        return [record.profile for record in records]

    # ══════════════════════════════════════════════════════════════════════
    # Helpers
    # ══════════════════════════════════════════════════════════════════════

    @staticmethod
    def summarise(record: RunRecord) -> RunSummary:
        return RunSummary(
            id=record.id,
            model_name=record.profile.model_name,
            persona=record.profile.persona,
            created_at=record.created_at,
            inventories=sorted(record.profile.results),
        )

    @staticmethod
    def _row_to_record(row: ModelRun) -> RunRecord:
        created_at = row.created_at
        # SQLite hands back naive datetimes.
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        config: dict[str, Any] = row.config or {}
        profile = ModelProfile(
            model_name=row.model_name,
            persona=row.persona or get_settings().DEFAULT_PERSONA,
            system_prompt=config.get("systemPrompt"),
            timestamp=round(created_at.timestamp() * 1000),
            results=row.results or {},
            logs=row.logs or [],
        )
        return RunRecord(id=str(row.id), created_at=created_at, profile=profile)
