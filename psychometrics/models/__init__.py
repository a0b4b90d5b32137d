"""
LLM Psychometrics — ORM model registry.

Importing every model here ensures that Alembic (and any other tool that
inspects ``Base.metadata``) discovers all tables automatically.
"""

from psychometrics.models.run import ModelRun

__all__ = [
    "ModelRun",
]
