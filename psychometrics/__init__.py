"""LLM Psychometrics — standardized personality inventories for language models."""

__version__ = "1.0.0"
