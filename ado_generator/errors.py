"""
Error Types
===========

Every true failure of the generation pipeline derives from GenerationError.
A degraded classification (empty or unknown label) is not an error and is
never raised.
"""

from typing import Optional


class GenerationError(Exception):
    """Base error for the generation pipeline.

    The pipeline fills in `stage` and `query` before re-raising so the
    caller can tell which request and which step failed.
    """

    def __init__(self, message: str, stage: Optional[str] = None, query: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.query = query

    def __str__(self) -> str:
        parts = [self.message]
        if self.stage:
            parts.append(f"stage={self.stage}")
        if self.query is not None:
            parts.append(f"query={self.query!r}")
        return " | ".join(parts)


class ModelInvocationError(GenerationError):
    """Transport or timeout failure while talking to the model"""


class CatalogIntegrityError(GenerationError):
    """The catalog references reference data it cannot provide"""


class PersistenceError(GenerationError):
    """Writing an artifact or the generation index failed"""
