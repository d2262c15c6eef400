"""
Resolution result types returned by the recipe resolver.
A resolution is either a summary or a failure, never both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.enums import ResolutionErrorKind
from domain.schemas.summary_schemas import RecipeSummary


@dataclass(frozen=True)
class ResolutionFailure:
    kind: ResolutionErrorKind
    name: str  # entry the failure refers to
    message: str


@dataclass(frozen=True)
class Resolution:
    summary: Optional[RecipeSummary] = None
    failure: Optional[ResolutionFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def succeeded(cls, summary: RecipeSummary) -> "Resolution":
        return cls(summary=summary)

    @classmethod
    def failed(cls, failure: ResolutionFailure) -> "Resolution":
        return cls(failure=failure)
