from __future__ import annotations

from typing import Optional

from .patterns import MATCHERS_BY_KIND, SpecialKind


class SuggestionError(RuntimeError):
    """Base class for failures while building translation suggestions."""


class MappingMismatchError(SuggestionError):
    """Raised when a translated special substring has no English counterpart."""

    def __init__(self, kind: SpecialKind, occurrence: Optional[str] = None):
        super().__init__(MATCHERS_BY_KIND[kind].mismatch_message)
        self.kind = kind
        self.occurrence = occurrence


class NoTranslationPairError(SuggestionError):
    """Raised when none of the reference pairs has both strings filled in."""

    def __init__(self, message: str = "couldn't find translation pair"):
        super().__init__(message)
