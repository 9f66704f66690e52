"""
Exception hierarchy for the presentation tab.

None of these are fatal: every one of them is turned into a user-facing
notice and the tab goes back to an interactive state.
"""

from typing import Any, Dict, Optional


class PresentationError(Exception):
    """Base exception for presentation tab errors"""

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.cause = cause
        self.context = context or {}

    def __str__(self):
        parts = [super().__str__()]
        if self.cause:
            parts.append(f" (caused by: {type(self.cause).__name__}: {str(self.cause)})")
        if self.context:
            parts.append(f" Context: {self.context}")
        return "".join(parts)


class PreconditionError(PresentationError):
    """Generation attempted without a loaded document"""
    pass


class GenerationInProgressError(PresentationError):
    """A generation request is already outstanding for this tab"""
    pass


class TransportError(PresentationError):
    """The generation service could not be reached or answered with garbage"""
    pass
