"""Error types raised by the SepsisWatch core."""

from typing import Optional


class SepsisWatchError(Exception):
    """Base exception for SepsisWatch errors"""
    pass


class InvalidVitalsError(SepsisWatchError, ValueError):
    """Raised when vitals needed for qSOFA scoring are missing or malformed"""
    pass


class PatientImportError(SepsisWatchError, ValueError):
    """
    Raised when an import payload cannot be turned into a patient list.

    Attributes:
        reason: Human-readable description of the failure.
        index: Position of the offending record in the payload, if the
            failure belongs to a single record.
    """

    def __init__(self, reason: str, index: Optional[int] = None):
        self.reason = reason
        self.index = index
        super().__init__(reason)


class SelectionIndexError(SepsisWatchError, IndexError):
    """Raised when selecting a patient index outside the loaded list"""
    pass


class InvariantViolation(SepsisWatchError, RuntimeError):
    """Raised when a scoring contract is broken (programming error)"""
    pass
