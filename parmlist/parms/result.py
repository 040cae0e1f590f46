"""
parmlist.parms.result

Construction outcome as a value.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from parmlist.core.exceptions import ValidationError
from .parmlist import ParmList


@dataclass(frozen=True)
class ValidationResult:
    """Either a validated ParmList or the ValidationError explaining why not.

    Exactly one of parms and error is set. Not hashable when it holds a
    ParmList, because ParmList itself is not.

    Attributes:
        parms: The validated parameters on success.
        error: The validation failure otherwise.
    """
    parms: Optional[ParmList] = None
    error: Optional[ValidationError] = None

    def __post_init__(self):
        if (self.parms is None) == (self.error is None):
            raise ValueError("ValidationResult needs exactly one of parms or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Newline-joined error report, empty on success."""
        return "" if self.error is None else str(self.error)

    @property
    def messages(self) -> Tuple[str, ...]:
        return () if self.error is None else self.error.messages

    def unwrap(self) -> ParmList:
        """Return the ParmList, or raise the stored ValidationError."""
        if self.error is not None:
            raise self.error
        return self.parms

    def __bool__(self) -> bool:
        return self.ok
