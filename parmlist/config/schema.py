"""
parmlist.config.schema

Declarative parameter contracts using dataclasses.

Design: A ParmSpec is the legal/required/defaults triple for one call
site, declared once and applied to every incoming parameter set.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from parmlist.core.types import RawParms
from parmlist.parms import ParmList, ValidationResult, validate_parms


def _check_names(names: List[str], what: str) -> None:
    if isinstance(names, str):
        raise ValueError(f"{what} must be a list of names, got a single string")
    for n in names:
        if not isinstance(n, str):
            raise ValueError(f"{what} names must be strings, got {n!r}")


@dataclass
class ParmSpec:
    """Parameter contract for one call site.

    Attributes:
        legal: Allowed names, or None to accept any name.
        required: Names that must be present.
        defaults: Values used for names the caller leaves out.
    """
    legal: Optional[List[str]] = None
    required: List[str] = field(default_factory=list)
    defaults: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.legal is not None:
            _check_names(self.legal, "legal")
        _check_names(self.required, "required")
        if not isinstance(self.defaults, dict):
            raise ValueError(f"defaults must be a mapping, got {type(self.defaults).__name__}")
        _check_names(list(self.defaults), "defaults")

    def to_options(self, parms: Optional[RawParms] = None) -> Dict[str, Any]:
        """Return ParmList.new options applying this contract to parms."""
        return {
            "parms": parms,
            "legal": self.legal,
            "required": self.required,
            "defaults": self.defaults,
        }

    def parse(self, parms: Optional[RawParms] = None) -> ParmList:
        """Validate parms against this contract.

        Raises:
            ValidationError: If parms break the contract.
        """
        return ParmList(
            parms,
            legal=self.legal,
            required=self.required,
            defaults=self.defaults,
        )

    def validate(self, parms: Optional[RawParms] = None) -> ValidationResult:
        """Validate parms against this contract, returning the outcome."""
        return validate_parms(self.to_options(parms))
