"""
parmlist.parms

Validated named-parameter lists.

Exports:
- ParmList container
- ValidationResult
- Function-style entry points
"""

from .parmlist import ParmList, last_error
from .result import ValidationResult
from .functions import parse_parms, validate_parms, simple_parms

__all__ = [
    "ParmList",
    "last_error",
    "ValidationResult",
    "parse_parms",
    "validate_parms",
    "simple_parms",
]
