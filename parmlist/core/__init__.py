"""
parmlist.core

Core infrastructure for parmlist.

Exports:
- Exception classes
- Name normalization
- Option constants
- Boundary validation utilities
"""

from .exceptions import (
    ParmListError,
    ValidationError,
    UsageFault,
    ConfigError,
)

from .names import (
    normalize_name,
    normalize_names,
    normalize_mapping,
)

from .types import (
    PARMS,
    LEGAL,
    REQUIRED,
    DEFAULTS,
    OPTION_NAMES,
    RawParms,
)

from .validation import (
    pairs_to_dict,
    coerce_parms,
    validate_defaults,
    validate_name_list,
    normalize_option_name,
    parse_options,
)

__all__ = [
    # Exceptions
    "ParmListError",
    "ValidationError",
    "UsageFault",
    "ConfigError",
    # Names
    "normalize_name",
    "normalize_names",
    "normalize_mapping",
    # Types
    "PARMS",
    "LEGAL",
    "REQUIRED",
    "DEFAULTS",
    "OPTION_NAMES",
    "RawParms",
    # Validation
    "pairs_to_dict",
    "coerce_parms",
    "validate_defaults",
    "validate_name_list",
    "normalize_option_name",
    "parse_options",
]
