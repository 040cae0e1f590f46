"""
parmlist

Named-parameter validation for function and method calls.

    from parmlist import ParmList

    def draw_table(**kwargs):
        parms = ParmList(
            kwargs,
            legal=["textcolor", "border"],
            required=["bgcolor"],
            defaults={"bgcolor": "#ffffff", "textcolor": "#000000"},
        )
        bgcolor, border = parms.get("bgcolor", "border")
"""

from .core import (
    ParmListError,
    ValidationError,
    UsageFault,
    ConfigError,
    normalize_name,
)

from .parms import (
    ParmList,
    last_error,
    ValidationResult,
    parse_parms,
    validate_parms,
    simple_parms,
)

from .config import (
    ParmSpec,
    load_spec,
    load_specs,
    save_spec,
)

__version__ = "1.2.0"

__all__ = [
    "ParmListError",
    "ValidationError",
    "UsageFault",
    "ConfigError",
    "normalize_name",
    "ParmList",
    "last_error",
    "ValidationResult",
    "parse_parms",
    "validate_parms",
    "simple_parms",
    "ParmSpec",
    "load_spec",
    "load_specs",
    "save_spec",
    "__version__",
]
