"""
parmlist.core.types

Shared constants and type aliases.
"""

from typing import Any, Mapping, Sequence, Union

# Construction option names, already normalized
PARMS = "parms"
LEGAL = "legal"
REQUIRED = "required"
DEFAULTS = "defaults"

OPTION_NAMES = (PARMS, LEGAL, REQUIRED, DEFAULTS)

# A mapping of name -> value, or a flat [name, value, name, value, ...] list
RawParms = Union[Mapping[str, Any], Sequence[Any]]
