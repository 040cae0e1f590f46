"""
parmlist.parms.functions

Function-style entry points.

Design: parse_parms raises, validate_parms returns the failure as a
value, simple_parms treats any mismatch as a broken call site.
"""

import logging
from typing import Any, List, Sequence, Union

from parmlist.core.exceptions import UsageFault, ValidationError
from parmlist.core.names import normalize_name
from parmlist.core.types import RawParms
from parmlist.core.validation import coerce_parms
from .parmlist import ParmList
from .result import ValidationResult

_LOG = logging.getLogger(__name__)


def parse_parms(*options: Any) -> ParmList:
    """Validate named parameters without going through the class.

    Takes the same options as ParmList.new.

    Raises:
        ValidationError: If the parameters do not validate.
    """
    return ParmList.new(*options)


def validate_parms(*options: Any) -> ValidationResult:
    """Validate named parameters and return the outcome as a value.

    Takes the same options as ParmList.new. Never raises ValidationError;
    check result.ok or call result.unwrap().

    Example:
        result = validate_parms({"-parms": raw, "-required": ["-file"]})
        if not result.ok:
            log.warning(result.message)
    """
    try:
        return ValidationResult(parms=ParmList.new(*options))
    except ValidationError as e:
        return ValidationResult(error=e)


def simple_parms(names: Union[str, Sequence[str]], parms: RawParms) -> Any:
    """Resolve an exact set of named parameters.

    Every name in names must be present in parms and parms may hold
    nothing else. A name present with value None counts as present.

    Args:
        names: The parameter names, or a single name.
        parms: Mapping or flat [name, value, ...] list.

    Returns:
        The values in names order; the bare value when only one name
        was requested.

    Raises:
        UsageFault: On missing or unexpected names, or malformed parms.
    """
    try:
        if isinstance(names, str):
            names = [names]
        names = list(names)
        if len(names) == 0:
            raise UsageFault("simple_parms() called without any parameter names")
        keys = [normalize_name(n) for n in names]
        values = coerce_parms(parms)
    except (TypeError, ValidationError) as e:
        raise UsageFault(f"simple_parms(): {e}") from e

    problems: List[str] = []
    for key in dict.fromkeys(keys):
        if key not in values:
            problems.append(f"Required parameter '{key}' missing")
    wanted = set(keys)
    for key in values:
        if key not in wanted:
            problems.append(f"Parameter '{key}' not legal here")

    if problems:
        _LOG.debug("simple_parms rejected call: %s", "; ".join(problems))
        raise UsageFault("simple_parms(): " + "\n".join(problems))

    if len(keys) == 1:
        return values[keys[0]]
    return tuple(values[k] for k in keys)
