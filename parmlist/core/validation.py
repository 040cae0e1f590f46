"""
parmlist.core.validation

Boundary validation for construction options.

Design: Validate option shapes at the API boundary, trust internally.
All validation functions raise ValidationError on failure.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Dict, List, Tuple

from .exceptions import ValidationError
from .names import normalize_mapping, normalize_names
from .types import OPTION_NAMES


def _is_flat_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def pairs_to_dict(items: Sequence[Any], name: str = "parameter list") -> Dict[Any, Any]:
    """Turn a flat [key, value, key, value, ...] sequence into a dict.

    Raises:
        ValidationError: If the sequence has an odd number of elements.
    """
    if len(items) % 2 != 0:
        raise ValidationError(
            f"Odd number of elements ({len(items)}) in {name}, expected name/value pairs"
        )
    try:
        return {items[i]: items[i + 1] for i in range(0, len(items), 2)}
    except TypeError as e:
        raise ValidationError(f"Unusable name in {name}: {e}") from e


def coerce_parms(raw: Any, name: str = "parms") -> Dict[str, Any]:
    """Normalize raw parameters given as a mapping or flat pair sequence.

    Returns:
        New dict keyed by normalized names.

    Raises:
        ValidationError: If raw is neither form, is odd-length, or holds
            a non-string name.
    """
    if isinstance(raw, Mapping):
        mapping = raw
    elif _is_flat_sequence(raw):
        mapping = pairs_to_dict(raw, name)
    else:
        raise ValidationError(
            f"Option '{name}' must be a mapping or a flat name/value list, "
            f"got {type(raw).__name__}"
        )

    try:
        return normalize_mapping(mapping)
    except TypeError as e:
        raise ValidationError(f"Option '{name}': {e}") from e


def validate_defaults(defaults: Any) -> Dict[str, Any]:
    """Normalize the defaults option, which must be a mapping."""
    if not isinstance(defaults, Mapping):
        raise ValidationError(
            f"Option 'defaults' must be a mapping, got {type(defaults).__name__}"
        )
    try:
        return normalize_mapping(defaults)
    except TypeError as e:
        raise ValidationError(f"Option 'defaults': {e}") from e


def validate_name_list(names: Any, option: str) -> List[str]:
    """Normalize a list of parameter names (legal or required option).

    Any iterable of strings is accepted except a bare string or a mapping;
    a bare string is almost always a missing list bracket.
    """
    if isinstance(names, (str, bytes, Mapping)) or not isinstance(names, Iterable):
        raise ValidationError(
            f"Option '{option}' must be a list of names, got {type(names).__name__}"
        )
    try:
        return normalize_names(names)
    except TypeError as e:
        raise ValidationError(f"Option '{option}': {e}") from e


def normalize_option_name(name: Any) -> str:
    """Canonical form of a construction option name: '-Parms' -> 'parms'."""
    if not isinstance(name, str):
        return repr(name)
    return name.lower().lstrip("-")


def parse_options(args: Tuple[Any, ...], caller: str = "ParmList.new") -> Dict[str, Any]:
    """Collect construction options from positional call arguments.

    Accepted forms:
        ()                                   no options
        ({"-parms": ..., "-legal": ...})     one options mapping
        (["-parms", ..., "-legal", ...])     one flat options list
        ("-parms", ..., "-legal", ...)       flat positional pairs

    Option names are case-insensitive and the leading dash is optional.
    A None option value counts as not given.

    Raises:
        ValidationError: On unrecognized option names or odd pair counts.
    """
    if len(args) == 0 or (len(args) == 1 and args[0] is None):
        return {}

    if len(args) == 1 and isinstance(args[0], Mapping):
        raw = dict(args[0])
    elif len(args) == 1 and _is_flat_sequence(args[0]):
        raw = pairs_to_dict(args[0], f"options passed to {caller}")
    else:
        raw = pairs_to_dict(args, f"options passed to {caller}")

    options: Dict[str, Any] = {}
    bad: List[str] = []
    for key, value in raw.items():
        option = normalize_option_name(key)
        if option not in OPTION_NAMES:
            bad.append(str(key))
            continue
        options[option] = value

    if bad:
        raise ValidationError(f"Invalid parameters ({' '.join(bad)}) passed to {caller}")

    return {k: v for k, v in options.items() if v is not None}
