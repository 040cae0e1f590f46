"""
parmlist.core.names

Parameter name normalization.

Design: Every name crossing the API boundary goes through normalize_name,
so construction, get() and exists() always agree on what a name is.
"""

from typing import Any, Dict, Iterable, List, Mapping


def normalize_name(name: str) -> str:
    """Return the canonical (lower-case) form of a parameter name.

    Raises:
        TypeError: If name is not a string.
    """
    if not isinstance(name, str):
        raise TypeError(f"Parameter name must be a string, got {type(name).__name__}")
    return name.lower()


def normalize_names(names: Iterable[str]) -> List[str]:
    """Normalize a sequence of names, keeping order and duplicates."""
    return [normalize_name(n) for n in names]


def normalize_mapping(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with normalized keys.

    When two keys normalize to the same name, the later one wins.
    """
    result: Dict[str, Any] = {}
    for key, value in mapping.items():
        result[normalize_name(key)] = value
    return result
