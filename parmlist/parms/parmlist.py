"""
parmlist.parms.parmlist

Validated named-parameter container.

Design: Parameters are validated once, at construction, and are
immutable afterwards. Construction either yields a fully valid
ParmList or raises ValidationError; nothing partial is exposed.
"""

import logging
from contextvars import ContextVar
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from parmlist.core.exceptions import UsageFault, ValidationError
from parmlist.core.names import normalize_name
from parmlist.core.types import DEFAULTS, LEGAL, PARMS, REQUIRED, RawParms
from parmlist.core.validation import (
    coerce_parms,
    parse_options,
    validate_defaults,
    validate_name_list,
)

_LOG = logging.getLogger(__name__)

# Message from the most recent construction in the current context.
_LAST_ERROR: ContextVar[str] = ContextVar("parmlist_last_error", default="")


def last_error() -> str:
    """Return the error report of the latest construction in this context.

    Empty after a successful construction. Each thread and asyncio task
    sees only its own constructions.
    """
    return _LAST_ERROR.get()


def _merge(
    parms: Optional[RawParms],
    legal: Optional[Iterable[str]],
    required: Optional[Iterable[str]],
    defaults: Optional[Dict[str, Any]],
) -> Tuple[Dict[str, Any], Optional[FrozenSet[str]]]:
    """Validate options and merge defaults with raw parameters.

    Returns:
        (values, legal_names) where legal_names is None when no
        allow-list was given.

    Raises:
        ValidationError: With every missing and illegal name reported.
    """
    raw = coerce_parms(parms) if parms is not None else {}

    check_legal = legal is not None
    legal_names = set(validate_name_list(legal, LEGAL)) if check_legal else set()

    required_names: List[str] = []
    if required is not None:
        required_names = validate_name_list(required, REQUIRED)
        legal_names.update(required_names)

    values: Dict[str, Any] = {}
    if defaults is not None:
        values = validate_defaults(defaults)
        legal_names.update(values)

    values.update(raw)

    errors: List[str] = []
    for name in dict.fromkeys(required_names):
        if name not in values:
            errors.append(f"Required parameter '{name}' missing")

    if check_legal:
        for name in values:
            if name not in legal_names:
                errors.append(f"Parameter '{name}' not legal here")

    if errors:
        raise ValidationError(errors)

    return values, (frozenset(legal_names) if check_legal else None)


class ParmList:
    """Immutable, validated set of named parameters.

    Names are case-insensitive: they are stored lower-cased and every
    lookup is normalized the same way.

    Usage:
        parms = ParmList(
            {"-BGColor": "#ff0000"},
            legal=["-textcolor", "-border"],
            required=["-bgcolor"],
            defaults={"-textcolor": "#000000"},
        )
        parms.get("-bgcolor")                  # "#ff0000"
        parms.get("-bgcolor", "-textcolor")    # ("#ff0000", "#000000")
        parms.get("-border")                   # None (legal, not set)

    Args:
        parms: Raw parameters, a mapping or flat [name, value, ...] list.
        legal: Allowed names. None disables the allow-list entirely;
            an empty list rejects every name.
        required: Names that must be present. Implicitly legal.
        defaults: Values for names the caller left out. Implicitly legal.

    legal, required and defaults are keyword options. Any other keyword
    is rejected with ValidationError, the same as an unknown option in
    ParmList.new.

    A ParmList is always true, even when empty. It is not hashable,
    since parameter values may be lists or dicts.

    Raises:
        ValidationError: If options are unknown or malformed, required
            names are missing, or names fall outside an explicit allow-list.
    """

    def __init__(self, parms: Optional[RawParms] = None, **options: Any):
        _LAST_ERROR.set("")
        try:
            opts = parse_options((options,), caller="ParmList")
            if PARMS in opts:
                raise ValidationError(
                    "Invalid parameters (parms given twice) passed to ParmList"
                )
            values, legal_names = _merge(
                parms, opts.get(LEGAL), opts.get(REQUIRED), opts.get(DEFAULTS)
            )
        except ValidationError as e:
            _LAST_ERROR.set(str(e))
            _LOG.debug("parameter validation failed: %s", "; ".join(e.messages))
            raise

        self._values: Dict[str, Any] = values
        self._names: Tuple[str, ...] = tuple(values)
        self._legal: Optional[FrozenSet[str]] = legal_names

    @classmethod
    def new(cls, *options: Any) -> "ParmList":
        """Construct from an options mapping or flat options list.

        Recognized options are parms, legal, required and defaults; the
        name match ignores case and a leading dash:

            ParmList.new({"-parms": raw, "-legal": ["-a"], "-required": ["-b"]})
            ParmList.new("-parms", raw, "-defaults", {"-a": 1})

        Raises:
            ValidationError: On unknown option names or invalid parameters.
        """
        _LAST_ERROR.set("")
        try:
            opts = parse_options(options)
        except ValidationError as e:
            _LAST_ERROR.set(str(e))
            _LOG.debug("invalid construction options: %s", e)
            raise

        return cls(
            opts.get(PARMS),
            legal=opts.get(LEGAL),
            required=opts.get(REQUIRED),
            defaults=opts.get(DEFAULTS),
        )

    @staticmethod
    def error() -> str:
        """Error report of the latest construction (see last_error)."""
        return last_error()

    def _key(self, name: str) -> str:
        try:
            key = normalize_name(name)
        except TypeError as e:
            raise UsageFault(f"ParmList.get() {e}") from e
        if self._legal is not None and key not in self._legal:
            raise UsageFault(
                f"ParmList.get() called with an illegal named parameter: '{key}'"
            )
        return key

    def get(self, *names: str) -> Any:
        """Return the value(s) of one or more parameters.

        One name returns its value directly; several names return a tuple
        in the same order. A legal name that was never set gives None.

        Raises:
            UsageFault: If called without names, or with a name outside a
                declared allow-list.
        """
        if len(names) == 0:
            raise UsageFault("ParmList.get() called without any parameters")
        if len(names) == 1:
            return self.get_one(names[0])
        return self.get_many(names)

    def get_one(self, name: str) -> Any:
        """Return a single parameter value (None if legal but unset)."""
        return self._values.get(self._key(name))

    def get_many(self, names: Iterable[str]) -> Tuple[Any, ...]:
        """Return a tuple of parameter values, one per requested name.

        A bare string is one name, not a sequence of characters.
        """
        if isinstance(names, str):
            names = [names]
        names = list(names)
        if len(names) == 0:
            raise UsageFault("ParmList.get_many() called without any parameters")
        return tuple(self._values.get(self._key(n)) for n in names)

    def exists(self, name: str) -> bool:
        """True if the parameter is set. The allow-list is not consulted."""
        try:
            return normalize_name(name) in self._values
        except TypeError as e:
            raise UsageFault(f"ParmList.exists() {e}") from e

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def list_names(self) -> List[str]:
        """Return the normalized names of all set parameters."""
        return list(self._names)

    def all_values(self) -> Dict[str, Any]:
        """Return a shallow copy of all parameters.

        The dict is new but its values are the same objects held here, so
        nested lists or dicts are shared with this ParmList.
        """
        return dict(self._values)

    @property
    def names(self) -> FrozenSet[str]:
        """Frozenset of set parameter names."""
        return frozenset(self._names)

    @property
    def legal(self) -> Optional[FrozenSet[str]]:
        """Declared allow-list, or None when none was given."""
        return self._legal

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._values.items())
        return f"ParmList({{{items}}})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParmList):
            return False
        return self._values == other._values and self._legal == other._legal
