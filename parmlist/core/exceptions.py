"""
parmlist.core.exceptions

All custom exceptions for parmlist.

Design: Bad input is a ValidationError the caller can react to.
A broken call site is a UsageFault and should not be caught.
"""

from typing import Iterable, Tuple, Union


class ParmListError(Exception):
    """Base exception for all parmlist errors."""
    pass


class ValidationError(ParmListError):
    """Parameter validation failed.

    Raised when construction options are malformed, required parameters
    are missing, or supplied parameters are not in the allow-list.
    Every violation found is kept in ``messages``.
    """

    def __init__(self, messages: Union[str, Iterable[str]]):
        if isinstance(messages, str):
            messages = [messages]
        self.messages: Tuple[str, ...] = tuple(messages)
        super().__init__("\n".join(self.messages))


class UsageFault(ParmListError):
    """Accessor called in a way that can never be right.

    Raised for get() without names, get() on a name outside a declared
    allow-list, and simple_parms() contract violations.
    """
    pass


class ConfigError(ParmListError):
    """Parameter declaration invalid or missing.

    Raised when declaration files are malformed or cannot be read.
    """
    pass
