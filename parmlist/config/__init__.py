"""
parmlist.config

Declared parameter contracts.

Exports:
- ParmSpec schema
- Loading/saving utilities
"""

from .schema import ParmSpec

from .load import (
    load_spec,
    load_specs,
    save_spec,
    spec_from_dict,
    spec_to_dict,
)

__all__ = [
    # Schema
    "ParmSpec",
    # Load/save
    "load_spec",
    "load_specs",
    "save_spec",
    "spec_from_dict",
    "spec_to_dict",
]
