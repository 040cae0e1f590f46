"""
parmlist.config.load

Parameter contract loading and saving.
"""

import logging
import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import ParmSpec
from ..core.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

SPEC_KEYS = ("legal", "required", "defaults")


def _read_yaml(path: Union[str, Path]) -> Any:
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Parameter spec file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    _LOG.debug("loaded parameter spec file %s", path)
    return raw


def load_spec(path: Union[str, Path]) -> ParmSpec:
    """Load a single ParmSpec from a YAML file.

    An empty file gives a ParmSpec that accepts anything.
    """
    raw = _read_yaml(path)
    return spec_from_dict(raw if raw is not None else {})


def load_specs(path: Union[str, Path]) -> Dict[str, ParmSpec]:
    """Load named ParmSpecs from a YAML file.

    The top level maps call-site names to spec declarations:

        draw_table:
          required: [-rows]
          defaults: {-border: 1}
        draw_chart:
          legal: [-title]
    """
    raw = _read_yaml(path)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Spec file {path} must map names to specs")

    specs = {}
    for name, d in raw.items():
        try:
            specs[str(name)] = spec_from_dict(d if d is not None else {})
        except ConfigError as e:
            raise ConfigError(f"Spec '{name}': {e}")
    return specs


def spec_from_dict(d: Dict[str, Any]) -> ParmSpec:
    """Create ParmSpec from dictionary."""
    if not isinstance(d, dict):
        raise ConfigError(f"Parameter spec must be a mapping, got {type(d).__name__}")

    unknown = [k for k in d if k not in SPEC_KEYS]
    if unknown:
        raise ConfigError(f"Unknown parameter spec keys: {unknown}")

    try:
        return ParmSpec(
            legal=d.get("legal"),
            required=d.get("required") or [],
            defaults=d.get("defaults") or {},
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid parameter spec: {e}")


def spec_to_dict(spec: ParmSpec) -> Dict[str, Any]:
    """Convert ParmSpec to dictionary, leaving out unset parts."""
    d: Dict[str, Any] = {}
    if spec.legal is not None:
        d["legal"] = list(spec.legal)
    if spec.required:
        d["required"] = list(spec.required)
    if spec.defaults:
        d["defaults"] = dict(spec.defaults)
    return d


def save_spec(spec: ParmSpec, path: Union[str, Path]) -> None:
    """Save ParmSpec to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    d = spec_to_dict(spec)

    with open(path, "w") as f:
        yaml.safe_dump(d, f, default_flow_style=False, sort_keys=False)
