"""
Flattening options, optionally read from a YAML file:

    resolution: 64      # samples per curve/arc
    strict: false       # report malformed path data instead of stopping silently
    units: mm           # DXF $INSUNITS: mm|in|unitless
    precision: 3        # round JSON coordinates (omit to keep full precision)
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .dsl.path_parser import DEFAULT_RESOLUTION

UNITS = ("mm", "in", "unitless")

@dataclass
class FlattenOptions:
    resolution: int = DEFAULT_RESOLUTION
    strict: bool = False
    units: str = "mm"
    precision: Optional[int] = None

    def merged(self, **overrides: Any) -> "FlattenOptions":
        """Copy with every non-None override applied."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data.update({k: v for k, v in overrides.items() if v is not None})
        return options_from_dict(data)

def _is_count(value: Any) -> bool:
    # bool is an int subclass; YAML `true` is not a count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0

def options_from_dict(raw: Dict[str, Any]) -> FlattenOptions:
    known = {f.name for f in fields(FlattenOptions)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"unknown option(s): {', '.join(sorted(unknown))}")
    opts = FlattenOptions(**raw)
    if not _is_count(opts.resolution):
        raise ValueError(f"resolution must be a non-negative integer, got {opts.resolution!r}")
    if opts.units not in UNITS:
        raise ValueError(f"units must be one of {'|'.join(UNITS)}, got {opts.units!r}")
    if opts.precision is not None and not _is_count(opts.precision):
        raise ValueError(f"precision must be a non-negative integer, got {opts.precision!r}")
    if not isinstance(opts.strict, bool):
        raise ValueError(f"strict must be true or false, got {opts.strict!r}")
    return opts

def load_options(path: Optional[Path]) -> FlattenOptions:
    if path is None:
        return FlattenOptions()
    raw = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping of options")
    return options_from_dict(raw)
