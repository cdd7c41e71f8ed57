# ========================
# file: fieldhash/core/preset/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
from typing import Any, Dict, Union, Mapping

from .defaults import CURRENT_PRESET_VERSION, DEFAULT_PREVIEW_PRESET
from .model import PreviewPreset
from .registry import resolve_preset_path
from .validators import validate_dict


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_preset(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> PreviewPreset:
    """Load a preview preset from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'preview/noise_4d'), or file path to JSON, or raw dict.
            None means the built-in defaults.
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        PreviewPreset (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            data = _load_json_file(resolve_preset_path(source))
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id or dict")

    merged = deep_merge(DEFAULT_PREVIEW_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)
    merged["version"] = CURRENT_PRESET_VERSION

    validate_dict(merged)

    return PreviewPreset(
        id=merged["id"],
        version=int(merged["version"]),
        width=int(merged["width"]),
        height=int(merged["height"]),
        origin_x=float(merged["origin_x"]),
        origin_y=float(merged["origin_y"]),
        scale=float(merged["scale"]),
        dimensions=int(merged["dimensions"]),
        z=float(merged["z"]),
        t=float(merged["t"]),
        saturation=float(merged["saturation"]),
        lightness=float(merged["lightness"]),
        alpha=float(merged["alpha"]),
        hue_shift=float(merged["hue_shift"]),
        channel=str(merged["channel"]),
        raw=merged,
    )
