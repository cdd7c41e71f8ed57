# ========================
# file: fieldhash/core/preset/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict
from .errors import ValidationError

HASH_CHANNELS = ("hue", "lightness")


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validation for preview preset dicts.

    Raises ValidationError on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "Preset.id must be non-empty string",
    )
    for key in ("width", "height"):
        v = cfg.get(key)
        _require(isinstance(v, int) and not isinstance(v, bool), f"Preset.{key} must be int")
        _require(v >= 1, f"Preset.{key} must be >= 1")

    for key in ("origin_x", "origin_y", "scale", "z", "t", "hue_shift"):
        v = cfg.get(key)
        _require(_is_number(v) and math.isfinite(v), f"Preset.{key} must be a finite number")
    _require(cfg["scale"] != 0.0, "Preset.scale must be non-zero")
    _require(cfg.get("channel") in HASH_CHANNELS, f"Preset.channel must be one of {HASH_CHANNELS}")

    dims = cfg.get("dimensions")
    _require(
        isinstance(dims, int) and not isinstance(dims, bool) and 1 <= dims <= 4,
        "Preset.dimensions must be int in 1..4",
    )

    # за пределами [0,1] упаковщик всё равно насытит канал, но в пресете это почти всегда опечатка
    for key in ("saturation", "lightness", "alpha"):
        v = cfg.get(key)
        _require(_is_number(v) and 0.0 <= v <= 1.0, f"Preset.{key} must be in [0, 1]")
