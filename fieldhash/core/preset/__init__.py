# ========================
# file: fieldhash/core/preset/__init__.py
# ========================
from .defaults import CURRENT_PRESET_VERSION, DEFAULT_PREVIEW_PRESET
from .model import PreviewPreset
from .loader import load_preset, deep_merge
from .registry import resolve_preset_path, add_search_folder

__all__ = [
    "CURRENT_PRESET_VERSION",
    "DEFAULT_PREVIEW_PRESET",
    "PreviewPreset",
    "load_preset",
    "deep_merge",
    "resolve_preset_path",
    "add_search_folder",
]
