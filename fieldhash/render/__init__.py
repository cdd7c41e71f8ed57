from .preview import render_hash_preview, save_hash_preview
from .sampling import coordinate_grid

__all__ = ["coordinate_grid", "render_hash_preview", "save_hash_preview"]
