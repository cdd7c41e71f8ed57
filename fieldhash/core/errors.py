# ========================
# file: fieldhash/core/errors.py
# ========================
class FieldHashError(Exception):
    """Base error for the fieldhash package."""


class PresetError(FieldHashError):
    """Base error for preset system."""


class ValidationError(PresetError):
    """Raised when a preset fails validation."""


class NotFoundError(PresetError):
    """Raised when a preset id or path cannot be resolved."""


class GridShapeError(FieldHashError, ValueError):
    """Raised when coordinate/channel arrays cannot be broadcast together."""
