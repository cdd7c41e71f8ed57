# Ошибки пресетов живут в общем модуле, здесь только реэкспорт
from ..errors import NotFoundError, PresetError, ValidationError

__all__ = ["PresetError", "ValidationError", "NotFoundError"]
