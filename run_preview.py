# Файл: run_preview.py
# Рендерит превью хеш-поля в PNG.
#   python run_preview.py [preset.json | preset-id] [out.png]
from __future__ import annotations
import sys
import pathlib
import traceback

ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fieldhash.core.preset import load_preset
from fieldhash.core.errors import PresetError
from fieldhash.render import save_hash_preview


def main(argv: list[str]) -> int:
    source = argv[1] if len(argv) > 1 else None
    out_path = argv[2] if len(argv) > 2 else str(ROOT / "artifacts" / "preview.png")
    try:
        preset = load_preset(source)
    except PresetError as e:
        print(f"!!! Preset error: {e}")
        return 2

    try:
        save_hash_preview(preset, out_path)
    except OSError:
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
