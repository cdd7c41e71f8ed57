from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class PreviewPreset:
    id: str
    version: int
    width: int
    height: int
    origin_x: float
    origin_y: float
    scale: float
    dimensions: int
    z: float
    t: float
    saturation: float
    lightness: float
    alpha: float
    hue_shift: float
    channel: str

    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "width": self.width,
            "height": self.height,
            "origin_x": self.origin_x,
            "origin_y": self.origin_y,
            "scale": self.scale,
            "dimensions": self.dimensions,
            "z": self.z,
            "t": self.t,
            "saturation": self.saturation,
            "lightness": self.lightness,
            "alpha": self.alpha,
            "hue_shift": self.hue_shift,
            "channel": self.channel,
        }
