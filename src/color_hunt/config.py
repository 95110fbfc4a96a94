"""
Game configuration.

Every tuned constant lives here. The charge/decay rates, the match fraction and
the cooldown were chosen by play-testing, not derived, so they are exposed as
settings rather than baked into the engine.
"""
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SETTINGS_PATH = Path.home() / ".color_hunt" / "settings.json"

@dataclass
class GameConfig:
    # Confidence accumulation
    charge_rate: float = 0.04
    decay_rate: float = 0.08
    cooldown_ms: float = 4000

    # Frame classification
    match_fraction: float = 0.30
    roi_size: int = 50
    downscale_width: int = 300

    # Pause after a success before the next target is chosen
    celebration_ms: float = 2000

    # Camera
    camera_index: int = 0
    capture_width: int = 1280
    capture_height: int = 720

    settings_path: Path = field(default_factory=lambda: DEFAULT_SETTINGS_PATH)

    def validate(self) -> "GameConfig":
        """Raise ValueError on values the engine cannot work with."""
        if not 0 < self.charge_rate < self.decay_rate <= 1:
            raise ValueError(
                f"Expected 0 < charge_rate < decay_rate <= 1, "
                f"got {self.charge_rate} / {self.decay_rate}"
            )
        if self.cooldown_ms < 0 or self.celebration_ms < 0:
            raise ValueError("cooldown_ms and celebration_ms must not be negative")
        if not 0 <= self.match_fraction < 1:
            raise ValueError(f"match_fraction must be in [0, 1), got {self.match_fraction}")
        if self.roi_size <= 0 or self.downscale_width < self.roi_size:
            raise ValueError(
                f"roi_size must be positive and fit in downscale_width "
                f"(got {self.roi_size} / {self.downscale_width})"
            )
        if self.capture_width <= 0 or self.capture_height <= 0:
            raise ValueError("Capture resolution must be positive")
        return self
