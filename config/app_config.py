"""
Unified configuration for the Pixel Garden.

Engine defaults, canvas appearance and front-end settings live together so the
interactive app and the headless renderer start from the same file.
"""

from dataclasses import asdict, dataclass, field
from typing import Optional
from pathlib import Path
import json

from .canvas_config import CanvasConfig

SPEED_RANGE = (0.2, 3.0)
BRUSH_RANGE = (2.0, 40.0)


@dataclass
class GardenConfig:
    """Initial engine state. Palette and generator are random unless pinned."""
    running: bool = True
    speed: float = 1.0
    brush: float = 12.0
    show_grid: bool = False
    palette_seed: Optional[float] = None
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.brush <= 0:
            raise ValueError(f"brush must be positive, got {self.brush}")
        if self.palette_seed is not None and not 0.0 <= self.palette_seed < 1.0:
            raise ValueError(f"palette_seed must be in [0, 1), got {self.palette_seed}")


@dataclass
class AppConfig:
    garden: GardenConfig = field(default_factory=GardenConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)

    # ==================== FRONT END ====================
    export_dir: str = 'exports'
    frame_interval_ms: int = 16  # ~60 Hz refresh for the tk scheduler
    profile: bool = False

    # ==================== HEADLESS RENDERING ====================
    render_fps: int = 30
    render_frames: int = 300
    render_output: str = 'outputs/pixel-garden.gif'

    @property
    def export_path(self) -> Path:
        return Path(self.export_dir)

    @property
    def render_output_path(self) -> Path:
        return Path(self.render_output)


def load_config(path: str = 'config/garden.json') -> AppConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    if 'garden' in data:
        data['garden'] = GardenConfig(**data['garden'])
    if 'canvas' in data:
        data['canvas'] = CanvasConfig(**data['canvas'])

    return AppConfig(**data)


def save_config(config: AppConfig, path: str = 'config/garden.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)

    print(f"Saved config to {config_path}")
