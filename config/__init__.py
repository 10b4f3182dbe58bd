"""
Configuration module.
"""

from .app_config import (
    AppConfig,
    GardenConfig,
    SPEED_RANGE,
    BRUSH_RANGE,
    load_config,
    save_config
)
from .canvas_config import CanvasConfig

__all__ = [
    'AppConfig',
    'GardenConfig',
    'CanvasConfig',
    'SPEED_RANGE',
    'BRUSH_RANGE',
    'load_config',
    'save_config'
]
