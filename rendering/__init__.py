"""
Rendering module: cairo drawing surface, exporters and headless rendering
for the Pixel Garden.
"""

from .base import Renderer, create_surface, surface_to_numpy
from .color import hsl_to_rgb
from .canvas import GardenCanvas, CanvasUnavailableError
from .exporters import (
    ExportedImage,
    ExportError,
    export_image,
    save_exported_image,
    save_frame,
    save_animation,
    timestamped_filename
)
from .garden_renderer import GardenRenderer
