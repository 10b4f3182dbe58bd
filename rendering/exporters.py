"""
Exporters: canvas snapshots to encoded images, and frame sequences to
animations. Nothing here touches engine state.
"""

import io
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import cv2
import imageio
import numpy as np
from PIL import Image

FILENAME_PREFIX = 'pixel-garden'

# fmt -> (Pillow format name, file extension)
IMAGE_FORMATS = {
    'png': ('PNG', 'png'),
    'jpeg': ('JPEG', 'jpg'),
    'jpg': ('JPEG', 'jpg'),
    'webp': ('WEBP', 'webp'),
    'bmp': ('BMP', 'bmp'),
}


class ExportError(RuntimeError):
    """Export failed; the garden itself is unaffected."""


@dataclass(frozen=True)
class ExportedImage:
    filename: str
    data: bytes
    format: str
    width: int
    height: int


def timestamped_filename(extension: str, timestamp_ms: Optional[int] = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{FILENAME_PREFIX}-{timestamp_ms}.{extension}"


def export_image(canvas, fmt: str = 'png') -> ExportedImage:
    """
    Encode the current canvas raster.

    Args:
        canvas: Anything with `to_rgba()` returning an (H, W, 4) uint8 array.
        fmt: One of IMAGE_FORMATS.

    Raises:
        ExportError: unknown format or encoder failure.
    """
    key = fmt.lower()
    if key not in IMAGE_FORMATS:
        raise ExportError(f"Unsupported export format: {fmt!r}")
    pil_format, extension = IMAGE_FORMATS[key]

    try:
        image = Image.fromarray(canvas.to_rgba())
        if pil_format in ('JPEG', 'BMP'):
            image = image.convert('RGB')
        buffer = io.BytesIO()
        image.save(buffer, format=pil_format)
    except (OSError, ValueError, KeyError) as e:
        # KeyError: encoder not compiled into this Pillow build
        raise ExportError(f"Failed to encode {pil_format} image: {e}") from e

    return ExportedImage(
        filename=timestamped_filename(extension),
        data=buffer.getvalue(),
        format=key,
        width=image.width,
        height=image.height
    )


def save_exported_image(exported: ExportedImage, output_dir: str) -> Path:
    path = Path(output_dir) / exported.filename
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(exported.data)
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}") from e

    print(f"Exported {exported.width}x{exported.height} {exported.format} to {path}")
    return path


def save_frame(frame: np.ndarray, output_path: str) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    imageio.imwrite(path, frame)
    return path


def save_animation(frames: List[np.ndarray], output_path: str, fps: int = 30) -> Path:
    """
    Write RGBA frames as .gif (Pillow) or .mp4 (OpenCV).
    """
    if not frames:
        raise ExportError("No frames to write")

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()

    if suffix == '.gif':
        images = [Image.fromarray(f).convert('RGB') for f in frames]
        images[0].save(
            path,
            save_all=True,
            append_images=images[1:],
            duration=max(1, int(round(1000 / fps))),
            loop=0
        )
    elif suffix == '.mp4':
        height, width = frames[0].shape[:2]
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        out = cv2.VideoWriter(str(path), fourcc, fps, (width, height))
        if not out.isOpened():
            raise ExportError(f"OpenCV could not open video writer for {path}")
        for frame in frames:
            out.write(cv2.cvtColor(frame, cv2.COLOR_RGBA2BGR))
        out.release()
    else:
        raise ExportError(f"Unsupported animation format: {suffix!r} (use .gif or .mp4)")

    print(f"  Saved animation: {path} ({len(frames)} frames @ {fps} fps)")
    return path
