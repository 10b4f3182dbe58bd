"""
Rendering Script

Renders a Pixel Garden session off-screen and saves it as an animation.
No window is opened; seeds are planted from a JSON file or at random.

Configuration is loaded from config/garden.json when present.

Plantings file format:
    {"plantings": [{"frame": 0, "x": 120, "y": 80}, ...]}
"""

import argparse
import json
from collections import defaultdict
from pathlib import Path

import numpy as np

from config import load_config
from garden import Garden
from rendering import GardenRenderer


def load_plantings(path: str) -> dict:
    """Load a frame -> [(x, y), ...] schedule from JSON."""
    plantings_path = Path(path)
    if not plantings_path.exists():
        raise FileNotFoundError(f"Plantings file not found at {plantings_path}")

    with open(plantings_path, 'r') as f:
        data = json.load(f)

    schedule = defaultdict(list)
    for entry in data.get('plantings', []):
        schedule[int(entry.get('frame', 0))].append((float(entry['x']), float(entry['y'])))
    return dict(schedule)


def random_plantings(count: int, frames: int, width: float, height: float,
                     rng: np.random.Generator) -> dict:
    """Scatter `count` plantings over the first half of the animation."""
    schedule = defaultdict(list)
    last_frame = max(1, frames // 2)
    for _ in range(count):
        frame = int(rng.integers(0, last_frame))
        schedule[frame].append((rng.random() * width, rng.random() * height))
    return dict(schedule)


def main():
    parser = argparse.ArgumentParser(description="Render a Pixel Garden animation off-screen.")
    parser.add_argument('--config', type=str, default='config/garden.json')
    parser.add_argument('--plantings', type=str, default=None,
                        help='JSON file with scheduled plantings (default: random)')
    parser.add_argument('--seeds', type=int, default=12,
                        help='Number of random plantings when no file is given')
    parser.add_argument('--frames', type=int, default=None)
    parser.add_argument('--fps', type=int, default=None)
    parser.add_argument('--output', type=str, default=None,
                        help='Output path, .gif or .mp4')
    args = parser.parse_args()

    config = load_config(args.config)
    frames = args.frames or config.render_frames
    fps = args.fps or config.render_fps
    output = args.output or config.render_output

    garden = Garden(config.garden)
    if args.plantings:
        plantings = load_plantings(args.plantings)
    else:
        plantings = random_plantings(args.seeds, frames, config.canvas.width,
                                     config.canvas.height, garden.rng)

    print(f"Rendering {frames} frames at {config.canvas.width}x{config.canvas.height}")
    print(f"Plantings: {sum(len(v) for v in plantings.values())}")
    print(f"Output: {output}")

    renderer = GardenRenderer(config.canvas)
    renderer.render_animation(garden, output, frames=frames, fps=fps, plantings=plantings)
    print(f"Seeds still alive: {garden.seed_count}")


if __name__ == '__main__':
    main()
