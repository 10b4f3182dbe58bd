"""
Main entry point for the interactive Pixel Garden.

Click the canvas to plant seeds; each one blooms into a drifting cluster of
colored pixels. Settings are loaded from config/garden.json when present.
"""

import argparse

from config import load_config
from garden.profiling import profiler
from tools.garden_app import main as run_app


def main():
    parser = argparse.ArgumentParser(description="Interactive generative pixel garden.")
    parser.add_argument('--config', type=str, default='config/garden.json',
                        help='Path to a JSON config (default: config/garden.json)')
    parser.add_argument('--profile', action='store_true',
                        help='Print frame timing statistics on exit')
    args = parser.parse_args()

    config = load_config(args.config)
    profiler.enabled = args.profile or config.profile

    print(f"Pixel Garden {config.canvas.width}x{config.canvas.height}")
    print(f"Exports go to: {config.export_path}")
    run_app(config)


if __name__ == '__main__':
    main()
