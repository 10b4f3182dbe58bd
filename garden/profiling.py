"""
Opt-in timing of frame and tick functions.

Disabled by default; `main.py --profile` turns it on and the table is printed
when the interpreter exits.
"""

import time
from functools import wraps
from collections import defaultdict
from typing import Dict
import atexit


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.stats: Dict[str, Dict] = defaultdict(lambda: {
            'calls': 0,
            'total_time': 0.0,
            'max_time': 0.0
        })
        self.enabled = False
        atexit.register(self.print_stats)

    def record(self, name: str, elapsed: float):
        if not self.enabled:
            return
        entry = self.stats[name]
        entry['calls'] += 1
        entry['total_time'] += elapsed
        entry['max_time'] = max(entry['max_time'], elapsed)

    def print_stats(self):
        if not self.stats:
            return

        print("\n" + "=" * 70)
        print("FRAME PROFILING RESULTS")
        print("=" * 70)

        sorted_stats = sorted(
            self.stats.items(),
            key=lambda x: x[1]['total_time'],
            reverse=True
        )

        print(f"{'Function':<35} {'Calls':>8} {'Avg(ms)':>10} {'Max(ms)':>10}")
        print("-" * 70)

        for name, data in sorted_stats:
            calls = data['calls']
            avg_ms = (data['total_time'] / calls * 1000) if calls > 0 else 0
            print(f"{name:<35} {calls:>8} {avg_ms:>10.3f} {data['max_time'] * 1000:>10.3f}")

        print("=" * 70)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        profiler.record(func.__qualname__, time.perf_counter() - start)
        return result
    return wrapper
