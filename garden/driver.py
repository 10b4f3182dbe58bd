"""
Animation driver.

Keeps the garden ticking by asking the host for one frame at a time. The driver
holds nothing but a cancellation handle: each frame reads the current control
values from the garden, so changing speed or brush never restarts the loop.

    Idle --start()--> Running --flag cleared--> Paused --flag set--> Running
    Running/Paused --dispose()--> Disposed
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, List, Optional

from config.canvas_config import CanvasConfig
from .compositor import FrameResult
from .profiling import profile

ResizeHandler = Callable[[int, int, float], Any]


class DriverState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    PAUSED = 'paused'
    DISPOSED = 'disposed'


class FrameScheduler(ABC):
    """Host hook that calls back once, at the next display refresh."""

    @abstractmethod
    def request_frame(self, callback: Callable[[], None]) -> Any:
        pass

    @abstractmethod
    def cancel_frame(self, handle: Any):
        pass


class ResizeEvents:
    """Listener registry for container resize notifications."""

    def __init__(self):
        self._listeners: List[ResizeHandler] = []

    def add_listener(self, listener: ResizeHandler):
        self._listeners.append(listener)

    def remove_listener(self, listener: ResizeHandler):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, width: int, height: int, device_pixel_ratio: float = 1.0):
        for listener in list(self._listeners):
            listener(width, height, device_pixel_ratio)

    def __len__(self) -> int:
        return len(self._listeners)


class AnimationDriver:
    def __init__(self, garden, canvas, scheduler: FrameScheduler,
                 config: CanvasConfig = None,
                 resize_events: Optional[ResizeEvents] = None,
                 on_frame: Optional[Callable[[FrameResult], None]] = None):
        self.garden = garden
        self.canvas = canvas
        self.scheduler = scheduler
        self.config = config or CanvasConfig()
        self.resize_events = resize_events
        self.on_frame = on_frame

        self.state = DriverState.IDLE
        self.frame_count = 0
        self._handle = None
        self._unsubscribe_running = None

    @property
    def is_scheduled(self) -> bool:
        return self._handle is not None

    def start(self):
        if self.state is DriverState.DISPOSED:
            raise RuntimeError("Cannot start a disposed animation driver")
        if self.state is not DriverState.IDLE:
            return

        # Raises CanvasUnavailableError; the driver then stays idle.
        self.canvas.ensure_available()

        if self.resize_events is not None:
            self.resize_events.add_listener(self.handle_resize)
        self._unsubscribe_running = self.garden.subscribe_running(self._on_running_changed)

        self.state = DriverState.PAUSED
        self.sync()

    def sync(self):
        """Bring the driver in line with the garden's running flag.

        Called automatically whenever the flag changes after `start()`.
        """
        if self.state in (DriverState.IDLE, DriverState.DISPOSED):
            return

        if not self.garden.running:
            # A frame already in flight will see the flag and stop.
            self.state = DriverState.PAUSED
            return

        self.state = DriverState.RUNNING
        if self._handle is None:
            self._schedule()

    def _on_running_changed(self, running: bool):
        self.sync()

    def _schedule(self):
        self._handle = self.scheduler.request_frame(self._on_frame)

    @profile
    def _on_frame(self):
        self._handle = None
        if self.state is DriverState.DISPOSED:
            return
        if not self.garden.running:
            self.state = DriverState.PAUSED
            return

        self.state = DriverState.RUNNING
        result = self.garden.tick(self.canvas, self.config)
        self.frame_count += 1
        if self.on_frame is not None:
            self.on_frame(result)

        # on_frame may have paused or disposed us
        if self.state is DriverState.RUNNING and self.garden.running and self._handle is None:
            self._schedule()

    def handle_resize(self, width: int, height: int, device_pixel_ratio: float = 1.0) -> bool:
        if self.state is DriverState.DISPOSED:
            return False
        return self.canvas.resize(width, height, device_pixel_ratio)

    def dispose(self):
        if self.state is DriverState.DISPOSED:
            return

        if self._handle is not None:
            self.scheduler.cancel_frame(self._handle)
            self._handle = None
        if self.resize_events is not None:
            self.resize_events.remove_listener(self.handle_resize)
        if self._unsubscribe_running is not None:
            self._unsubscribe_running()
            self._unsubscribe_running = None

        self.state = DriverState.DISPOSED
