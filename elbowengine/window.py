"""Windows, the window registry and window creation."""

from abc import ABC, abstractmethod

from elbowengine.config import PlatformConfig, WindowLib


class WindowError(RuntimeError):
    """A window could not be created or registered."""


class Window(ABC):
    """A native window created through some windowing library."""

    def __init__(self, title="", width=0, height=0, flags=0):
        self.title = title
        self.width = width
        self.height = height
        self.flags = flags

    @abstractmethod
    def native_handle(self):
        """The windowing library's handle for this window."""

    @abstractmethod
    def poll_inputs(self):
        """Process pending input events."""

    @abstractmethod
    def should_close(self):
        """True when the user asked for the window to close."""

    @abstractmethod
    def close(self):
        """Destroy the native window."""


class WindowManager:
    """Keeps the open windows by id; the first window added is the main one."""

    def __init__(self):
        self._windows = {}
        self._next_id = 0

    def add_window(self, window):
        """Register ``window`` and return its id.

        Raises ``WindowError`` when a window with the same title is registered.
        """
        if any(existing.title == window.title for existing in self._windows.values()):
            raise WindowError(
                f"Failed to add window, window with same title {window.title} already exists."
            )
        window_id = self._next_id
        self._windows[window_id] = window
        self._next_id += 1
        return window_id

    def _find_id(self, key):
        if isinstance(key, Window):
            return next((wid for wid, w in self._windows.items() if w is key), None)
        if isinstance(key, str):
            return next((wid for wid, w in self._windows.items() if w.title == key), None)
        return key if key in self._windows else None

    def remove_window(self, key):
        """Forget a window given by id, title or the window itself.

        Returns True when a window was removed.
        """
        window_id = self._find_id(key)
        if window_id is None:
            return False
        del self._windows[window_id]
        return True

    def get_window(self, key):
        """The window with the given id or title, or None."""
        window_id = self._find_id(key)
        return None if window_id is None else self._windows[window_id]

    @property
    def main_window(self):
        """The window with id 0, or None."""
        return self.get_window(0)


_window_backends = {}


def register_window_backend(window_lib, factory):
    """Make ``factory(title, width, height, flags)`` create windows for ``window_lib``."""
    _window_backends[WindowLib(window_lib)] = factory


def create_window(
    manager,
    config=None,
    app_name="",
    window_lib=WindowLib.COUNT,
    title="",
    width=0,
    height=0,
    flags=-1,
):
    """Create a window, register it with ``manager`` and return it.

    An empty title falls back to ``app_name``; zero sizes, ``flags`` of -1 and
    ``WindowLib.COUNT`` fall back to the platform configuration.
    """
    if config is None:
        config = PlatformConfig()
    window_lib = WindowLib(window_lib)
    if window_lib == WindowLib.COUNT:
        window_lib = config.window_lib
    factory = _window_backends.get(window_lib)
    if factory is None:
        raise WindowError(f"Window lib {window_lib.name} not supported.")
    window = factory(
        title or app_name,
        width or config.default_window_size.width,
        height or config.default_window_size.height,
        int(config.window_flag) if flags == -1 else flags,
    )
    manager.add_window(window)
    return window