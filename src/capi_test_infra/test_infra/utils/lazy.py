import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class LazyValue(Generic[T]):
    """
    Compute a value on first access, exactly once per process.
    Concurrent first readers block until the single computation is done and all observe the same result.
    """

    def __init__(self, loader: Callable[[], T]):
        self._loader = loader
        self._lock = threading.Lock()
        self._loaded = False
        self._value = None

    def get(self) -> T:
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self._value = self._loader()
                    self._loaded = True
        return self._value

    def reset(self) -> None:
        """Drop the cached value, the next get() computes it again"""
        with self._lock:
            self._loaded = False
            self._value = None
