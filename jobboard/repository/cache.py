"""Request-scoped memoization for repository reads."""

from typing import Any, Callable, Dict, Hashable, TypeVar

T = TypeVar("T")


class RequestCache:
    """Memo table whose lifetime is one caller request.

    The repository stores its results here so that every consumer serving
    the same request sees the same job list without refetching. Create a
    fresh instance per request; nothing is shared across instances.

    Example:
        >>> cache = RequestCache()
        >>> jobs = repo.get_jobs(cache)
        >>> repo.get_jobs(cache) is jobs
        True
    """

    def __init__(self) -> None:
        self._values: Dict[Hashable, Any] = {}

    def get_or_set(self, key: Hashable, factory: Callable[[], T]) -> T:
        """Return the cached value for key, computing it on first use."""
        if key not in self._values:
            self._values[key] = factory()
        return self._values[key]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def clear(self) -> None:
        self._values.clear()
