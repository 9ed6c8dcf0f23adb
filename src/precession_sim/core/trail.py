"""Bounded history of recent body positions."""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

from .geometry import Point2D


class TrailBuffer:
    """FIFO of positions; the oldest point is evicted once ``capacity`` is reached."""

    def __init__(self, capacity: int = 500) -> None:
        if capacity <= 0:
            raise ValueError("Trail capacity must be positive")
        self._points: Deque[Point2D] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen or 0

    def push(self, point: Point2D) -> None:
        self._points.append((float(point[0]), float(point[1])))

    def clear(self) -> None:
        self._points.clear()

    def snapshot(self) -> tuple[Point2D, ...]:
        return tuple(self._points)

    def latest(self) -> Point2D | None:
        if not self._points:
            return None
        return self._points[-1]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self._points)


__all__ = ["TrailBuffer"]
