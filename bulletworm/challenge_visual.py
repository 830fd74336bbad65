"""A regular polygon drawn as a triangle fan, possibly only partly."""

from __future__ import annotations

import math
from dataclasses import replace

from .graphical_utility import WHITE, Vertex


class ChallengeVisual:
    """Progress indicator: a circle-like polygon showing some of its sectors."""

    def __init__(
        self, radius: float = 0.0, count: int = 0, visible_count: int | None = None
    ) -> None:
        if radius < 0:
            raise ValueError("radius must not be negative")
        if visible_count is None:
            visible_count = count
        if count and count < 3:
            raise ValueError("count must be at least 3")
        if not 0 <= visible_count <= count:
            raise ValueError("visible count must be between 0 and count")
        self._radius = float(radius)
        self._count = count
        self._visible_count = visible_count
        self._color = WHITE
        self._vertices: list[Vertex] = []
        if count:
            self._update()

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, radius: float) -> None:
        if radius < 0:
            raise ValueError("radius must not be negative")
        self._radius = float(radius)
        if self._count:
            self._update()

    @property
    def count(self) -> int:
        """Number of sectors in the full shape."""
        return self._count

    @count.setter
    def count(self, count: int) -> None:
        if count < 3:
            raise ValueError("count must be at least 3")
        if count != self._count:
            self._count = count
            self._visible_count = min(self._visible_count, count)
            self._update()

    @property
    def visible_count(self) -> int:
        """Number of sectors that are drawn."""
        return self._visible_count

    @visible_count.setter
    def visible_count(self, count: int) -> None:
        if not 0 <= count <= self._count:
            raise ValueError("visible count must be between 0 and count")
        self._visible_count = count

    @property
    def color(self) -> int:
        return self._color

    @color.setter
    def color(self, color: int) -> None:
        self._color = color
        for vertex in self._vertices:
            vertex.color = color

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        """Centre followed by ``count + 1`` rim points, the last closing the fan."""
        return tuple(replace(v) for v in self._vertices)

    def visible_vertices(self) -> tuple[Vertex, ...]:
        """The triangle-fan vertices that make up the visible sectors."""
        if not self._visible_count:
            return ()
        return self.vertices[: self._visible_count + 2]

    def _update(self) -> None:
        r = self._radius
        points = [(r, r)]
        for i in range(self._count + 1):
            angle = i * 2 * math.pi / self._count - math.pi / 2
            points.append((r + math.cos(angle) * r, r + math.sin(angle) * r))
        self._vertices = [Vertex(position=p, color=self._color) for p in points]