"""A row of digit sprites cut from a texture strip."""

from __future__ import annotations

from dataclasses import replace

from .graphical_utility import IntRect, Vertex

_VERTICES_PER_DIGIT = 6


def _quad(rect: IntRect) -> list[tuple[float, float]]:
    left, top = rect.left, rect.top
    right, bottom = rect.left + rect.width, rect.top + rect.height
    corners = [(left, top), (right, top), (right, bottom),
               (right, bottom), (left, bottom), (left, top)]
    return [(float(x), float(y)) for x, y in corners]


class Digits:
    """Fixed-width number display built from two triangles per digit."""

    def __init__(self, zero_rect: IntRect = IntRect(), count: int = 0) -> None:
        self._zero_rect = zero_rect
        self._number_vertical = False
        self.texture_vertical = False
        self._vertices: list[Vertex] = []
        self.digit_count = count

    @property
    def zero_rect(self) -> IntRect:
        """Rectangle of the digit zero, both on screen and in the texture."""
        return self._zero_rect

    @zero_rect.setter
    def zero_rect(self, rect: IntRect) -> None:
        self._zero_rect = rect
        self._layout()

    @property
    def number_vertical(self) -> bool:
        """Whether digits are stacked top to bottom instead of left to right."""
        return self._number_vertical

    @number_vertical.setter
    def number_vertical(self, enabled: bool) -> None:
        self._number_vertical = enabled
        self._layout()

    @property
    def digit_count(self) -> int:
        return len(self._vertices) // _VERTICES_PER_DIGIT

    @digit_count.setter
    def digit_count(self, count: int) -> None:
        if count < 0:
            raise ValueError("digit count must not be negative")
        wanted = count * _VERTICES_PER_DIGIT
        del self._vertices[wanted:]
        self._vertices.extend(Vertex() for _ in range(wanted - len(self._vertices)))
        self._layout()

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(replace(v) for v in self._vertices)

    def set_number(self, number: int, base: int = 10) -> None:
        """Show ``number`` in ``base``, zero-padded and cut to the digit count."""
        if base < 2:
            raise ValueError("base must be greater than 1")
        if number < 0:
            raise ValueError("number must not be negative")
        for index in reversed(range(self.digit_count)):
            number, digit = divmod(number, base)
            self._set_digit(index, digit)

    def local_bounds(self) -> IntRect:
        """Bounds of the whole display before any transform."""
        rect = self._zero_rect
        if self._number_vertical:
            return replace(rect, height=rect.height * self.digit_count)
        return replace(rect, width=rect.width * self.digit_count)

    def set_digit_color(self, digit_index: int, color: int) -> None:
        for vertex in self._digit_vertices(digit_index):
            vertex.color = color

    def digit_color(self, digit_index: int) -> int:
        return self._digit_vertices(digit_index)[0].color

    def _digit_vertices(self, digit_index: int) -> list[Vertex]:
        if not 0 <= digit_index < self.digit_count:
            raise IndexError("digit index out of range")
        start = digit_index * _VERTICES_PER_DIGIT
        return self._vertices[start:start + _VERTICES_PER_DIGIT]

    def _layout(self) -> None:
        rect = self._zero_rect
        for index in range(self.digit_count):
            for vertex, point in zip(self._digit_vertices(index), _quad(rect)):
                vertex.position = point
            if self._number_vertical:
                rect = replace(rect, top=rect.top + rect.height)
            else:
                rect = replace(rect, left=rect.left + rect.width)

    def _set_digit(self, index: int, digit: int) -> None:
        rect = self._zero_rect
        if self.texture_vertical:
            rect = replace(rect, top=rect.top + rect.height * digit)
        else:
            rect = replace(rect, left=rect.left + rect.width * digit)
        for vertex, point in zip(self._digit_vertices(index), _quad(rect)):
            vertex.tex_coords = point