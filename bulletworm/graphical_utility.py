"""Small geometry and colour helpers shared by the drawable widgets."""

from __future__ import annotations

from dataclasses import dataclass

WHITE = 0xFFFFFFFF


@dataclass(frozen=True)
class IntRect:
    """Axis-aligned integer rectangle."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Vertex:
    """A 2D vertex with texture coordinates and a packed RGBA colour."""

    position: tuple[float, float] = (0.0, 0.0)
    tex_coords: tuple[float, float] = (0.0, 0.0)
    color: int = WHITE


def pack_rgba(red: int, green: int, blue: int, alpha: int = 255) -> int:
    """Pack colour channels into a 32-bit RGBA integer."""
    return (red << 24) | (green << 16) | (blue << 8) | alpha


def _channel(value: float) -> int:
    return int(max(0.0, min(value, 255.0)))


def scale_color(ratio: float) -> int:
    """Colour of a level scale: red when empty, yellow halfway, green when full."""
    red = _channel(255.0 * 2 * (1.0 - ratio))
    green = _channel(255.0 * ratio * 2)
    return pack_rgba(red, green, 0)


def create_tex_rect(
    left: int, top: int, tex_size: int, width: int = 1, height: int = 1
) -> IntRect:
    """Rectangle measured in texture units of ``tex_size`` pixels."""
    return IntRect(left * tex_size, top * tex_size, width * tex_size, height * tex_size)


def get_texture_unit_rect(unit: int, tex_size: int, tex_unit_width: int) -> IntRect:
    """Rectangle of the ``unit``-th tile in an atlas ``tex_unit_width`` tiles wide."""
    if tex_unit_width <= 0:
        raise ValueError("texture unit width must be positive")
    y, x = divmod(unit, tex_unit_width)
    return create_tex_rect(x, y, tex_size)