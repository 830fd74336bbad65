"""Conversion of 32-bit unsigned integers between host and network byte order."""

from __future__ import annotations

import sys

_WIDTH = 4
_LIMIT = 1 << (8 * _WIDTH)


def _swap_if_needed(value: int) -> int:
    if not 0 <= value < _LIMIT:
        raise ValueError("value must fit in 32 unsigned bits")
    return int.from_bytes(value.to_bytes(_WIDTH, "big"), sys.byteorder)


def network_to_host(value: int) -> int:
    """Convert a 32-bit value read in network (big-endian) order to host order."""
    return _swap_if_needed(value)


def host_to_network(value: int) -> int:
    """Convert a 32-bit host-order value to network (big-endian) order."""
    return _swap_if_needed(value)