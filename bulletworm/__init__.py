"""Building blocks of a grid-based snake game: geometry helpers, digit strips,
progress polygons, byte order, binary output files, language word lists and
level statistics."""

__version__ = "0.1.0"
__all__ = [
    "challenge_visual",
    "digits",
    "endianness",
    "file_output_stream",
    "graphical_utility",
    "language_loader",
    "level_statistics",
]