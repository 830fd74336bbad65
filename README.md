# bulletworm

Building blocks of a grid-based snake game. None of them depends on a
graphics library: the drawable pieces only compute vertices, texture
coordinates and colours.

## Modules

- `bulletworm.graphical_utility`
  - `IntRect` (frozen: `left`, `top`, `width`, `height`) and `Vertex`
    (`position`, `tex_coords`, packed RGBA `color`, white by default).
  - `pack_rgba(red, green, blue, alpha=255)` packs channels into one 32-bit
    integer.
  - `scale_color(ratio)` gives the colour of a progress bar: red at 0,
    yellow at 0.5, green at 1.
  - `create_tex_rect(left, top, tex_size, width=1, height=1)` and
    `get_texture_unit_rect(unit, tex_size, tex_unit_width)` compute tile
    rectangles in a texture atlas; a non-positive atlas width raises
    `ValueError`.
- `bulletworm.digits` — `Digits(zero_rect, count)`, a row of quads, six
  vertices per digit. `set_number(number, base=10)` shows a non-negative
  number zero-padded and cut to `digit_count` digits; the digit sprites are
  taken from the texture strip beginning at `zero_rect`. Properties
  `zero_rect`, `digit_count`, `number_vertical` and `texture_vertical`
  control the layout; `local_bounds()`, `set_digit_color()`,
  `digit_color()` and `vertices` give access to the result.
- `bulletworm.challenge_visual` — `ChallengeVisual(radius, count,
  visible_count)`, a regular polygon of `count` sectors (at least 3) stored
  as a triangle fan starting at the top. `visible_vertices()` returns only
  the vertices of the first `visible_count` sectors. `radius`, `count`,
  `visible_count` and `color` are settable properties.
- `bulletworm.endianness` — `network_to_host(value)` and
  `host_to_network(value)` for unsigned 32-bit integers.
- `bulletworm.file_output_stream` — `FileOutputStream`, a binary output
  file with `open`, `write`, `seek`, `tell`, `size` and `close`, usable as a
  context manager. Using it before `open` raises `ValueError`.
- `bulletworm.language_loader` — `parse_words(data)` splits big-endian
  UTF-32 text into its non-empty lines, skipping the first code unit (the
  byte order mark) and treating NUL, LF and CR as separators.
  `load_language(stream)` reads a whole binary stream and does the same.
  Both raise `LanguageLoadError` on bad input.
- `bulletworm.level_statistics` — `LevelStatistics(difficulty_count,
  level_count)` keeps completion flags, highest scores and game counts per
  level, the total game time, and how many levels are unlocked. Games are
  recorded with `add_statistics(StatisticsToAdd(...))`; completing a level
  on any difficulty but the first unlocks the next one. `save(stream,
  network_order)` and the class method `load(stream, network_order)` write
  and read a binary file of unsigned 32-bit words; failures raise
  `StatisticsError`.

## Example

```python
from bulletworm.level_statistics import LevelStatistics, StatisticsToAdd

stats = LevelStatistics(difficulty_count=3, level_count=10)
stats.add_statistics(
    StatisticsToAdd(level_index=0, difficulty=1, level_completed=True,
                    game_time=12_000, score=420)
)
print(stats.level_highest_score(0), stats.available_level_count)  # 420 2

with open("stats.bin", "wb") as out:
    stats.save(out, network_order=True)

with open("stats.bin", "rb") as src:
    restored = LevelStatistics.load(src, network_order=True)
```

## What this package does not do

It has no game loop, no snake movement, no level files and no window or
renderer. It provides no command to run; it is a library to build those on.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```