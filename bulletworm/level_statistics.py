"""Per-level play statistics and their binary file format.

The file is a sequence of unsigned 32-bit words:

* a header of four words: difficulty count, level count, and the total
  game time split into its low and high 32 bits;
* one completion flag per (difficulty, level) pair, difficulty-major,
  where 0 means not completed, 1 completed and 2 unavailable;
* the highest score of each level;
* the game count of each (difficulty, level) pair, difficulty-major.

Words are stored either in network (big-endian) order or in host order.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

DIFFICULTY_COUNT_MIN = 1
DIFFICULTY_COUNT_MAX = 1024
LEVEL_COUNT_MIN = 1
LEVEL_COUNT_MAX = 1024

NOT_COMPLETED = 0
COMPLETED = 1
UNAVAILABLE = 2

_WORD = 4
_HEADER_WORDS = 4
_U32 = 1 << 32
_U64 = 1 << 64


class StatisticsError(Exception):
    """Raised when statistics cannot be read or written."""


@dataclass
class StatisticsToAdd:
    """The outcome of one finished game."""

    level_index: int = 0
    difficulty: int = 0
    level_completed: bool = False
    game_time: int = 0
    score: int = 0


def _check_counts(difficulty_count: int, level_count: int) -> bool:
    return (
        DIFFICULTY_COUNT_MIN <= difficulty_count <= DIFFICULTY_COUNT_MAX
        and LEVEL_COUNT_MIN <= level_count <= LEVEL_COUNT_MAX
    )


def _words_struct(count: int, network_order: bool) -> struct.Struct:
    """A packer for ``count`` unsigned 32-bit words in the chosen byte order."""
    order = ">" if network_order else "="
    return struct.Struct(f"{order}{count}I")


def _read_words(stream: BinaryIO, count: int, network_order: bool) -> list[int]:
    packer = _words_struct(count, network_order)
    data = stream.read(packer.size)
    if data is None or len(data) != packer.size:
        raise StatisticsError("statistics file is truncated")
    return list(packer.unpack(data))


class LevelStatistics:
    """Completion flags, high scores and game counts for every level."""

    def __init__(self, difficulty_count: int, level_count: int) -> None:
        if not _check_counts(difficulty_count, level_count):
            raise ValueError("difficulty or level count out of range")
        self._difficulty_count = difficulty_count
        self._level_count = level_count
        self._game_time = 0
        self._completed = [NOT_COMPLETED] * (difficulty_count * level_count)
        self._scores = [0] * level_count
        self._game_counts = [0] * (difficulty_count * level_count)
        self._available_level_count = 1
        self._total_score = 0
        self._total_game_count = 0

    @property
    def difficulty_count(self) -> int:
        return self._difficulty_count

    @property
    def level_count(self) -> int:
        return self._level_count

    @property
    def whole_game_time(self) -> int:
        """Total time of all games, wrapping at 64 bits."""
        return self._game_time

    @property
    def available_level_count(self) -> int:
        """How many levels, counted from the first, the player may start."""
        return self._available_level_count

    @property
    def total_score(self) -> int:
        """Sum of the highest scores of all levels."""
        return self._total_score

    @property
    def total_game_count(self) -> int:
        return self._total_game_count

    def _level_id(self, difficulty: int, level_index: int) -> int:
        if not 0 <= difficulty < self._difficulty_count:
            raise IndexError("difficulty out of range")
        if not 0 <= level_index < self._level_count:
            raise IndexError("level index out of range")
        return difficulty * self._level_count + level_index

    def reset(self) -> None:
        """Forget every game played; only the first level stays available."""
        self._game_time = 0
        self._completed = [NOT_COMPLETED] * len(self._completed)
        self._scores = [0] * len(self._scores)
        self._game_counts = [0] * len(self._game_counts)
        self._available_level_count = 1
        self._total_score = 0
        self._total_game_count = 0

    def add_statistics(self, stats: StatisticsToAdd) -> None:
        """Record one finished game."""
        level_id = self._level_id(stats.difficulty, stats.level_index)
        if stats.game_time < 0:
            raise ValueError("game time must not be negative")
        if not 0 <= stats.score < _U32:
            raise ValueError("score must fit in 32 unsigned bits")

        self._game_time = (self._game_time + stats.game_time) % _U64

        if stats.level_completed:
            highest = self._scores[stats.level_index]
            if stats.score > highest:
                self._total_score += stats.score - highest
                self._scores[stats.level_index] = stats.score

            if not self._completed[level_id]:
                self._completed[level_id] = COMPLETED
                # The first difficulty is introductory and unlocks nothing.
                if stats.difficulty > 0:
                    self._available_level_count = min(
                        max(self._available_level_count, stats.level_index + 2),
                        self._level_count,
                    )

        self._game_counts[level_id] = (self._game_counts[level_id] + 1) % _U32
        self._total_game_count += 1

    def level_highest_score(self, level_index: int) -> int:
        if not 0 <= level_index < self._level_count:
            raise IndexError("level index out of range")
        return self._scores[level_index]

    def is_level_completed(self, difficulty: int, level_index: int) -> bool:
        return self._completed[self._level_id(difficulty, level_index)] == COMPLETED

    def level_exists(self, difficulty: int, level_index: int) -> bool:
        """False for levels marked unavailable in the statistics file."""
        return self._completed[self._level_id(difficulty, level_index)] <= COMPLETED

    def level_game_count(self, difficulty: int, level_index: int) -> int:
        return self._game_counts[self._level_id(difficulty, level_index)]

    @classmethod
    def load(cls, stream: BinaryIO, network_order: bool) -> LevelStatistics:
        """Read statistics from a binary stream."""
        header = _read_words(stream, _HEADER_WORDS, network_order)
        difficulty_count, level_count, time_low, time_high = header
        if not _check_counts(difficulty_count, level_count):
            raise StatisticsError("difficulty or level count out of range")

        pairs = difficulty_count * level_count
        completed = _read_words(stream, pairs, network_order)
        scores = _read_words(stream, level_count, network_order)
        game_counts = _read_words(stream, pairs, network_order)

        stats = cls(difficulty_count, level_count)
        stats._game_time = (time_high << 32) | time_low
        stats._completed = completed
        stats._scores = scores
        stats._game_counts = game_counts
        stats._total_score = sum(scores)
        stats._total_game_count = sum(game_counts)
        stats._available_level_count = 1
        for level in reversed(range(level_count)):
            if any(
                completed[difficulty * level_count + level]
                for difficulty in range(1, difficulty_count)
            ):
                stats._available_level_count = min(level + 2, level_count)
                break
        return stats

    def save(self, stream: BinaryIO, network_order: bool) -> None:
        """Write statistics to a binary stream."""
        words = [
            self._difficulty_count,
            self._level_count,
            self._game_time & (_U32 - 1),
            self._game_time >> 32,
            *self._completed,
            *self._scores,
            *self._game_counts,
        ]
        blob = _words_struct(len(words), network_order).pack(*words)
        written = stream.write(blob)
        if written != len(blob):
            raise StatisticsError("statistics file writing failure")