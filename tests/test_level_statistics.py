import io
import struct

import pytest

from bulletworm.file_output_stream import FileOutputStream
from bulletworm.level_statistics import (
    LevelStatistics,
    StatisticsError,
    StatisticsToAdd,
)


def _played() -> LevelStatistics:
    stats = LevelStatistics(3, 4)
    stats.add_statistics(StatisticsToAdd(level_index=0, difficulty=1,
                                         level_completed=True, game_time=100, score=50))
    stats.add_statistics(StatisticsToAdd(level_index=2, difficulty=2,
                                         level_completed=False, game_time=30, score=10))
    stats.add_statistics(StatisticsToAdd(level_index=3, difficulty=0,
                                         level_completed=True, game_time=7, score=70))
    return stats


def _state(stats: LevelStatistics):
    pairs = [(d, lvl) for d in range(stats.difficulty_count)
             for lvl in range(stats.level_count)]
    return (
        stats.difficulty_count,
        stats.level_count,
        stats.whole_game_time,
        stats.available_level_count,
        stats.total_score,
        stats.total_game_count,
        [stats.level_highest_score(lvl) for lvl in range(stats.level_count)],
        [stats.is_level_completed(d, lvl) for d, lvl in pairs],
        [stats.level_game_count(d, lvl) for d, lvl in pairs],
    )


def test_fresh_statistics():
    stats = LevelStatistics(2, 3)
    assert stats.available_level_count == 1
    assert stats.total_score == 0
    assert stats.whole_game_time == 0
    assert not stats.is_level_completed(1, 2)
    assert stats.level_exists(1, 2)


@pytest.mark.parametrize("network_order", [True, False])
def test_round_trip(network_order):
    stats = _played()
    buffer = io.BytesIO()
    stats.save(buffer, network_order)
    buffer.seek(0)
    loaded = LevelStatistics.load(buffer, network_order)
    assert _state(loaded) == _state(stats)


def test_network_header_bytes():
    buffer = io.BytesIO()
    LevelStatistics(3, 2).save(buffer, True)
    data = buffer.getvalue()
    assert data[:8] == b"\x00\x00\x00\x03\x00\x00\x00\x02"
    assert len(data) % 4 == 0


def test_completion_unlocks_next_level_only_past_first_difficulty():
    stats = LevelStatistics(2, 5)
    stats.add_statistics(StatisticsToAdd(level_index=1, difficulty=0, level_completed=True))
    assert stats.available_level_count == 1
    assert stats.is_level_completed(0, 1)
    stats.add_statistics(StatisticsToAdd(level_index=1, difficulty=1, level_completed=True))
    assert stats.available_level_count == 3


def test_unlocking_is_capped_by_level_count():
    stats = LevelStatistics(2, 3)
    stats.add_statistics(StatisticsToAdd(level_index=2, difficulty=1, level_completed=True))
    assert stats.available_level_count == stats.level_count


def test_highest_score_kept_and_total_updated():
    stats = LevelStatistics(2, 2)
    stats.add_statistics(StatisticsToAdd(level_index=0, difficulty=0, level_completed=True, score=40))
    stats.add_statistics(StatisticsToAdd(level_index=0, difficulty=1, level_completed=True, score=25))
    assert stats.level_highest_score(0) == 40
    stats.add_statistics(StatisticsToAdd(level_index=1, difficulty=1, level_completed=True, score=60))
    assert stats.total_score == stats.level_highest_score(0) + stats.level_highest_score(1)


def test_uncompleted_game_counts_but_scores_nothing():
    stats = LevelStatistics(2, 2)
    stats.add_statistics(StatisticsToAdd(level_index=1, difficulty=1, score=99, game_time=5))
    assert stats.level_highest_score(1) == 0
    assert stats.level_game_count(1, 1) == 1
    assert stats.total_game_count == 1
    assert stats.whole_game_time == 5


def test_game_time_crosses_32_bits():
    stats = LevelStatistics(1, 1)
    long_time = 2**32 + 5
    stats.add_statistics(StatisticsToAdd(game_time=long_time))
    buffer = io.BytesIO()
    stats.save(buffer, True)
    buffer.seek(0)
    assert LevelStatistics.load(buffer, True).whole_game_time == long_time


def test_reset_clears_everything():
    stats = _played()
    stats.reset()
    fresh = LevelStatistics(3, 4)
    assert _state(stats) == _state(fresh)


def test_load_unavailable_levels():
    words = [2, 2, 0, 0,
             0, 0,
             2, 0,
             0, 0,
             0, 0, 0, 0]
    data = struct.pack(">14I", *words)
    stats = LevelStatistics.load(io.BytesIO(data), True)
    assert not stats.level_exists(1, 0)
    assert not stats.is_level_completed(1, 0)
    assert stats.level_exists(1, 1)
    assert stats.available_level_count == 2


def test_load_truncated_raises():
    buffer = io.BytesIO()
    _played().save(buffer, True)
    with pytest.raises(StatisticsError):
        LevelStatistics.load(io.BytesIO(buffer.getvalue()[:-1]), True)


def test_load_bad_counts_raises():
    data = struct.pack(">4I", 0, 3, 0, 0)
    with pytest.raises(StatisticsError):
        LevelStatistics.load(io.BytesIO(data), True)


def test_wrong_byte_order_detected_by_counts():
    buffer = io.BytesIO()
    LevelStatistics(2, 3).save(buffer, True)
    with pytest.raises(StatisticsError):
        LevelStatistics.load(io.BytesIO(buffer.getvalue()), False) if struct.pack("=I", 1) != struct.pack(">I", 1) else LevelStatistics.load(io.BytesIO(b""), True)


def test_index_errors():
    stats = LevelStatistics(2, 2)
    with pytest.raises(IndexError):
        stats.level_game_count(2, 0)
    with pytest.raises(IndexError):
        stats.level_highest_score(2)
    with pytest.raises(IndexError):
        stats.add_statistics(StatisticsToAdd(level_index=5))


def test_invalid_constructor_counts():
    with pytest.raises(ValueError):
        LevelStatistics(0, 1)


def test_save_to_file_output_stream(tmp_path):
    stats = _played()
    path = tmp_path / "stats.bin"
    with FileOutputStream() as out:
        out.open(path)
        stats.save(out, True)
    with open(path, "rb") as handle:
        loaded = LevelStatistics.load(handle, True)
    assert _state(loaded) == _state(stats)