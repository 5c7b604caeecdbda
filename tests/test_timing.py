from unittest.mock import patch

from pedalrig.timing import Timer, relative_time_ms, time_call


def test_relative_time_tracks_clock():
    with patch("time.time_ns", return_value=1_700_000_000_123_456_789):
        assert relative_time_ms() == 1_700_000_000_123


def test_relative_time_is_monotone_enough():
    first = relative_time_ms()
    second = relative_time_ms()
    assert second >= first


def test_time_call_runs_function_once():
    calls = []
    with patch("time.time_ns", side_effect=[1_000_000_000, 1_250_000_000]):
        seconds = time_call(lambda: calls.append(1))
    assert calls == [1]
    assert seconds == 0.25


def test_timer_elapsed():
    with patch("time.time_ns", side_effect=[5_000_000_000, 7_000_000_000]):
        timer = Timer()
        assert timer.start_time == 5000
        assert timer.elapsed() == 2.0


def test_timer_real_clock_non_negative():
    assert Timer().elapsed() >= 0.0