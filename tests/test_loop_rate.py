from unittest import mock

import pytest

from jeronibot.loop_rate import LoopRate


def test_one_hertz_is_one_second():
    assert LoopRate(1).period == pytest.approx(1.0)


@pytest.mark.parametrize("frequency", [0, 0.5, -5])
def test_invalid_frequency(frequency):
    with pytest.raises(ValueError):
        LoopRate(frequency)


def test_period_shrinks_with_frequency():
    assert LoopRate(60).period < LoopRate(30).period < LoopRate(1).period


def test_sleeps_full_period_when_no_work():
    with mock.patch("jeronibot.loop_rate.time.monotonic", return_value=100.0), \
            mock.patch("jeronibot.loop_rate.time.sleep") as fake_sleep:
        rate = LoopRate(10)
        rate.sleep()
    assert fake_sleep.call_count == 1
    assert fake_sleep.call_args.args[0] == pytest.approx(rate.period)


def test_sleeps_remainder_after_work():
    with mock.patch("jeronibot.loop_rate.time.monotonic", side_effect=[0.0, 0.04, 0.04]), \
            mock.patch("jeronibot.loop_rate.time.sleep") as fake_sleep:
        rate = LoopRate(10)
        rate.sleep()
    assert fake_sleep.call_args.args[0] == pytest.approx(rate.period - 0.04)


def test_no_sleep_when_work_exceeds_period():
    with mock.patch("jeronibot.loop_rate.time.monotonic", side_effect=[0.0, 5.0, 5.0]), \
            mock.patch("jeronibot.loop_rate.time.sleep") as fake_sleep:
        rate = LoopRate(10)
        rate.sleep()
    assert rate.period == pytest.approx(0.1)
    assert fake_sleep.call_count == 0