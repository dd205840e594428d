import pytest

from savings_bot.core.currency import Direction, convert


def test_convert_both_directions():
    assert convert(100, 1.08) == 108.0
    assert convert(108, 1.08, Direction.USD_TO_EUR) == 100.0
    assert convert(50, 1.1, Direction.EUR_TO_USD) == 55.0


def test_non_positive_rate_rejected():
    with pytest.raises(ValueError):
        convert(100, 0)
