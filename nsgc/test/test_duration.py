import datetime
import pytest

from nsgc.util.duration import format_duration, parse_duration, round_duration


@pytest.mark.parametrize("text, expected", [
    ("24h", datetime.timedelta(hours=24)),
    ("168h", datetime.timedelta(days=7)),
    ("5m", datetime.timedelta(minutes=5)),
    ("1h30m", datetime.timedelta(minutes=90)),
    ("7d", datetime.timedelta(days=7)),
    ("1.5h", datetime.timedelta(minutes=90)),
    ("500ms", datetime.timedelta(milliseconds=500)),
    ("45", datetime.timedelta(seconds=45)),
    (600, datetime.timedelta(minutes=10)),
])
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "h", "10x", "ten minutes", "-5m", -1, True])
def test_parse_duration_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_duration(text)


@pytest.mark.parametrize("value, expected", [
    (datetime.timedelta(days=7), "168h0m0s"),
    (datetime.timedelta(hours=24), "24h0m0s"),
    (datetime.timedelta(minutes=5), "5m0s"),
    (datetime.timedelta(seconds=10), "10s"),
    (datetime.timedelta(seconds=1.5), "1.5s"),
    (datetime.timedelta(milliseconds=250), "250ms"),
    (datetime.timedelta(0), "0s"),
])
def test_format_duration(value, expected):
    assert format_duration(value) == expected


def test_round_duration():
    minute = datetime.timedelta(minutes=1)
    assert round_duration(datetime.timedelta(seconds=89), minute) == minute
    assert round_duration(datetime.timedelta(seconds=90), minute) == 2 * minute
