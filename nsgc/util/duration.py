import re
import datetime
from typing import Union

_UNITS = {
    "ms": datetime.timedelta(milliseconds=1),
    "s": datetime.timedelta(seconds=1),
    "m": datetime.timedelta(minutes=1),
    "h": datetime.timedelta(hours=1),
    "d": datetime.timedelta(days=1),
}
_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h|d)")

def parse_duration(value: Union[str, int, float, datetime.timedelta]) -> datetime.timedelta:
    """Parse a Go style duration ("90s", "5m", "1h30m", "7d") or a number of seconds.

    Raises ValueError on anything else, including negative values.
    """
    if isinstance(value, datetime.timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        if value < 0:
            raise ValueError(f"invalid duration: {value!r}")
        return datetime.timedelta(seconds=value)

    text = str(value).strip()
    if re.fullmatch(r"\d+(?:\.\d+)?", text):
        return datetime.timedelta(seconds=float(text))
    if not text or _PART.sub("", text) != "":
        raise ValueError(f"invalid duration: {value!r}")

    total = datetime.timedelta()
    for amount, unit in _PART.findall(text):
        total += float(amount) * _UNITS[unit]
    return total

def format_duration(value: datetime.timedelta) -> str:
    """Render a timedelta the way Go prints durations, e.g. 168h0m0s or 5m0s."""
    total_ms = int(round(value.total_seconds() * 1000))
    sign = "-" if total_ms < 0 else ""
    total_ms = abs(total_ms)
    if total_ms == 0:
        return "0s"
    if total_ms < 1000:
        return f"{sign}{total_ms}ms"

    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds = rest / 1000
    seconds_text = f"{seconds:.3f}".rstrip("0").rstrip(".")
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}s"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{seconds_text}s"

def round_duration(value: datetime.timedelta, unit: datetime.timedelta) -> datetime.timedelta:
    """Round to the nearest multiple of unit, halves away from zero."""
    units, remainder = divmod(value, unit)
    if remainder * 2 >= unit:
        units += 1
    return units * unit
