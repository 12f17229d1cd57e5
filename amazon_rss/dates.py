"""Timestamp selection and formatting shared by channel and item mapping."""

from datetime import UTC, datetime
from email.utils import format_datetime

# Layout of RFC 1123 with a numeric zone, e.g. "Mon, 02 Jan 2006 15:04:05 -0700".
RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

_FORMATTERS = {
    RFC1123Z: format_datetime,
}


def any_time_format(fmt: str, *times: datetime | None) -> str:
    """Format the first present timestamp among the candidates.

    Args:
        fmt: strftime layout; RFC1123Z renders locale-independently
        *times: Candidate timestamps in priority order, None meaning absent

    Returns:
        The first non-None candidate formatted to ``fmt``, or an empty string
        when every candidate is absent
    """
    for candidate in times:
        if candidate is None:
            continue
        if candidate.tzinfo is None:
            candidate = candidate.replace(tzinfo=UTC)
        formatter = _FORMATTERS.get(fmt)
        if formatter is not None:
            return formatter(candidate)
        return candidate.strftime(fmt)
    return ""
