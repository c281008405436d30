"""
Utilities for rendering runtime durations (nanoseconds) as compose duration strings.
"""

_MICROSECOND = 1_000
_MILLISECOND = 1_000_000
_SECOND = 1_000_000_000
_MINUTE = 60 * _SECOND

def _with_fraction(value: int, digits: int) -> str:
    """
    Renders ``value / 10**digits`` without trailing zeros, e.g. ``(1500, 3) -> '1.5'``.
    """
    scale = 10 ** digits
    whole, fraction = divmod(value, scale)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip('0')

def format_duration(nanoseconds: int) -> str:
    """
    Formats a duration the way compose files spell them: ``30s``, ``1m30s``, ``1h0m0s``, ``500ms``.

    :param nanoseconds: Duration in nanoseconds.
    :return: The duration string.
    """
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    value = abs(nanoseconds)

    if value < _MICROSECOND:
        return f"{sign}{value}ns"
    if value < _MILLISECOND:
        return f"{sign}{_with_fraction(value, 3)}µs"
    if value < _SECOND:
        return f"{sign}{_with_fraction(value, 6)}ms"

    total_minutes, remainder = divmod(value, _MINUTE)
    result = f"{_with_fraction(remainder, 9)}s"
    if total_minutes:
        hours, minutes = divmod(total_minutes, 60)
        result = f"{minutes}m{result}"
        if hours:
            result = f"{hours}h{result}"
    return sign + result
