"""Formatting helpers for command line output."""


def format_bytes(size: int) -> str:
    """
    Format a byte count with 1024-based units.

    >>> format_bytes(512)
    '512 B'
    >>> format_bytes(1536)
    '1.5 KB'
    """
    unit = 1024
    if size < unit:
        return f"{size} B"

    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"


def format_duration(seconds: float) -> str:
    """Format a duration rounded to milliseconds."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.3f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m{secs:.3f}s"
