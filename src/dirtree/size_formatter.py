"""Human-readable rendering of byte counts."""

from humanfriendly import round_number

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

# Float division loses precision (and eventually overflows) past this magnitude
_MAX_FLOAT_MAGNITUDE = 10**15


def format_size(num_bytes: int) -> str:
    """Format a byte count using binary (1024-based) units.

    Counts below 1024 are shown as whole bytes. Larger counts use the largest unit
    that keeps the rounded magnitude below 1024, with at most two decimals and no
    trailing zeros.

    Args:
        num_bytes: Non-negative number of bytes.

    Returns:
        The formatted size, e.g. ``"1.5 KB"``.

    Raises:
        ValueError: If num_bytes is negative.

    Example:
        >>> format_size(0)
        '0 B'
        >>> format_size(1024)
        '1 KB'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(5 * 1024**4)
        '5 TB'
    """
    if num_bytes < 0:
        raise ValueError("Size cannot be negative")
    if num_bytes < 1024:
        return f"{num_bytes} B"

    last = len(SIZE_UNITS) - 1
    exponent = 1
    while exponent < last and num_bytes >= 1024 ** (exponent + 1):
        exponent += 1

    divisor = 1024**exponent
    if num_bytes // divisor >= _MAX_FLOAT_MAGNITUDE:
        return f"{num_bytes // divisor} {SIZE_UNITS[exponent]}"

    text = round_number(num_bytes / divisor)
    if text == "1024" and exponent < last:
        # 1023.995 and up rounds to the next unit
        exponent += 1
        text = round_number(num_bytes / 1024**exponent)
    return f"{text} {SIZE_UNITS[exponent]}"
