"""Human-readable byte counts."""

from ..config.constants import (
    SIZE_BASE_BINARY,
    SIZE_BASE_DECIMAL,
    SIZE_UNITS_BINARY,
    SIZE_UNITS_DECIMAL,
    ZERO_SIZE_LABEL,
)


def format_size(size: int, use_decimal_units: bool = False) -> str:
    """
    Format a byte count with two decimals and a unit.

    Args:
        size: Number of bytes
        use_decimal_units: Use powers of 1000 (kB, MB, ...) instead of
            powers of 1024 (KiB, MiB, ...)

    Returns:
        Formatted size, e.g. "1.50 KiB"; zero is "0B"
    """
    if size == 0:
        return ZERO_SIZE_LABEL

    if use_decimal_units:
        base, units = SIZE_BASE_DECIMAL, SIZE_UNITS_DECIMAL
    else:
        base, units = SIZE_BASE_BINARY, SIZE_UNITS_BINARY

    # floor(log_base(size)) in integers; float logs round 1000**2 down
    magnitude = abs(size)
    unit_index = 0
    while unit_index < len(units) - 1 and magnitude >= base ** (unit_index + 1):
        unit_index += 1

    return f"{size / base**unit_index:.2f} {units[unit_index]}"
