"""Rendering numbers the way JSON clients and remote services expect them."""


def compact_number(value: float) -> int | float:
    """Integral values as int, so 15.0 is echoed as 15."""
    value = float(value)
    return int(value) if value.is_integer() else value


def format_number(value: float) -> str:
    """Query-string form of a number at full precision, integral values without `.0`."""
    return str(compact_number(value))
