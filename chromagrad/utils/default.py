from typing import Optional, TypeVar

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """``value`` unless it is ``None``; falsy values such as ``0`` are kept."""
    if value is None:
        return default
    return value
