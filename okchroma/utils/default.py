from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """
    Fill in an optional argument that was left out.

    Only ``None`` counts as missing. Falsy values like ``0`` or an empty
    list are returned as given, so an explicit empty weight list still
    reaches the caller's validation.
    """
    if value is None:
        return default
    return value
