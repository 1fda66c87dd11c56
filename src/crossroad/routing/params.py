"""Path parameter type conversion.

Built-in converters for values captured by ``:name`` pattern segments.
"""

from collections.abc import Callable

_TRUE = frozenset({"true", "yes", "1"})
_FALSE = frozenset({"false", "no", "0"})


def _to_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    msg = f"invalid literal for bool: {value!r}"
    raise ValueError(msg)


# target type -> converter for each supported parameter type
CONVERTERS: dict[type, Callable[[str], object]] = {
    str: str,
    int: int,
    float: float,
    bool: _to_bool,
}


def convert_param[T](value: str, param_type: type[T]) -> T:
    """Convert a captured path parameter string to the target type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    converter = CONVERTERS[param_type]
    return converter(value)  # type: ignore[return-value]
