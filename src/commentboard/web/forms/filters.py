"""Field filters for WTForm."""
from typing import Any, Callable

__all__ = ["default"]


def default(value: str) -> Callable[[Any], str]:
    """Return a filter replacing missing or falsy data by `value`.

    JSON bodies may carry other types than strings: `null`, `false`, `0`
    and `""` get the default, anything else is converted to string.
    """

    def _default(data: Any) -> str:
        if not data:
            return value
        if not isinstance(data, str):
            return str(data)
        return data

    return _default
