import os

from .errors import InvalidArgumentError

_ENV_FILL_WARN_SIZE = "NDSPARSE_FILL_WARN_SIZE"
_default_fill_warn_size = 1_000_000
_current_fill_warn_size = _default_fill_warn_size


def set_fill_warn_size(n: int) -> None:
    """Set the element count above which a materializing ``fill`` logs a warning.

    ``0`` disables the warning.
    """
    global _current_fill_warn_size
    n = int(n)
    if n < 0:
        raise InvalidArgumentError("fill warning size must be >= 0")
    _current_fill_warn_size = n
    os.environ[_ENV_FILL_WARN_SIZE] = str(_current_fill_warn_size)


def get_fill_warn_size() -> int:
    # If user set env externally, honor it
    env = os.environ.get(_ENV_FILL_WARN_SIZE)
    if env:
        try:
            return max(0, int(env))
        except ValueError:
            return _current_fill_warn_size
    return _current_fill_warn_size
