import functools
import warnings
from typing import Callable, Optional, TypeVar, Union

from typing_extensions import deprecated as typing_deprecated

F = TypeVar("F", bound=Callable)


def deprecated(reason: Union[str, Callable, None] = None):
    """
    Mark a function as deprecated.

    Calls emit a `DeprecationWarning` pointing at the caller, and the wrapper carries
    `__deprecated__` so type checkers flag uses as well.

    Usage:
    @deprecated
    @deprecated("Use build_validator instead.")
    """
    if callable(reason):
        return deprecated()(reason)

    def decorator(func: F) -> F:
        message: Optional[str] = reason
        marked = typing_deprecated(message or "This function is deprecated")(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            suffix = f" {message}" if message else ""
            warnings.warn(
                f"Call to deprecated function {func.__name__}.{suffix}",
                category=DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        wrapper.__deprecated__ = marked.__deprecated__
        return wrapper  # type: ignore[return-value]

    return decorator
