import warnings
from collections.abc import Callable
from functools import wraps


def deprecated[**P, R](msg: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark a function as deprecated, pointing the caller to its replacement.

    Each call emits a `DeprecationWarning` attributed to the caller's line, then runs the function.

    Args:
        msg (str): Hint appended to the warning, usually the name of the replacement.

    Returns:
        Callable[[Callable[P, R]], Callable[P, R]]: The decorator.

    Example:
    ```python
    >>> import warnings
    >>> from fpkit._core import deprecated
    >>> @deprecated("use `new_add` instead")
    ... def old_add(x: int, y: int) -> int:
    ...     return x + y
    >>> with warnings.catch_warnings(record=True) as caught:
    ...     warnings.simplefilter("always")
    ...     old_add(1, 2)
    3
    >>> str(caught[0].message)
    '`old_add` is deprecated: use `new_add` instead'

    ```
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(
                f"`{func.__name__}` is deprecated: {msg}",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        return wrapper

    return decorator
