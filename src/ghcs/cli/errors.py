"""Translate GhcsError into a user-facing message and an exit status."""

import functools
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from ghcs.errors import GhcsError, NoSelection
from ghcs.output import error_output, user_output

P = ParamSpec("P")
R = TypeVar("R")


def reports_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Decorate a command so ghcs errors print a message instead of a traceback."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except NoSelection as e:
            if e.cancelled:
                user_output("\n" + str(e))
                raise SystemExit(0) from None
            user_output(str(e))
            raise SystemExit(1) from None
        except GhcsError as e:
            error_output(str(e))
            raise SystemExit(1) from None

    return wrapper
