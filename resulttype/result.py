"""Result type for flat error handling (like Rust's Result<T, E>).

A ``Result`` is either ``Ok(value)`` or ``Err(error)``. Check the tag
(``result.ok`` / ``result.err``) or pattern match before reading the payload:

    match load_config(path):
        case Ok(config):
            ...
        case Err(error):
            ...

``unwrap()`` and ``unwrap_error()`` raise on the wrong variant. Use them only
where the variant is already known, e.g. after ``has_error`` returned ``Ok``.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, Literal, NoReturn, TypeGuard

from resulttype.errors import UnwrapErrorOnSuccess, UnwrapOnFailure

logger = logging.getLogger("resulttype")


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Success result."""

    ok: ClassVar[Literal[True]] = True
    err: ClassVar[Literal[False]] = False

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def unwrap_or_else(self, default_value: T) -> T:
        """Return the value, ignoring ``default_value``."""
        return self.value

    def unwrap_error(self) -> NoReturn:
        """Always raises: an Ok has no error.

        Raises:
            UnwrapErrorOnSuccess: always
        """
        raise UnwrapErrorOnSuccess(self.value)


@dataclass(slots=True, frozen=True)
class Err[E]:
    """Error result."""

    ok: ClassVar[Literal[False]] = False
    err: ClassVar[Literal[True]] = True

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Always raises: an Err has no value.

        If the error payload is an exception, it is chained as the cause.

        Raises:
            UnwrapOnFailure: always
        """
        if isinstance(self.error, BaseException):
            raise UnwrapOnFailure(self.error) from self.error
        raise UnwrapOnFailure(self.error)

    def unwrap_or_else[T](self, default_value: T) -> T:
        """Return ``default_value`` unchanged."""
        return default_value

    def unwrap_error(self) -> E:
        """Return the error."""
        return self.error


type Result[T, E] = Ok[T] | Err[E]

# Lowercase constructor aliases
ok = Ok
err = Err


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Return True if the given Result is an Ok value."""
    return result.ok


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Return True if the given Result is an Err value."""
    return result.err


def has_error[E](results: Iterable[Result[Any, E]]) -> Result[None, E]:
    """Collapse a batch of results into one.

    Returns ``Err`` with the error of the first failing result, without looking
    at the rest, or ``Ok(None)`` if none failed (including an empty batch).
    After an ``Ok`` here, ``unwrap()`` is safe on every input result.

    Args:
        results: Results to check, in order. Lazy iterables are consumed only
            up to the first failure.

    Returns:
        ``Err(first_error)`` or ``Ok(None)``
    """
    for index, result in enumerate(results):
        if result.err:
            logger.debug(f"has_error: failure at index {index}, skipping the rest")
            return Err(result.error)
    return Ok(None)
