"""
Either monad for composing fallible computations.

An Either is one of two variants: ``Ok(value)`` for a successful computation
or ``Err(error)`` for a failed one. Errors are values here, never raised
by the operators: once a chain is ``Err``, ``do`` and ``bind`` hand the
identical error along and never call another transform. This replaces a
ladder of ``if error is not None`` checks with a flat pipeline.

Manifesto:
    - **Errors as values:** Failures travel in the Err slot, not the stack
    - **Short-circuit:** A failed chain never runs another transform
    - **No recovery by accident:** Nothing turns an Err back into an Ok;
      build a new Ok explicitly if you want a fallback
    - **Unrepresentable nonsense:** Err has no payload, so there is no
      "value you must ignore"

Architecture:
    ::

        ┌────────────────────────────────────────────────────────────┐
        │                   Either[T] = Ok[T] | Err[T]                │
        ├──────────────────┬──────────────────┬──────────────────────┤
        │     Ok[T]        │     Err[T]       │   Operators          │
        │  • value: T      │  • error: Exc    │ • result(v, e)       │
        │  • is_ok()       │  • is_ok()       │ • do(m, f)           │
        │  • unwrap()      │  • unwrap() ⚠    │ • bind(m, f)         │
        └──────────────────┴──────────────────┴──────────────────────┘

        do:    Ok(v)  ── f(v) ──────────────────> Ok(f(v))
               Err(e) ─────────────────────────> Err(e)      f not called

        bind:  Ok(v)  ── f(v) = (w, None) ──────> Ok(w)
               Ok(v)  ── f(v) = (_, e2)  ──────> Err(e2)
               Err(e) ─────────────────────────> Err(e)      f not called

Examples:
    Adapting a conventional (value, error) function:

    >>> from fungi.either import Ok, Err, result, do, bind
    >>> def div(a, b):
    ...     if b == 0:
    ...         return 0, ZeroDivisionError("can't divide by 0")
    ...     return a // b, None
    >>> result(*div(4, 2))
    Ok(2)
    >>> result(*div(1, 0))
    Err(ZeroDivisionError("can't divide by 0"))

    Chaining:

    >>> def possibly_fail(a):
    ...     if a == 13:
    ...         return 0, ValueError("that's an unlucky number")
    ...     return a + 22, None
    >>> bind(Ok(15), possibly_fail)
    Ok(37)
    >>> bind(Ok(13), possibly_fail)
    Err(ValueError("that's an unlucky number"))
    >>> Ok(15).do(lambda a: a + 1).bind(possibly_fail)
    Ok(38)

    Pattern matching:

    >>> match bind(Ok(13), possibly_fail):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(f"failed: {error}")
    failed: that's an unlucky number

Guardrails:
    ❌ DON'T: Raise inside a ``bind`` transform to signal failure
    ✅ DO: Return ``(value, error)`` and let bind wrap it

    ❌ DON'T: Call unwrap() without checking is_ok()
    ✅ DO: Use unwrap_or() or pattern matching

Tags:
    either, result, monad, error-handling, functional-programming, fungi

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from fungi.errors import FungiError, ValidationError
from fungi.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    A successful computation carrying ``value``.

    Examples:
        >>> Ok(42).is_ok()
        True
        >>> Ok(10).do(lambda x: x * 2).unwrap()
        20
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get value (the default is ignored for Ok)."""
        return self.value

    def do(self, f: Callable[[T], U]) -> Either[U]:
        """Method form of :func:`do`."""
        return do(self, f)

    def bind(self, f: Callable[[T], tuple[U, Exception | None]]) -> Either[U]:
        """Method form of :func:`bind`."""
        return bind(self, f)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    A failed computation carrying ``error``.

    ``do`` and ``bind`` pass an Err through untouched, so the first failure
    in a chain is the one the caller sees.

    Examples:
        >>> err = Err(ValueError("oh no something went wrong"))
        >>> err.do(lambda x: x + 1).error is err.error
        True
        >>> err.unwrap_or(0)
        0
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        """Get default since this is Err."""
        return default

    def do(self, f: Callable[[T], U]) -> Either[U]:
        """Method form of :func:`do`; never calls ``f``."""
        return do(self, f)

    def bind(self, f: Callable[[T], tuple[U, Exception | None]]) -> Either[U]:
        """Method form of :func:`bind`; never calls ``f``."""
        return bind(self, f)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, FungiError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Either = Ok[T] | Err[T]


# =============================================================================
# OPERATORS
# =============================================================================


def result(value: T, error: Exception | None = None) -> Either[T]:
    """
    Wrap a conventional ``(value, error)`` pair in an Either.

    If ``error`` is not None the value is discarded and an Err is returned;
    otherwise the value is wrapped in Ok (a None value is a valid success).

    Examples:
        >>> result(2, None)
        Ok(2)
        >>> result(0, ValueError("bad"))
        Err(ValueError('bad'))

    Raises:
        ValidationError: ``error`` is neither None nor an Exception
    """
    if error is None:
        return Ok(value)
    if not isinstance(error, Exception):
        raise ValidationError(
            f"error must be an Exception or None, got {type(error).__name__}",
            context={"error_type": type(error).__name__},
        )
    return Err(error)


def do(either: Either[T], f: Callable[[T], U]) -> Either[U]:
    """
    Apply a transform that cannot fail.

    Ok(v) becomes Ok(f(v)). An Err is returned as a new Err carrying the
    identical error and ``f`` is not called.
    """
    match either:
        case Ok(value):
            return Ok(f(value))
        case Err(error):
            logger.debug("either.short_circuit", op="do", error_type=type(error).__name__)
            return Err(error)
    raise _not_an_either(either)


def bind(either: Either[T], f: Callable[[T], tuple[U, Exception | None]]) -> Either[U]:
    """
    Apply a transform that can fail.

    ``f`` returns a ``(value, error)`` pair which is wrapped with
    :func:`result`, so Ok(v) becomes Ok(w) or Err(e2). An Err is returned as
    a new Err carrying the identical error and ``f`` is not called.
    """
    match either:
        case Ok(value):
            out, error = f(value)
            return result(out, error)
        case Err(error):
            logger.debug("either.short_circuit", op="bind", error_type=type(error).__name__)
            return Err(error)
    raise _not_an_either(either)


def _not_an_either(obj: object) -> ValidationError:
    return ValidationError(
        f"expected Ok or Err, got {type(obj).__name__}",
        context={"received_type": type(obj).__name__},
    )


__all__ = [
    "Either",
    "Ok",
    "Err",
    "result",
    "do",
    "bind",
]
