#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
A small `Result` type in the spirit of Rust's, used by every decoding path of this package.

Decoders return `Ok(value)` or `Err(error)` instead of raising, so a malformed input never escapes as an exception.
Inside a function decorated with `@propagate_result`, `unwrap_or_propagate()` returns early with the `Err`:

>>> @propagate_result
... def double(r):
...     return Ok(2 * r.unwrap_or_propagate())
>>> double(Ok(21))
Ok(42)
>>> double(Err(ValueError('boom')))
Err(ValueError('boom'))

Both variants support structural pattern matching:

>>> match Err('late'):
...     case Ok(value):
...         print('got', value)
...     case Err(error):
...         print('failed:', error)
failed: late
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)
E = TypeVar('E', covariant=True)
U = TypeVar('U')
F = TypeVar('F')
P = ParamSpec('P')
TE = TypeVar('TE', bound=BaseException)


@dataclass(frozen=True, slots=True, repr=False)
class Ok(Generic[T]):
    """Successful outcome holding `value`."""

    value: T

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        return self.value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, 'unwrap_err() called on an Ok')

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_or_raise(self) -> T:
        return self.value

    def unwrap_or_propagate(self) -> T:
        return self.value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        return Ok(op(self.value))

    def map_err(self, op: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return op(self.value)

    def inspect_err(self, op: Callable[[Any], Any]) -> Ok[T]:
        return self


@dataclass(frozen=True, slots=True, repr=False)
class Err(Generic[E]):
    """Failed outcome holding `error`, usually an exception instance."""

    error: E

    def __repr__(self) -> str:
        return f'Err({self.error!r})'

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self.error

    def unwrap(self) -> NoReturn:
        """Raise `UnwrapError`, chained to the error when it is an exception."""
        exc = UnwrapError(self, f'unwrap() called on {self!r}')
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self) -> NoReturn:
        """Raise the held exception as it is."""
        assert isinstance(self.error, BaseException), f'unwrap_or_raise() called on a non-exception: {self.error!r}'
        raise self.error

    def unwrap_or_propagate(self) -> NoReturn:
        """Leave the enclosing `@propagate_result` function, which then returns this `Err`."""
        raise _Propagation(self)

    def map(self, op: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        return Err(op(self.error))

    def and_then(self, op: Callable[[Any], Any]) -> Err[E]:
        return self

    def inspect_err(self, op: Callable[[E], Any]) -> Err[E]:
        """Call `op` with the error, for logging for instance, and return this same `Err`."""
        op(self.error)
        return self


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """Raised by the `unwrap*` methods called on the wrong variant, the offending result is kept in `result`."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


class _Propagation(Exception):
    def __init__(self, err: Err[Any]) -> None:
        super().__init__('unwrap_or_propagate() used outside of a @propagate_result function')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """Allow `unwrap_or_propagate()` inside `f`, an `Err` unwrapped that way becomes the return value."""
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _Propagation as e:
            return e.err

    return wrapper


def as_result(*exceptions: type[TE]) -> Callable[[Callable[P, U]], Callable[P, Result[U, TE]]]:
    """
    Make a decorator that turns a function into one returning a `Result`.

    The return value becomes `Ok(value)` and an exception of one of the given types becomes `Err(exc)`, holding the
    very instance that was raised. Other exceptions propagate.
    """
    if not exceptions or not all(inspect.isclass(e) and issubclass(e, BaseException) for e in exceptions):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, U]) -> Callable[P, Result[U, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[U, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
