# The MIT License (MIT)
#
# Copyright (c) the justmaybe authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why is everything in one file?
#   - Flat is better than nested
#   - Just and Nothing need to 'know' about each other (Just(None) is Nothing)
#   - It's easier to vendor (i.e. copy-paste) this library if needed
# - Just and Nothing deliberately duplicate small methods instead of
#   branching on presence in the base class. Each method only ever handles
#   one case, which makes them trivial to read.
from __future__ import annotations

__version__ = "0.1.0"

from abc import ABC, abstractmethod
from json import dumps as _json_dumps, loads as _json_loads
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    TypeVar,
    no_type_check,
    overload,
)

__all__ = [
    # The container
    "Maybe",
    "Just",
    "Nothing",
    # Curried combinators
    "fmap",
    "bind",
    "match",
    "from_tuple",
    # Serialization
    "json_default",
    # Exceptions
    "DecodeError",
    "MissingValueError",
]

_T = TypeVar("_T")
_A = TypeVar("_A")
_B = TypeVar("_B")

_object_new = object.__new__


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = classmethod(init_subclass_not_allowed)
        return cls


class Maybe(_ImmutableBase, ABC, Generic[_T]):
    """The presence (:class:`Just`) or absence (:class:`Nothing`) of a value.

    ``Maybe`` itself can't be instantiated. Use one of the constructors:

    >>> Just(5)
    Just(5)
    >>> Nothing()
    Nothing()
    >>> Maybe.from_tuple(1, True)
    Just(1)

    ``None`` is never wrapped: ``Just(None)`` returns ``Nothing()``.
    This keeps "absent" and "present but null" from both existing,
    since they'd mean the same thing. Containers nested inside containers
    are left alone; use :meth:`flatten` to collapse those explicitly.

    Important
    ---------
    :attr:`value` does **not** raise on an absent container, it returns
    ``None``. Check :attr:`has_value` first if ``None`` isn't an acceptable
    fallback, or use :meth:`value_or` or :meth:`unwrap` instead.

    Pattern matching is supported:

    >>> match Just(4):
    ...     case Just(v):
    ...         print(v)
    ...     case Nothing():
    ...         print("nothing")
    4
    """

    __slots__ = ()

    @classmethod
    def from_tuple(cls, value: _T | None, ok: bool = True, /) -> Maybe[_T]:
        """Create from the "value, success" calling convention.

        ``ok`` is checked first: if it's false, the result is ``Nothing()``
        regardless of ``value``. Otherwise this behaves like :class:`Just`,
        including turning ``None`` into ``Nothing()``.

        Example
        -------
        >>> Maybe.from_tuple(3)
        Just(3)
        >>> Maybe.from_tuple(3, False)
        Nothing()
        >>> Maybe.from_tuple(None, True)
        Nothing()
        """
        if not ok:
            return _NOTHING
        return Just(value)

    @property
    @abstractmethod
    def has_value(self) -> bool:
        """Whether a value is present"""

    @property
    @abstractmethod
    def value(self) -> _T | None:
        """The stored value, or ``None`` if there is none.

        Warning
        -------
        This never raises. On an absent container it returns ``None``,
        which is indistinguishable from a stored value only because
        ``Just`` never stores ``None``.
        """

    @abstractmethod
    def value_or(self, fallback: _T, /) -> _T:
        """The stored value, or ``fallback`` if there is none

        Example
        -------
        >>> Just(1).value_or(0)
        1
        >>> Nothing().value_or(0)
        0
        """

    @abstractmethod
    def unwrap(self) -> _T:
        """The stored value. Raises :class:`MissingValueError` if there is none."""

    @abstractmethod
    def map(self, f: Callable[[_T], _B], /) -> Maybe[_B]:
        """Apply ``f`` to the stored value, if any, and wrap the result.

        The result is wrapped with :class:`Just`, so an ``f`` returning
        ``None`` produces ``Nothing()``.

        Example
        -------
        >>> Just(2).map(str)
        Just('2')
        >>> Nothing().map(str)
        Nothing()
        """

    @abstractmethod
    def bind(self, f: Callable[[_T], Maybe[_B]], /) -> Maybe[_B]:
        """Apply ``f`` to the stored value, if any, and return its result
        as-is. ``f`` must return a :class:`Maybe` itself.

        Example
        -------
        >>> def half(n: int) -> Maybe[int]:
        ...     return Just(n // 2) if n % 2 == 0 else Nothing()
        >>> Just(8).bind(half).bind(half)
        Just(2)
        >>> Just(3).bind(half)
        Nothing()
        """

    @abstractmethod
    def match(
        self, on_nothing: Callable[[], _B], on_just: Callable[[_T], _B]
    ) -> _B:
        """Call exactly one of the given functions, depending on whether
        a value is present, and return its result.

        Example
        -------
        >>> Just(3).match(lambda: "none", lambda n: f"got {n}")
        'got 3'
        """

    @abstractmethod
    def flatten(self: Maybe[Maybe[_B]]) -> Maybe[_B]:
        """Collapse a container holding a container into a single one.

        Raises ``TypeError`` if the stored value isn't a :class:`Maybe`.

        Example
        -------
        >>> Just(Just(1)).flatten()
        Just(1)
        >>> Just(Nothing()).flatten()
        Nothing()
        """

    def format_json(self) -> str:
        """Format as JSON: the stored value's JSON, or ``null``.

        Inverse of :meth:`parse_json`.

        Non-finite floats (``nan``, ``inf``) aren't valid JSON and raise
        ``ValueError``.

        Example
        -------
        >>> Just(42).format_json()
        '42'
        >>> Nothing().format_json()
        'null'
        """
        return _json_dumps(self.value, default=json_default, allow_nan=False)

    @overload
    @classmethod
    def parse_json(
        cls, s: str | bytes | bytearray, /, inner: None = None
    ) -> Maybe[Any]: ...

    @overload
    @classmethod
    def parse_json(
        cls, s: str | bytes | bytearray, /, inner: Callable[[Any], _B]
    ) -> Maybe[_B]: ...

    @classmethod
    def parse_json(
        cls,
        s: str | bytes | bytearray,
        /,
        inner: Callable[[Any], Any] | None = None,
    ) -> Maybe[Any]:
        """Create from JSON. ``null`` gives ``Nothing()``, anything else
        is wrapped in :class:`Just`.

        Inverse of :meth:`format_json`.

        ``inner`` determines what's accepted as a value:

        - ``None`` (default): any JSON value.
        - ``bool``, ``int``, ``float``, ``str``, ``list`` or ``dict``:
          only that JSON type. Booleans don't count as numbers,
          but integers are accepted (and converted) as ``float``.
        - any other callable: it's called with the decoded value.
          A ``ValueError`` or ``TypeError`` it raises counts as a decoding
          failure.

        Raises :class:`DecodeError` if the input isn't valid JSON (this
        includes ``NaN`` and ``Infinity``, and nesting too deep to parse) or
        the value isn't accepted by ``inner``.

        Example
        -------
        >>> Maybe.parse_json("42", int)
        Just(42)
        >>> Maybe.parse_json("null", int)
        Nothing()
        >>> Maybe.parse_json('"abc"', int)
        Traceback (most recent call last):
          ...
        justmaybe.DecodeError: Invalid format: '"abc"'
        """
        if inner is not None and not callable(inner):
            raise TypeError(f"inner must be a type or callable, got {inner!r}")
        try:
            decoded = _json_loads(s, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"Invalid format: {s!r}") from e

        if decoded is None:
            return _NOTHING
        elif inner is None:
            return Just(decoded)

        try:
            return Just(_convert_inner(decoded, inner))
        except (ValueError, TypeError) as e:
            raise DecodeError(f"Invalid format: {s!r}") from e


@final
class Just(Maybe[_T]):
    """A present value

    ``Just(None)`` doesn't create a ``Just``, it returns ``Nothing()``.

    Example
    -------
    >>> Just("foo")
    Just('foo')
    >>> Just(None)
    Nothing()
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    _value: _T

    def __new__(cls, value: _T | None, /) -> Maybe[_T]:  # type: ignore[misc]
        if value is None:
            return _NOTHING
        self = _object_new(cls)
        self._value = value
        return self

    @property
    def has_value(self) -> bool:
        return True

    @property
    def value(self) -> _T:
        return self._value

    def value_or(self, fallback: _T, /) -> _T:
        return self._value

    def unwrap(self) -> _T:
        return self._value

    def map(self, f: Callable[[_T], _B], /) -> Maybe[_B]:
        return Just(f(self._value))

    def bind(self, f: Callable[[_T], Maybe[_B]], /) -> Maybe[_B]:
        return f(self._value)

    def match(
        self, on_nothing: Callable[[], _B], on_just: Callable[[_T], _B]
    ) -> _B:
        return on_just(self._value)

    @no_type_check
    def flatten(self):
        if not isinstance(self._value, Maybe):
            raise TypeError(
                f"Cannot flatten Just containing {type(self._value).__name__}"
            )
        return self._value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Just({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Compare for equality. Two ``Just`` are equal if their values are.

        Example
        -------
        >>> Just(1) == Just(1)
        True
        >>> Just(1) == Nothing()
        False
        """
        if isinstance(other, Just):
            return self._value == other._value
        elif isinstance(other, Maybe):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Just, self._value))

    @no_type_check
    def __reduce__(self):
        return _unpkl_just, (self._value,)


@final
class Nothing(Maybe[_T]):
    """The absence of a value

    There is only one instance: ``Nothing()`` always returns it.

    Example
    -------
    >>> Nothing()
    Nothing()
    >>> Nothing() is Nothing()
    True
    """

    __slots__ = ()

    def __new__(cls) -> Nothing[_T]:
        return _NOTHING

    @property
    def has_value(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def value_or(self, fallback: _T, /) -> _T:
        return fallback

    def unwrap(self) -> _T:
        raise MissingValueError("Nothing() has no value")

    def map(self, f: Callable[[_T], _B], /) -> Maybe[_B]:
        return _NOTHING

    def bind(self, f: Callable[[_T], Maybe[_B]], /) -> Maybe[_B]:
        return _NOTHING

    def match(
        self, on_nothing: Callable[[], _B], on_just: Callable[[_T], _B]
    ) -> _B:
        return on_nothing()

    @no_type_check
    def flatten(self):
        return _NOTHING

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Maybe):
            return other is self
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Nothing)

    @no_type_check
    def __reduce__(self):
        return _unpkl_nothing, ()


_NOTHING: Nothing[Any] = _object_new(Nothing)


# Separate unpickling functions allow us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_just(value: Any) -> Maybe[Any]:
    return Just(value)


@no_type_check
def _unpkl_nothing() -> Nothing[Any]:
    return _NOTHING


def fmap(f: Callable[[_A], _B], /) -> Callable[[Maybe[_A]], Maybe[_B]]:
    """Lift ``f`` to work on containers.

    Equivalent to ``lambda m: m.map(f)``, so the result can be passed around
    or composed before any container exists.

    Example
    -------
    >>> double = fmap(lambda n: n * 2)
    >>> double(Just(4))
    Just(8)
    >>> double(Nothing())
    Nothing()
    """

    def mapped(m: Maybe[_A], /) -> Maybe[_B]:
        return m.map(f)

    return mapped


def bind(
    f: Callable[[_A], Maybe[_B]], /
) -> Callable[[Maybe[_A]], Maybe[_B]]:
    """Curried version of :meth:`Maybe.bind`"""

    def bound(m: Maybe[_A], /) -> Maybe[_B]:
        return m.bind(f)

    return bound


def match(
    on_nothing: Callable[[], _B], on_just: Callable[[_A], _B]
) -> Callable[[Maybe[_A]], _B]:
    """Curried version of :meth:`Maybe.match`.

    Example
    -------
    >>> describe = match(lambda: "empty", lambda v: f"holds {v!r}")
    >>> describe(Just(1))
    'holds 1'
    >>> describe(Nothing())
    'empty'
    """

    def matched(m: Maybe[_A], /) -> _B:
        return m.match(on_nothing, on_just)

    return matched


def from_tuple(value: _T | None, ok: bool = True, /) -> Maybe[_T]:
    """Alias for :meth:`Maybe.from_tuple`.

    Example
    -------
    >>> d = {"a": 1}
    >>> from_tuple(d.get("a"), "a" in d)
    Just(1)
    """
    return Maybe.from_tuple(value, ok)


def json_default(obj: object, /) -> Any:
    """Hook for :func:`json.dumps` to encode containers anywhere in a
    structure, the same way :meth:`Maybe.format_json` does.

    Example
    -------
    >>> import json
    >>> json.dumps({"a": Just(1), "b": Nothing()}, default=json_default)
    '{"a": 1, "b": null}'
    """
    if isinstance(obj, Maybe):
        return obj.value
    raise TypeError(
        f"Object of type {type(obj).__name__} is not JSON serializable"
    )


# The accepted decoded types for each JSON type name. `bool` is a subclass
# of `int`, so exact type checks are needed here.
_JSON_TYPES: dict[type, tuple[type, ...]] = {
    bool: (bool,),
    int: (int,),
    float: (float, int),
    str: (str,),
    list: (list,),
    dict: (dict,),
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _convert_inner(decoded: Any, inner: Callable[[Any], Any]) -> Any:
    if isinstance(inner, type) and inner in _JSON_TYPES:
        if type(decoded) not in _JSON_TYPES[inner]:
            raise TypeError(
                f"Expected {inner.__name__}, got {type(decoded).__name__}"
            )
        return float(decoded) if inner is float else decoded
    return inner(decoded)


class DecodeError(ValueError):
    """JSON could not be decoded into a :class:`Maybe`.
    The underlying error is available as ``__cause__``."""


class MissingValueError(ValueError):
    """A value was required, but the container is empty"""


for name in __all__:
    member = locals()[name]
    if getattr(member, "__module__", None) == __name__:  # pragma: no branch
        member.__module__ = "justmaybe"

# clear up loop variables so they don't leak into the namespace
del name
del member

for _unpkl in (_unpkl_just, _unpkl_nothing):
    _unpkl.__module__ = "justmaybe"


# Just and Nothing are the only variants
final(Maybe)
