from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias, overload

from typing_extensions import final

from .extraction import Reference
from .names import Location


@final
class Diagnostic:
    @property
    def location(self, /) -> Location | None:
        return self._location

    @property
    def message(self, /) -> str:
        return self._message

    __slots__ = '_location', '_message'

    _location: Location | None
    _message: str

    def __new__(cls, location: Location | None, message: str, /) -> Diagnostic:
        self = super().__new__(cls)
        self._location, self._message = location, message
        return self

    @overload
    def __eq__(self, other: Diagnostic) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            (
                self._location == other._location
                and self._message == other._message
            )
            if isinstance(other, Diagnostic)
            else NotImplemented
        )

    def __getnewargs__(self, /) -> tuple[Location | None, str]:
        return self._location, self._message

    def __hash__(self, /) -> int:
        return hash((self._location, self._message))

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}'
            f'({self._location!r}, {self._message!r})'
        )

    def __str__(self, /) -> str:
        return (
            self._message
            if self._location is None
            else f'{self._location}: {self._message}'
        )


Report: TypeAlias = Callable[[Diagnostic], None]


def to_message(name: str, /) -> str:
    return f"'{name}' is not defined."


def emit(reference: Reference, report: Report, /) -> Diagnostic:
    result = Diagnostic(reference.location, to_message(reference.name))
    report(result)
    return result
