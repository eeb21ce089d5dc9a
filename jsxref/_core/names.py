from __future__ import annotations

from typing import Any, TypeAlias, overload

from typing_extensions import final


@final
class Location:
    @property
    def column(self, /) -> int:
        return self._column

    @property
    def line(self, /) -> int:
        return self._line

    __slots__ = '_column', '_line'

    _column: int
    _line: int

    def __new__(cls, line: int, column: int, /) -> Location:
        if not isinstance(line, int) or not isinstance(column, int):
            raise TypeError(
                'Line and column should be integers, '
                f'but found: {type(line)}, {type(column)}.'
            )
        if line < 1 or column < 0:
            raise ValueError(
                'Line should be positive and column non-negative, '
                f'but found: {line!r}, {column!r}.'
            )
        self = super().__new__(cls)
        self._column, self._line = column, line
        return self

    @overload
    def __eq__(self, other: Location) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            self._line == other._line and self._column == other._column
            if isinstance(other, Location)
            else NotImplemented
        )

    def __getnewargs__(self, /) -> tuple[int, int]:
        return self._line, self._column

    def __hash__(self, /) -> int:
        return hash((self._line, self._column))

    def __repr__(self, /) -> str:
        return f'{type(self).__qualname__}({self._line!r}, {self._column!r})'

    def __str__(self, /) -> str:
        return f'{self._line}:{self._column}'


@final
class SimpleName:
    """Bare identifier used as an element name, e.g. ``<Button/>``."""

    @property
    def location(self, /) -> Location | None:
        return self._location

    @property
    def name(self, /) -> str:
        return self._name

    __slots__ = '_location', '_name'

    _location: Location | None
    _name: str

    def __new__(
        cls, name: str, /, *, location: Location | None = None
    ) -> SimpleName:
        _validate_identifier(name)
        _validate_location(location)
        self = super().__new__(cls)
        self._location, self._name = location, name
        return self

    @overload
    def __eq__(self, other: ElementName) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            (
                isinstance(other, SimpleName)
                and self._name == other._name
                and self._location == other._location
            )
            if isinstance(other, _ELEMENT_NAME_TYPES)
            else NotImplemented
        )

    def __getnewargs_ex__(self, /) -> tuple[tuple[str], dict[str, Any]]:
        return (self._name,), {'location': self._location}

    def __hash__(self, /) -> int:
        return hash((self._name, self._location))

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}({self._name!r}'
            + _location_to_repr_suffix(self._location)
            + ')'
        )

    def __str__(self, /) -> str:
        return self._name


@final
class MemberPath:
    """
    Dotted element name, e.g. ``<Layout.Header/>``.

    Only the leftmost identifier of the path refers to a binding,
    the rest are property accesses on it.
    """

    @property
    def location(self, /) -> Location | None:
        return self._location

    @property
    def object(self, /) -> ElementName:
        return self._object

    @property
    def property(self, /) -> str:
        return self._property

    __slots__ = '_location', '_object', '_property'

    _location: Location | None
    _object: ElementName
    _property: str

    def __new__(
        cls,
        object_: ElementName,
        property_: str,
        /,
        *,
        location: Location | None = None,
    ) -> MemberPath:
        if not isinstance(object_, _ELEMENT_NAME_TYPES):
            raise TypeError(
                'Object should be an element name, '
                f'but found: {type(object_)}.'
            )
        _validate_identifier(property_)
        _validate_location(location)
        self = super().__new__(cls)
        self._location, self._object, self._property = (
            location,
            object_,
            property_,
        )
        return self

    @overload
    def __eq__(self, other: ElementName) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            (
                isinstance(other, MemberPath)
                and self._property == other._property
                and self._location == other._location
                and self._object == other._object
            )
            if isinstance(other, _ELEMENT_NAME_TYPES)
            else NotImplemented
        )

    def __getnewargs_ex__(
        self, /
    ) -> tuple[tuple[ElementName, str], dict[str, Any]]:
        return (self._object, self._property), {'location': self._location}

    def __hash__(self, /) -> int:
        return hash((self._object, self._property, self._location))

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}({self._object!r}, {self._property!r}'
            + _location_to_repr_suffix(self._location)
            + ')'
        )

    def __str__(self, /) -> str:
        return f'{self._object}.{self._property}'


@final
class NamespacedName:
    """Colon-separated element name, e.g. ``<svg:rect/>``."""

    @property
    def local(self, /) -> str:
        return self._local

    @property
    def location(self, /) -> Location | None:
        return self._location

    @property
    def namespace(self, /) -> str:
        return self._namespace

    __slots__ = '_local', '_location', '_namespace'

    _local: str
    _location: Location | None
    _namespace: str

    def __new__(
        cls,
        namespace: str,
        local: str,
        /,
        *,
        location: Location | None = None,
    ) -> NamespacedName:
        _validate_identifier(namespace)
        _validate_identifier(local)
        _validate_location(location)
        self = super().__new__(cls)
        self._local, self._location, self._namespace = (
            local,
            location,
            namespace,
        )
        return self

    @overload
    def __eq__(self, other: ElementName) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            (
                isinstance(other, NamespacedName)
                and self._namespace == other._namespace
                and self._local == other._local
                and self._location == other._location
            )
            if isinstance(other, _ELEMENT_NAME_TYPES)
            else NotImplemented
        )

    def __getnewargs_ex__(self, /) -> tuple[tuple[str, str], dict[str, Any]]:
        return (self._namespace, self._local), {'location': self._location}

    def __hash__(self, /) -> int:
        return hash((self._namespace, self._local, self._location))

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}({self._namespace!r}, {self._local!r}'
            + _location_to_repr_suffix(self._location)
            + ')'
        )

    def __str__(self, /) -> str:
        return f'{self._namespace}:{self._local}'


ElementName: TypeAlias = SimpleName | MemberPath | NamespacedName
_ELEMENT_NAME_TYPES = (SimpleName, MemberPath, NamespacedName)


def _location_to_repr_suffix(location: Location | None, /) -> str:
    return '' if location is None else f', location={location!r}'


def _validate_identifier(value: Any, /) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f'Identifier should have type {str}, but found: {type(value)}.'
        )
    if not value:
        raise ValueError('Identifier should be non-empty.')


def _validate_location(location: Any, /) -> None:
    if location is not None and not isinstance(location, Location):
        raise TypeError(
            f'Location should have type {Location}, '
            f'but found: {type(location)}.'
        )
