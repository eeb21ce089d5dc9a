from __future__ import annotations

from functools import singledispatch
from typing import Any, Final, overload

from typing_extensions import final

from .conventions import is_intrinsic_tag_name
from .names import Location, MemberPath, NamespacedName, SimpleName

IMPLICIT_RECEIVER_NAME: Final[str] = 'this'


@final
class Reference:
    """Identifier from an element name which should resolve to a binding."""

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
    ) -> Reference:
        self = super().__new__(cls)
        self._location, self._name = location, name
        return self

    @overload
    def __eq__(self, other: Reference) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            self._name == other._name and self._location == other._location
            if isinstance(other, Reference)
            else NotImplemented
        )

    def __hash__(self, /) -> int:
        return hash((self._name, self._location))

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}({self._name!r}'
            + (
                ''
                if self._location is None
                else f', location={self._location!r}'
            )
            + ')'
        )


def is_implicit_receiver(reference: Reference, /) -> bool:
    return reference.name == IMPLICIT_RECEIVER_NAME


@singledispatch
def to_reference(_node: Any, /) -> Reference | None:
    """
    Returns identifier to resolve for given element name
    or ``None`` if there is nothing to resolve.
    """
    return None


@to_reference.register(SimpleName)
def _(node: SimpleName, /) -> Reference | None:
    return (
        None
        if is_intrinsic_tag_name(node.name)
        else Reference(node.name, location=node.location)
    )


@to_reference.register(MemberPath)
def _(node: MemberPath, /) -> Reference | None:
    root: Any = node.object
    while isinstance(root, MemberPath):
        root = root.object
    return (
        Reference(root.name, location=root.location)
        if isinstance(root, SimpleName)
        else None
    )


@to_reference.register(NamespacedName)
def _(node: NamespacedName, /) -> Reference | None:
    return Reference(node.namespace, location=node.location)
