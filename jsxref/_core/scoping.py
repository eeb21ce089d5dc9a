from __future__ import annotations

import enum
import logging
import weakref
from collections.abc import Iterable, Sequence

from reprit.base import generate_repr

from .config import ResolutionConfig

logger = logging.getLogger(__name__)


class ScopeKind(enum.IntEnum):
    BLOCK = enum.auto()
    CATCH = enum.auto()
    CLASS = enum.auto()
    CLASS_FIELD_INITIALIZER = enum.auto()
    CLASS_STATIC_BLOCK = enum.auto()
    FOR = enum.auto()
    FUNCTION = enum.auto()
    FUNCTION_EXPRESSION_NAME = enum.auto()
    GLOBAL = enum.auto()
    MODULE = enum.auto()
    SWITCH = enum.auto()
    WITH = enum.auto()

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}.{self.name}'


class Verdict(enum.Enum):
    BOUND = enum.auto()
    UNBOUND = enum.auto()

    def __repr__(self) -> str:
        return f'{type(self).__qualname__}.{self.name}'


class Scope:
    """
    Lexical scope with names declared in it.

    Scopes are built bottom-up: constructing a scope attaches given children
    to it, and children refer back to their parent weakly,
    so whoever built the tree has to keep its root alive.
    """

    @property
    def bindings(self) -> frozenset[str]:
        return self._bindings

    @property
    def children(self) -> Sequence[Scope]:
        return self._children

    @property
    def depth(self) -> int:
        result, scope = 0, self.parent
        while scope is not None:
            result, scope = result + 1, scope.parent
        return result

    @property
    def kind(self) -> ScopeKind:
        return self._kind

    @property
    def parent(self) -> Scope | None:
        return None if self._parent is None else self._parent()

    __slots__ = '__weakref__', '_bindings', '_children', '_kind', '_parent'

    def __init__(self,
                 kind: ScopeKind,
                 bindings: Iterable[str] = (),
                 children: Iterable[Scope] = ()) -> None:
        if not isinstance(kind, ScopeKind):
            raise TypeError(f'Kind should have type {ScopeKind}, '
                            f'but found: {type(kind)}.')
        children = tuple(children)
        for child in children:
            if child._parent is not None:
                raise ValueError(f'Scope {child!r} already has a parent.')
        self._bindings, self._children, self._kind, self._parent = (
            frozenset(bindings), children, kind, None
        )
        self_reference = weakref.ref(self)
        for child in children:
            child._parent = self_reference

    __repr__ = generate_repr(__init__)


def to_boundary_kind(config: ResolutionConfig, /) -> ScopeKind:
    return (ScopeKind.GLOBAL
            if config.allow_globals or not config.source_is_module
            else ScopeKind.MODULE)


def to_visible_bindings(scope: Scope,
                        boundary_kind: ScopeKind,
                        /) -> frozenset[str]:
    """
    Collects names declared in given scope and its ancestors
    up to the first one of the boundary kind (inclusive).
    """
    result = set(scope.bindings)
    while scope.kind is not boundary_kind:
        parent = scope.parent
        if parent is None:
            logger.debug('Scope chain ended at %r before reaching %r.',
                         scope.kind, boundary_kind)
            break
        scope = parent
        result.update(scope.bindings)
    # some parsers wrap the actual top-level scope
    # in up to two synthetic ones, those are looked into only
    # through the first child on each level
    if scope.children:
        first_child = scope.children[0]
        result.update(first_child.bindings)
        if first_child.children:
            result.update(first_child.children[0].bindings)
    return frozenset(result)


def resolve(name: str, scope: Scope, config: ResolutionConfig, /) -> Verdict:
    return (Verdict.BOUND
            if name in to_visible_bindings(scope, to_boundary_kind(config))
            else Verdict.UNBOUND)
