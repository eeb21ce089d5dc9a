from __future__ import annotations

import pickle
from collections.abc import Iterator
from typing import Any, TypeAlias

from hypothesis.strategies import SearchStrategy

from jsxref.base import Scope

Strategy = SearchStrategy
ScopeChain: TypeAlias = tuple[Scope, Scope]


def equivalence(left_statement: bool, right_statement: bool, /) -> bool:  # noqa: FBT001
    return not left_statement ^ right_statement


def implication(antecedent: bool, consequent: bool, /) -> bool:  # noqa: FBT001
    return not antecedent or consequent


def round_trip_pickle(object_: Any) -> Any:
    return pickle.loads(pickle.dumps(object_))


def to_ancestors(scope: Scope, /) -> Iterator[Scope]:
    """Yields given scope and its ancestors from the innermost outwards."""
    candidate: Scope | None = scope
    while candidate is not None:
        yield candidate
        candidate = candidate.parent


def to_descendants(scope: Scope, /) -> Iterator[Scope]:
    yield scope
    for child in scope.children:
        yield from to_descendants(child)
