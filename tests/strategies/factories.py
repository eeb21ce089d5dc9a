from __future__ import annotations

from collections.abc import Sequence

from hypothesis import strategies as st

from jsxref.base import Scope, ScopeKind
from tests.utils import ScopeChain, Strategy

ScopeLevel = tuple[ScopeKind, Sequence[str]]


def build_scope_chain(levels: Sequence[ScopeLevel], /) -> ScopeChain:
    """
    Builds linear chain of nested scopes from the outermost level inwards,
    returns its root along with the innermost scope.
    """
    assert levels, levels
    *outer_levels, (innermost_kind, innermost_bindings) = levels
    innermost = scope = Scope(innermost_kind, innermost_bindings)
    for kind, bindings in reversed(outer_levels):
        scope = Scope(kind, bindings, [scope])
    return scope, innermost


def to_scope_chains(
    *,
    global_bindings: Strategy[Sequence[str]],
    module_bindings: Strategy[Sequence[str]] | None,
    inner_bindings: Strategy[Sequence[str]],
    inner_kinds: Strategy[ScopeKind],
    max_inner_depth: int = 4,
) -> Strategy[ScopeChain]:
    global_levels = st.tuples(st.just(ScopeKind.GLOBAL), global_bindings)
    module_levels = (
        st.just([])
        if module_bindings is None
        else st.tuples(st.just(ScopeKind.MODULE), module_bindings).map(
            lambda level: [level]
        )
    )
    inner_levels = st.lists(
        st.tuples(inner_kinds, inner_bindings), max_size=max_inner_depth
    )
    return st.builds(
        lambda global_level, module_tail, inner_tail: build_scope_chain(
            [global_level, *module_tail, *inner_tail]
        ),
        global_levels,
        module_levels,
        inner_levels,
    )
