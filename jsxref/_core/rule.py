"""Rule flagging JSX element names which refer to undeclared bindings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from .config import ResolutionConfig
from .extraction import is_implicit_receiver, to_reference
from .names import ElementName
from .reporting import Diagnostic, Report, emit
from .scoping import Scope, Verdict, resolve

logger = logging.getLogger(__name__)

NAME: Final[str] = 'jsx-no-undef'
DESCRIPTION: Final[str] = 'Disallow undeclared variables in JSX'
CATEGORY: Final[str] = 'Possible Errors'
RECOMMENDED: Final[bool] = True
DOCS_URL: Final[str] = (
    'https://github.com/jsx-eslint/eslint-plugin-react/tree/master/docs/rules/'
    f'{NAME}.md'
)


def check_element(
    name_node: ElementName,
    scope: Scope,
    config: ResolutionConfig,
    report: Report,
    /,
) -> Verdict | None:
    """
    Checks name of an opening element used inside of given scope.

    Reports unbound references to given sink and returns the verdict,
    ``None`` stands for names which need no resolution
    (intrinsic tags, unsupported or malformed names).
    """
    reference = to_reference(name_node)
    if reference is None:
        logger.debug('Skipping element name %r.', name_node)
        return None
    if is_implicit_receiver(reference):
        return Verdict.BOUND
    result = resolve(reference.name, scope, config)
    if result is Verdict.UNBOUND:
        logger.debug('Reference %r is unbound.', reference)
        emit(reference, report)
    return result


def check_unit(
    elements: Iterable[tuple[ElementName, Scope]],
    config: ResolutionConfig,
    /,
) -> list[Diagnostic]:
    """
    Checks element names met while traversing a single analyzed unit,
    each paired with the innermost scope enclosing its usage.
    """
    result: list[Diagnostic] = []
    for name_node, scope in elements:
        check_element(name_node, scope, config, result.append)
    return result
