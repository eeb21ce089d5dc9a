from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, Final, overload

from typing_extensions import final


class InvalidOptions(ValueError):
    pass


@final
class SourceType(str, enum.Enum):
    MODULE = 'module'
    SCRIPT = 'script'

    def __repr__(self, /) -> str:
        return f'{type(self).__qualname__}.{self.name}'


ALLOW_GLOBALS_OPTION: Final[str] = 'allowGlobals'
_OPTIONS_NAMES: Final[frozenset[str]] = frozenset({ALLOW_GLOBALS_OPTION})


@final
class ResolutionConfig:
    @property
    def allow_globals(self, /) -> bool:
        return self._allow_globals

    @property
    def source_is_module(self, /) -> bool:
        return self._source_is_module

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any] | None,
        /,
        *,
        source_type: SourceType | str,
    ) -> ResolutionConfig:
        """
        Builds configuration from raw rule options
        (e.g. ``{'allowGlobals': True}``)
        and the declared source type of the analyzed unit.
        """
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise InvalidOptions(
                f'Options should be a mapping, but found: {type(options)}.'
            )
        unknown_options_names = options.keys() - _OPTIONS_NAMES
        if unknown_options_names:
            raise InvalidOptions(
                'Unknown options: '
                f'{", ".join(sorted(map(repr, unknown_options_names)))}.'
            )
        allow_globals = options.get(ALLOW_GLOBALS_OPTION, False)
        if not isinstance(allow_globals, bool):
            raise InvalidOptions(
                f'Option {ALLOW_GLOBALS_OPTION!r} should be a boolean, '
                f'but found: {allow_globals!r}.'
            )
        try:
            source_type = SourceType(source_type)
        except ValueError:
            raise InvalidOptions(
                'Source type should be one of '
                f'{", ".join(repr(member.value) for member in SourceType)}, '
                f'but found: {source_type!r}.'
            ) from None
        return cls(
            allow_globals=allow_globals,
            source_is_module=source_type is SourceType.MODULE,
        )

    __slots__ = '_allow_globals', '_source_is_module'

    _allow_globals: bool
    _source_is_module: bool

    def __new__(
        cls, *, allow_globals: bool = False, source_is_module: bool = False
    ) -> ResolutionConfig:
        self = super().__new__(cls)
        self._allow_globals, self._source_is_module = (
            bool(allow_globals),
            bool(source_is_module),
        )
        return self

    @overload
    def __eq__(self, other: ResolutionConfig) -> bool: ...

    @overload
    def __eq__(self, other: Any) -> Any: ...

    def __eq__(self, other: Any) -> Any:
        return (
            (
                self._allow_globals is other._allow_globals
                and self._source_is_module is other._source_is_module
            )
            if isinstance(other, ResolutionConfig)
            else NotImplemented
        )

    def __getnewargs_ex__(self, /) -> tuple[tuple[()], dict[str, bool]]:
        return (), {
            'allow_globals': self._allow_globals,
            'source_is_module': self._source_is_module,
        }

    def __hash__(self, /) -> int:
        return hash((self._allow_globals, self._source_is_module))

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}('
            f'allow_globals={self._allow_globals!r}, '
            f'source_is_module={self._source_is_module!r}'
            f')'
        )
