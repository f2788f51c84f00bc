"""Theme support declarations.

A host hands back whatever was registered for a feature: nothing, a bare
``True``, or the argument list of the registration call whose first element
is a mapping of options. ``normalize`` turns that raw value into one of the
variants below, once, at the boundary.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class Declaration:
    """Base variant. ``options`` is empty unless the host passed a mapping."""

    @property
    def options(self) -> Mapping[str, Any]:
        return _EMPTY

    def lookup(self, keys: tuple[str, ...]) -> Any:
        """Return the value of the first key present in ``options``, else None."""
        options = self.options
        for key in keys:
            if key in options:
                return options[key]
        return None

    def has(self, key: str) -> bool:
        return key in self.options


@dataclass(frozen=True)
class Unset(Declaration):
    """The host does not know the feature."""


@dataclass(frozen=True)
class Enabled(Declaration):
    """The host supports the feature without structured options."""


@dataclass(frozen=True)
class Disabled(Declaration):
    """The host registered the feature with a falsy value."""


@dataclass(frozen=True)
class Options(Declaration):
    """The host registered a mapping of option name to value."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def options(self) -> Mapping[str, Any]:
        return self.values


UNSET = Unset()
ENABLED = Enabled()
DISABLED = Disabled()


def normalize(raw: Any, supported: bool = True) -> Declaration:
    """Convert a raw host value into a Declaration.

    Array-wrapped values are unwrapped to their first element; any further
    elements are ignored.
    """
    if not supported:
        return UNSET

    if isinstance(raw, (list, tuple)):
        if not raw:
            return DISABLED
        raw = raw[0]

    if isinstance(raw, Mapping):
        return Options(raw)
    if raw:
        return ENABLED
    return DISABLED
