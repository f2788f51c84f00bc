"""Core components of Social Manager."""

from .declaration import Declaration, Disabled, Enabled, Options, Unset, normalize
from .events import EventBus, get_event_bus
from .host import ThemeHost, ThemeSupportRegistry
from .theme_supports import ResolvedSupport, ThemeSupports

__all__ = [
    "Declaration",
    "Disabled",
    "Enabled",
    "EventBus",
    "Options",
    "ResolvedSupport",
    "ThemeHost",
    "ThemeSupportRegistry",
    "ThemeSupports",
    "Unset",
    "get_event_bus",
    "normalize",
]
