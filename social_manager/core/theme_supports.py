"""Theme supports resolver.

Reads the arguments a theme registered for the plugin's feature identifier
and answers which optional features it enables:

    add_theme_support("ninecodes-social-manager", {
        "attr_prefix": "acme",
        "buttons_mode": "json",
    })

The declaration is fetched once, on the ``init`` event or on the first
query, and served from memory afterwards.
"""

import threading
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any, Literal

from ..features.registry import get_feature
from ..utils.logging import get_logger
from . import options
from .declaration import Declaration, normalize
from .events import INIT, Event, EventBus
from .host import ThemeHost

logger = get_logger(__name__)

ButtonsMode = Literal["html", "json"]


@dataclass(frozen=True)
class ResolvedSupport:
    """Interpreted theme support options."""

    stylesheet: bool = False
    attr_prefix: str | Literal[False] = False
    buttons_mode: ButtonsMode | Literal[False] = False

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


class ThemeSupports:
    """Resolve the theme's support declaration into feature flags.

    Lifecycle:
        1. __init__()       : collaborators injected, nothing fetched
        2. theme_supports() : host queried once (on ``init`` or first query)
        3. is_() / resolve(): pure reads of the cached declaration
    """

    def __init__(
        self,
        host: ThemeHost,
        *,
        feature: str | None = None,
        default_prefix: str | None = None,
        buttons_modes: Iterable[str] | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._host = host
        self._feature = feature or options.feature_name()
        self._default_prefix = str(
            default_prefix if default_prefix is not None else options.default_attr_prefix()
        )
        self._buttons_modes = frozenset(
            buttons_modes if buttons_modes is not None else options.buttons_modes()
        )
        self._state: tuple[Declaration, ResolvedSupport] | None = None
        self._lock = threading.Lock()

        if event_bus is not None:
            self.hooks(event_bus)

    def hooks(self, event_bus: EventBus) -> None:
        """Resolve the declaration when the host fires ``init``."""
        event_bus.once(INIT, self._on_init)

    def _on_init(self, event: Event) -> None:
        self.theme_supports()

    @property
    def feature_name(self) -> str:
        return self._feature

    def get_feature_name(self) -> str:
        """Get the identifier themes register to declare support."""
        return self._feature

    @property
    def supports(self) -> Declaration | None:
        """Working declaration, or None before resolution."""
        return self._state[0] if self._state is not None else None

    def theme_supports(self) -> Declaration:
        """Fetch and normalize the host declaration, once."""
        return self._load()[0]

    def resolve(self) -> ResolvedSupport:
        """Return the interpreted options, resolving on first use."""
        return self._load()[1]

    def _load(self) -> tuple[Declaration, ResolvedSupport]:
        state = self._state
        if state is not None:
            return state

        with self._lock:
            if self._state is None:
                supported = bool(self._host.supports_feature(self._feature))
                raw = self._host.get_feature_declaration(self._feature) if supported else None
                declaration = normalize(raw, supported=supported)
                resolved = ResolvedSupport(
                    stylesheet=self._stylesheet(declaration),
                    attr_prefix=self._attr_prefix(declaration),
                    buttons_mode=self._buttons_mode(declaration),
                )
                # Single assignment publishes both; readers check _state without the lock
                self._state = (declaration, resolved)
                logger.debug(
                    "Theme supports resolved",
                    feature=self._feature,
                    declaration=type(declaration).__name__,
                    **resolved.as_dict(),
                )
            return self._state

    def is_(self, feature: str = "") -> bool | str:
        """Check whether the theme supports a feature.

        Args:
            feature: 'stylesheet', 'attr-prefix' / 'attr_prefix' or
                'buttons-mode' / 'buttons_mode'

        Returns:
            The feature's value, or False for empty or unknown names
        """
        feat = get_feature(feature)
        if feat is None:
            return False
        return getattr(self.resolve(), feat.id)

    def stylesheet(self) -> bool:
        """Whether the theme loads its own stylesheet for the plugin output."""
        return self.resolve().stylesheet

    def attr_prefix(self) -> str | Literal[False]:
        """Custom attribute prefix, or False when unset or equal to the default."""
        return self.resolve().attr_prefix

    def buttons_mode(self) -> ButtonsMode | Literal[False]:
        """Buttons mode, 'html' or 'json', or False when unset or invalid."""
        return self.resolve().buttons_mode

    def _stylesheet(self, declaration: Declaration) -> bool:
        value = declaration.lookup(get_feature("stylesheet").keys)
        if value is not None:
            return bool(value)
        # A custom prefix means the theme styles the output itself
        return bool(self._attr_prefix(declaration))

    def _attr_prefix(self, declaration: Declaration) -> str | Literal[False]:
        prefix = declaration.lookup(get_feature("attr_prefix").keys)
        if prefix and str(prefix) != self._default_prefix:
            return str(prefix)
        return False

    def _buttons_mode(self, declaration: Declaration) -> ButtonsMode | Literal[False]:
        mode = declaration.lookup(get_feature("buttons_mode").keys)
        if isinstance(mode, str) and mode in self._buttons_modes:
            return mode  # type: ignore[return-value]
        return False
