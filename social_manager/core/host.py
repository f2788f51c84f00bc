"""Host side of theme support registration."""

from typing import Any, Protocol, runtime_checkable

from ..utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ThemeHost(Protocol):
    """What the resolver needs from the hosting theme/application."""

    def supports_feature(self, identifier: str) -> bool:
        ...

    def get_feature_declaration(self, identifier: str) -> Any:
        ...


class ThemeSupportRegistry:
    """In-memory host keeping registered features and their arguments.

    ``add_theme_support("x")`` stores ``True``; ``add_theme_support("x", {...})``
    stores the argument list, which is the shape the resolver unwraps.
    """

    def __init__(self) -> None:
        self._supports: dict[str, Any] = {}

    def add_theme_support(self, feature: str, *args: Any) -> None:
        self._supports[feature] = list(args) if args else True
        logger.debug("Theme support added", feature=feature, args=len(args))

    def remove_theme_support(self, feature: str) -> bool:
        """Remove a feature. Returns False if it was not registered."""
        if feature not in self._supports:
            return False
        del self._supports[feature]
        return True

    def supports_feature(self, identifier: str) -> bool:
        return identifier in self._supports

    def get_feature_declaration(self, identifier: str) -> Any:
        return self._supports.get(identifier, False)
