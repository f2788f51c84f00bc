"""
Social Manager - plugin bootstrap

Wires logging and the theme supports resolver into a host. The host calls
``bootstrap()`` when it loads the plugin and fires ``init`` on the returned
bus once the theme has registered its supports.
"""

from .core.events import EventBus, get_event_bus
from .core.host import ThemeHost
from .core.theme_supports import ThemeSupports
from .utils.config import get_settings
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def bootstrap(
    host: ThemeHost,
    event_bus: EventBus | None = None,
    configure_logging: bool = True,
) -> ThemeSupports:
    """
    Set up the plugin for a host.

    Args:
        host: Theme/application answering theme support queries
        event_bus: Bus the host fires ``init`` on (global bus if omitted)
        configure_logging: Run setup_logging() from settings first

    Returns:
        Theme supports resolver subscribed to ``init``
    """
    if configure_logging:
        setup_logging()

    settings = get_settings()
    supports = ThemeSupports(host, event_bus=event_bus or get_event_bus())
    logger.info(
        "Social Manager loaded",
        version=settings.social_manager.version,
        feature=supports.feature_name,
    )
    return supports
