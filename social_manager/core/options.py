"""Shared option values read from settings."""

from ..utils.config import get_settings


def default_attr_prefix() -> str:
    """Attribute prefix used when the theme does not customize it."""
    return get_settings().social_manager.attr_prefix


def buttons_modes() -> dict[str, str]:
    """Recognized buttons modes, mode id -> label."""
    return dict(get_settings().social_manager.buttons_modes)


def feature_name() -> str:
    """Identifier themes register to declare support."""
    return get_settings().social_manager.feature_name
