"""Registry of the theme support queries the plugin understands."""

from dataclasses import dataclass, field

from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class FeatureDef:
    """Definition of a theme support query."""

    id: str
    name: str
    description: str
    # Declaration keys checked in priority order; the first present wins.
    keys: tuple[str, ...]
    aliases: tuple[str, ...] = field(default_factory=tuple)


FEATURES: dict[str, FeatureDef] = {
    "stylesheet": FeatureDef(
        id="stylesheet",
        name="Stylesheet",
        description="Theme loads its own stylesheet for the plugin output",
        keys=("stylesheet",),
    ),
    "attr_prefix": FeatureDef(
        id="attr_prefix",
        name="Attribute Prefix",
        description="Custom prefix for the plugin's markup attributes",
        keys=("attr_prefix", "attr-prefix"),
        aliases=("attr-prefix",),
    ),
    "buttons_mode": FeatureDef(
        id="buttons_mode",
        name="Buttons Mode",
        description="Render share buttons as 'html' or 'json'",
        keys=("buttons_mode", "buttons-mode"),
        aliases=("buttons-mode",),
    ),
}

_ALIASES: dict[str, str] = {
    alias: feat.id for feat in FEATURES.values() for alias in feat.aliases
}


def get_feature(name: str) -> FeatureDef | None:
    """Get a query definition by id or alias."""
    if not name:
        return None
    feat = FEATURES.get(name) or FEATURES.get(_ALIASES.get(name, ""))
    if feat is None:
        logger.debug("Unknown theme support query", feature=name)
    return feat


def list_features() -> list[FeatureDef]:
    """All query definitions, sorted by id."""
    return sorted(FEATURES.values(), key=lambda f: f.id)
