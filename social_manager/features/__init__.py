"""Theme support queries recognized by Social Manager."""

from .registry import FEATURES, FeatureDef, get_feature, list_features

__all__ = ["FEATURES", "FeatureDef", "get_feature", "list_features"]
