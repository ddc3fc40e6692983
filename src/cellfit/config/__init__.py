"""Configuration package."""

from .constants import *  # noqa: F401, F403
from .settings import SettingsManager, ShapeSettings

__all__ = ["ShapeSettings", "SettingsManager"]
