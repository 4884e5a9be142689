"""
Configuration management for rail-fields.

This module provides a settings proxy that handles hierarchical configuration
resolution from runtime overrides, the Django ``RAIL_FIELDS`` setting and the
library defaults.
"""

from typing import Any, Optional

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from .defaults import LIBRARY_DEFAULTS

SETTINGS_NAME = "RAIL_FIELDS"

# Runtime storage for settings overrides (avoids modifying Django settings)
_RUNTIME_SETTINGS: dict[str, Any] = {}


class SettingsProxy:
    """
    Proxy for accessing rail-fields settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime overrides (via configure_runtime_settings)
    2. Global Django settings (RAIL_FIELDS)
    3. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve (dot notation for nested access)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        for source in (
            _RUNTIME_SETTINGS,
            getattr(settings, SETTINGS_NAME, {}),
            LIBRARY_DEFAULTS,
        ):
            value = self._get_nested_value(source, key)
            if value is not None:
                self._cache[key] = value
                return value

        # Defaults are not cached so callers may pass a different one next time
        return default

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def set(self, key: str, value: Any) -> None:
        """
        Set a setting value (runtime only, not persistent).

        Args:
            key: Setting key to set
            value: Value to set
        """
        self._set_nested_value(_RUNTIME_SETTINGS, key, value)
        self.clear_cache()

    def _set_nested_value(self, data: dict[str, Any], key: str, value: Any) -> None:
        keys = key.split(".")
        current = data

        # Navigate to the parent of the target key
        for k in keys[:-1]:
            if k not in current or not isinstance(current[k], dict):
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

    def clear_cache(self) -> None:
        """
        Clear the settings cache.
        """
        self._cache.clear()

    def validate(self) -> dict[str, Any]:
        """
        Validate the configured ``RAIL_FIELDS`` setting.

        Returns:
            Dictionary with validation results
        """
        from .defaults import validate_settings

        errors = validate_settings(getattr(settings, SETTINGS_NAME, {}))
        return {"valid": not errors, "errors": errors}


# Global settings proxy instance
settings_proxy = SettingsProxy()


def get_settings_proxy() -> SettingsProxy:
    """Return the process-wide settings proxy."""
    return settings_proxy


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return settings_proxy.get(key, default)


def configure_runtime_settings(clear_existing: bool = False, **overrides: Any) -> None:
    """
    Configure runtime settings overrides.

    Keys use double underscores for nesting, e.g.
    ``configure_runtime_settings(i18n__translation_domain="admin")``.

    Args:
        clear_existing: Whether to drop previously configured overrides
        **overrides: Setting key-value pairs to override
    """
    if clear_existing:
        _RUNTIME_SETTINGS.clear()
    for key, value in overrides.items():
        settings_proxy.set(key.replace("__", "."), value)
    settings_proxy.clear_cache()


def clear_runtime_settings() -> None:
    """Remove every runtime override."""
    _RUNTIME_SETTINGS.clear()
    settings_proxy.clear_cache()


@receiver(setting_changed)
def _reset_settings_cache(sender, setting: Optional[str] = None, **kwargs) -> None:
    if setting == SETTINGS_NAME:
        settings_proxy.clear_cache()
