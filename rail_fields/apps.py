"""
Django app configuration for the rail-fields library.

This module configures:
- Library settings validation
- Property type registry initialization
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for rail-fields library."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "rail_fields"
    verbose_name = "Rail Fields"
    label = "rail_fields"

    def ready(self):
        """Initialize the application after Django has loaded."""
        self._validate_configuration()
        self._initialize_registry()
        logger.info("Rail Fields library initialized successfully")

    def _validate_configuration(self):
        """Validate library configuration."""
        from .config_proxy import get_settings_proxy

        results = get_settings_proxy().validate()
        for error in results["errors"]:
            logger.warning("Invalid RAIL_FIELDS setting: %s", error)
        if results["valid"]:
            logger.debug("Configuration validation completed")

    def _initialize_registry(self):
        """Load the property type registry."""
        from .properties.mapping import PropertyTypeRegistry

        PropertyTypeRegistry.get_instance()
        logger.debug("Property type registry initialized")
