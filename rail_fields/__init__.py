"""
Property configuration for admin views built on Django models.

Import the public API from ``rail_fields.properties.builder``;
this module stays free of imports so it can be listed in ``INSTALLED_APPS``.
"""

__version__ = "0.1.0"
