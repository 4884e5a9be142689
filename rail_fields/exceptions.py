"""
Custom exceptions for property configuration.

These errors signal programming or configuration defects. They are raised
where the defect is detected and are not meant to be recovered from inside
the library.
"""

from typing import Optional


class RailFieldsError(Exception):
    """Base exception for rail-fields errors."""


class PropertyConfigurationError(RailFieldsError):
    """Raised when a property cannot be configured with the given options."""

    def __init__(self, message: str, property_name: Optional[str] = None):
        self.property_name = property_name
        super().__init__(message)


class TemplateNotFoundError(RailFieldsError):
    """Raised when a template key has no configured template path."""

    def __init__(self, template_key: str):
        self.template_key = template_key
        super().__init__(
            f'No template path is configured for the "{template_key}" template key.'
        )


class PropertyAccessError(RailFieldsError):
    """Raised when reading a property path that is not readable."""

    def __init__(self, property_path: str, object_type: Optional[str] = None):
        self.property_path = property_path
        self.object_type = object_type
        message = f'Cannot read property "{property_path}"'
        if object_type:
            message = f"{message} on {object_type}"
        super().__init__(f"{message}.")


class PropertyMetadataError(RailFieldsError):
    """Raised when requesting metadata for a property the entity does not have."""

    def __init__(self, property_name: str, entity_name: Optional[str] = None):
        self.property_name = property_name
        self.entity_name = entity_name
        message = f'No metadata for property "{property_name}"'
        if entity_name:
            message = f"{message} of {entity_name}"
        super().__init__(f"{message}.")
