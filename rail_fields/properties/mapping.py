from typing import Dict, Optional

from django.db import models

DEFAULT_PROPERTY_TYPE = "text"


class PropertyTypeRegistry:
    """
    Registry for mapping Django field types to property type tags.
    Allows for extensibility by registering custom field types.
    """
    _instance = None

    def __init__(self):
        self._type_mapping: Dict[str, str] = {}
        self._template_mapping: Dict[str, str] = {}
        self._initialize_defaults()

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _initialize_defaults(self):
        """Initialize default Django field mappings."""
        self.register_type("AutoField", "id")
        self.register_type("BigAutoField", "id")
        self.register_type("SmallAutoField", "id")
        self.register_type("CharField", "text")
        self.register_type("TextField", "textarea")
        self.register_type("SlugField", "text")
        self.register_type("URLField", "url")
        self.register_type("GenericIPAddressField", "text")
        self.register_type("EmailField", "email")
        self.register_type("UUIDField", "text")
        self.register_type("IntegerField", "integer")
        self.register_type("SmallIntegerField", "integer")
        self.register_type("BigIntegerField", "integer")
        self.register_type("PositiveIntegerField", "integer")
        self.register_type("PositiveSmallIntegerField", "integer")
        self.register_type("PositiveBigIntegerField", "integer")
        self.register_type("FloatField", "float")
        self.register_type("DecimalField", "decimal")
        self.register_type("BooleanField", "boolean")
        self.register_type("NullBooleanField", "boolean")
        self.register_type("DateField", "date")
        self.register_type("DateTimeField", "datetime")
        self.register_type("TimeField", "time")
        self.register_type("DurationField", "text")
        self.register_type("JSONField", "array")
        self.register_type("ArrayField", "simple_array")
        self.register_type("FileField", "file")
        self.register_type("FilePathField", "file")
        self.register_type("ImageField", "image")
        self.register_type("BinaryField", "text")
        self.register_type("ForeignKey", "association")
        self.register_type("OneToOneField", "association")
        self.register_type("ManyToManyField", "association")

    def register_type(
        self, field_type: str, type_tag: str, template_name: Optional[str] = None
    ):
        """Register a property type tag (and optionally its template) for a field class."""
        self._type_mapping[field_type] = type_tag
        if template_name is not None:
            self._template_mapping[type_tag] = template_name

    def get_type(self, field: models.Field) -> str:
        """Get the property type tag for a field, following its class hierarchy."""
        for klass in type(field).__mro__:
            type_tag = self._type_mapping.get(klass.__name__)
            if type_tag is not None:
                return type_tag
        return DEFAULT_PROPERTY_TYPE

    def get_template_name(self, type_tag: str) -> str:
        """Get the template key rendering values of the given type."""
        return self._template_mapping.get(type_tag, f"property/{type_tag}")


# Global instance
registry = PropertyTypeRegistry.get_instance()
