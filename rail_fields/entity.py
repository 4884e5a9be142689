"""
Read-only metadata view over one entity instance.

``EntityDto.from_instance`` reads the metadata of Django model instances from
``_meta``; other objects can be described with an explicit mapping of
property name to metadata.
"""

from collections.abc import Mapping
from typing import Any, Optional

from django.db import models
from graphene.utils.str_converters import to_snake_case

from .config_proxy import get_setting
from .exceptions import PropertyMetadataError
from .properties.mapping import registry


def _field_metadata(field: Any) -> dict[str, Any]:
    many_to_many = bool(getattr(field, "many_to_many", False))
    return {
        # Django ignores null on many-to-many fields, an empty set is always allowed
        "nullable": bool(getattr(field, "null", False)) or many_to_many,
        "blank": bool(getattr(field, "blank", False)),
        "editable": bool(getattr(field, "editable", True)),
        "unique": bool(getattr(field, "unique", False)),
        "field_type": type(field).__name__,
        "type": registry.get_type(field),
        "is_relation": bool(getattr(field, "is_relation", False)),
        "many_to_many": many_to_many,
    }


def get_model_properties(model: type[models.Model]) -> dict[str, dict[str, Any]]:
    """Metadata of every property physically stored on ``model``."""
    properties: dict[str, dict[str, Any]] = {}
    for field in model._meta.get_fields():
        # Reverse relations live on the other model
        if field.auto_created and not field.concrete:
            continue
        metadata = _field_metadata(field)
        properties[field.name] = metadata
        attname = getattr(field, "attname", None)
        if attname and attname != field.name:
            properties[attname] = metadata
    return properties


class EntityDto:
    """Metadata of one entity instance as seen by property configurators."""

    def __init__(
        self,
        instance: Any,
        metadata: Optional[Mapping[str, Mapping[str, Any]]] = None,
        name: Optional[str] = None,
        snake_case_fallback: Optional[bool] = None,
    ):
        self._instance = instance
        self._metadata = dict(metadata or {})
        self.name = name or type(instance).__name__
        self._snake_case_fallback = snake_case_fallback

    @property
    def snake_case_fallback(self) -> bool:
        if self._snake_case_fallback is not None:
            return self._snake_case_fallback
        return bool(get_setting("properties.snake_case_fallback", True))

    @classmethod
    def from_instance(cls, instance: models.Model) -> "EntityDto":
        return cls(
            instance,
            metadata=get_model_properties(type(instance)),
            name=instance._meta.label,
        )

    @classmethod
    def from_model(cls, model: type[models.Model]) -> "EntityDto":
        """Describe ``model`` without an instance, e.g. for a "new" form."""
        return cls(None, metadata=get_model_properties(model), name=model._meta.label)

    def _resolve_name(self, property_name: str) -> Optional[str]:
        if property_name in self._metadata:
            return property_name
        if not self.snake_case_fallback:
            return None
        snake_name = to_snake_case(property_name)
        if snake_name in self._metadata:
            return snake_name
        return None

    def get_instance(self) -> Any:
        return self._instance

    def has_property(self, property_name: str) -> bool:
        return self._resolve_name(property_name) is not None

    def get_property_metadata(self, property_name: str) -> Mapping[str, Any]:
        resolved = self._resolve_name(property_name)
        if resolved is None:
            raise PropertyMetadataError(property_name, self.name)
        return self._metadata[resolved]

    def get_property_names(self) -> list[str]:
        return list(self._metadata)

    def __repr__(self) -> str:
        return f"<EntityDto {self.name}>"
