"""
Property configuration value objects.

A ``PropertyConfig`` describes one field rendered by the admin views. It is
created upstream (usually from a Django model field), passed through the
property configurators and finally handed to a renderer. Configurations are
immutable: every configurator returns an updated copy.
"""

import dataclasses
import json
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from django.db import models
from graphene.utils.str_converters import to_camel_case

from .mapping import registry


class Action(str, Enum):
    """Admin actions a property can be configured for."""

    INDEX = "index"
    DETAIL = "detail"
    EDIT = "edit"
    NEW = "new"


@dataclasses.dataclass(frozen=True)
class PropertyConfig:
    name: str
    type: str = "text"
    label: Optional[str] = None
    value: Any = None
    formatted_value: Any = None
    sortable: Optional[bool] = None
    virtual: Optional[bool] = None
    template_path: Optional[str] = None
    template_name: Optional[str] = None
    required: Optional[bool] = None
    help: Optional[str] = None
    translation_params: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    css_class: str = ""
    custom_options: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def for_model_field(cls, field: models.Field, **overrides: Any) -> "PropertyConfig":
        """Build a configuration for a Django model field."""
        type_tag = overrides.pop("type", None) or registry.get_type(field)
        options: dict[str, Any] = {
            "name": field.name,
            "type": type_tag,
            "template_name": registry.get_template_name(type_tag),
        }

        # Django fills verbose_name from the field name when none is given;
        # only an explicit one is kept so the label falls back to humanize().
        verbose_name = getattr(field, "_verbose_name", None)
        if verbose_name is not None:
            options["label"] = str(verbose_name)

        help_text = getattr(field, "help_text", "")
        if help_text:
            options["help"] = str(help_text)

        options.update(overrides)
        return cls(**options)

    def with_options(self, **changes: Any) -> "PropertyConfig":
        """Return a copy of this configuration with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly representation with camelCase keys."""
        return {
            to_camel_case(field.name): _to_json_value(getattr(self, field.name))
            for field in dataclasses.fields(self)
        }


def _to_json_value(value: Any) -> Any:
    """Coerce values into JSON-serializable structures."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, models.Model):
        return str(value.pk)
    if isinstance(value, (set, frozenset)):
        return [_to_json_value(v) for v in sorted(value, key=str)]
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): _to_json_value(v) for k, v in value.items()}
    try:
        json.dumps(value)
        return value
    except TypeError:
        return str(value)
