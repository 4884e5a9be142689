"""
Read access to entity properties by name or dotted path.

Each path segment is looked up as a mapping key or a public attribute.
Bound methods that take no arguments are called, so model helpers such as
``get_status_display`` or ``full_name()`` can back a property. When a
segment is not found as written, its snake_case form is tried as well
(``firstName`` -> ``first_name``).
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Optional

from django.core.exceptions import ObjectDoesNotExist
from django.db import models
from django.db.models.fields.related_descriptors import ReverseManyToOneDescriptor
from graphene.utils.str_converters import to_snake_case

from .config_proxy import get_setting
from .exceptions import PropertyAccessError

logger = logging.getLogger(__name__)

_MISSING = object()


def _takes_no_arguments(method: Any) -> bool:
    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError):
        return False
    return all(
        param.default is not inspect.Parameter.empty
        or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


def _is_unsaved_collection(obj: Any, name: str) -> bool:
    """Related managers of unsaved instances raise ValueError when accessed."""
    if not isinstance(obj, models.Model) or obj.pk is not None:
        return False
    # ManyToManyDescriptor subclasses ReverseManyToOneDescriptor
    return isinstance(getattr(type(obj), name, None), ReverseManyToOneDescriptor)


class PropertyAccessor:
    """Reads property values from objects and mappings."""

    def __init__(self, snake_case_fallback: Optional[bool] = None):
        self._snake_case_fallback = snake_case_fallback

    @property
    def snake_case_fallback(self) -> bool:
        if self._snake_case_fallback is not None:
            return self._snake_case_fallback
        return bool(get_setting("properties.snake_case_fallback", True))

    def is_readable(self, obj: Any, property_path: str) -> bool:
        return self._read(obj, property_path) is not _MISSING

    def get_value(self, obj: Any, property_path: str) -> Any:
        value = self._read(obj, property_path)
        if value is _MISSING:
            raise PropertyAccessError(property_path, type(obj).__name__)
        return value

    def _read(self, obj: Any, property_path: str) -> Any:
        if obj is None or not property_path:
            return _MISSING

        current = obj
        for segment in property_path.split("."):
            if current is None:
                return _MISSING
            current = self._read_segment(current, segment)
            if current is _MISSING:
                return _MISSING
        return current

    def _read_segment(self, obj: Any, name: str) -> Any:
        value = self._lookup(obj, name)
        if value is _MISSING and self.snake_case_fallback:
            snake_name = to_snake_case(name)
            if snake_name != name:
                value = self._lookup(obj, snake_name)
        return value

    def _lookup(self, obj: Any, name: str) -> Any:
        if isinstance(obj, Mapping):
            return obj.get(name, _MISSING)
        if not name or name.startswith("_"):
            return _MISSING
        if _is_unsaved_collection(obj, name):
            return _MISSING

        try:
            value = getattr(obj, name)
        except (AttributeError, ObjectDoesNotExist):
            # Unset reverse one-to-one relations raise ObjectDoesNotExist
            return _MISSING

        if inspect.ismethod(value):
            if not _takes_no_arguments(value):
                logger.debug(
                    "Method %s.%s requires arguments and cannot back a property",
                    type(obj).__name__,
                    name,
                )
                return _MISSING
            return value()
        return value


default_accessor = PropertyAccessor()
