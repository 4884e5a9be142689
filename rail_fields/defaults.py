"""
Default configuration for the rail-fields library.

The goal of this module is to expose a single source of truth for every
setting that the library actually consumes. Projects override any of these
through the ``RAIL_FIELDS`` Django setting; nested dictionaries are merged
key by key.
"""

from __future__ import annotations

from typing import Any

TEMPLATE_PREFIX = "rail_fields/crud"


# --------------------------------------------------------------------------- #
# Template keys
# --------------------------------------------------------------------------- #
LABEL_TEMPLATES: dict[str, str] = {
    "label/empty": f"{TEMPLATE_PREFIX}/label/empty.html",
    "label/inaccessible": f"{TEMPLATE_PREFIX}/label/inaccessible.html",
    "label/null": f"{TEMPLATE_PREFIX}/label/null.html",
    "label/undefined": f"{TEMPLATE_PREFIX}/label/undefined.html",
}

PROPERTY_TYPES: list[str] = [
    "array",
    "association",
    "boolean",
    "date",
    "datetime",
    "decimal",
    "email",
    "file",
    "float",
    "id",
    "image",
    "integer",
    "simple_array",
    "text",
    "textarea",
    "time",
    "url",
]

PROPERTY_TEMPLATES: dict[str, str] = {
    f"property/{type_tag}": f"{TEMPLATE_PREFIX}/property/{type_tag}.html"
    for type_tag in PROPERTY_TYPES
}


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "i18n": {
        "translation_domain": "messages",
    },
    "templates": {**LABEL_TEMPLATES, **PROPERTY_TEMPLATES},
    "properties": {
        "empty_value_types": ["image", "file", "array", "simple_array"],
        "snake_case_fallback": True,
    },
}


# --------------------------------------------------------------------------- #
# Helper functions
# --------------------------------------------------------------------------- #
def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with deep merging for nested dicts.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """
    Validate a settings dictionary and return a list of validation errors.
    """
    errors: list[str] = []

    if not isinstance(settings, dict):
        return ["RAIL_FIELDS must be a dictionary"]

    for section in settings:
        if section not in LIBRARY_DEFAULTS:
            errors.append(f"Unknown setting section '{section}'")

    i18n = settings.get("i18n", {})
    domain = i18n.get("translation_domain") if isinstance(i18n, dict) else None
    if domain is not None and (not isinstance(domain, str) or not domain):
        errors.append("i18n.translation_domain must be a non-empty string")

    templates = settings.get("templates", {})
    if not isinstance(templates, dict):
        errors.append("templates must map template keys to template paths")
    else:
        for key, path in templates.items():
            if not isinstance(path, str) or not path:
                errors.append(f"templates.{key} must be a non-empty string")

    properties = settings.get("properties", {})
    empty_types = (
        properties.get("empty_value_types") if isinstance(properties, dict) else None
    )
    if empty_types is not None and not isinstance(empty_types, (list, tuple, set)):
        errors.append("properties.empty_value_types must be a list of type names")

    return errors
