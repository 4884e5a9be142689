"""
GraphQL types for configured properties.

Exposes the result of the property configurators to metadata consumers
(admin front-ends building list and form views).
"""

import graphene

from .config import PropertyConfig


class PropertySchemaType(graphene.ObjectType):
    """Configured property ready for rendering."""

    # Identity
    name = graphene.String(required=True)
    type = graphene.String(required=True)
    label = graphene.String(required=True)
    help = graphene.String()

    # Value
    value = graphene.JSONString()
    formatted_value = graphene.JSONString()

    # Display flags
    sortable = graphene.Boolean(required=True)
    virtual = graphene.Boolean(required=True)
    required = graphene.Boolean(required=True)

    # Rendering
    template_path = graphene.String(required=True)
    css_class = graphene.String()
    custom_options = graphene.JSONString()

    @classmethod
    def from_config(cls, property_config: PropertyConfig) -> "PropertySchemaType":
        data = property_config.as_dict()
        return cls(
            name=property_config.name,
            type=property_config.type,
            label=property_config.label,
            help=property_config.help,
            value=data["value"],
            formatted_value=data["formattedValue"],
            sortable=property_config.sortable,
            virtual=property_config.virtual,
            required=property_config.required,
            template_path=property_config.template_path,
            css_class=property_config.css_class,
            custom_options=data["customOptions"],
        )
