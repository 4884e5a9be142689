"""
Configurator applied to every property.

It fills in the attributes every renderer relies on: value, formatted value,
label, sortable, virtual, template path and required flag. Help texts are
translated when one is set.
"""

import logging
import numbers
from collections.abc import Sized
from typing import Any, Optional, Union

from django.db.models.fields.files import FieldFile

from ...accessor import PropertyAccessor, default_accessor
from ...config_proxy import get_setting
from ...context import ApplicationContext, ApplicationContextProvider
from ...entity import EntityDto
from ...exceptions import PropertyConfigurationError
from ...translation import Translator, default_translator
from ..config import Action, PropertyConfig
from ..humanize import humanize
from .base import PropertyConfigurator

logger = logging.getLogger(__name__)


def is_empty_value(value: Any) -> bool:
    """
    Whether a property value should render with the "empty" template.

    Numbers and booleans are never empty; files are empty without a name;
    strings and containers are empty when they have no items.
    """
    if value is None:
        return True
    if isinstance(value, (bool, numbers.Number)):
        return False
    if isinstance(value, FieldFile):
        return not value.name
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class CommonConfigurator(PropertyConfigurator):
    def __init__(
        self,
        context_provider: Optional[ApplicationContextProvider] = None,
        translator: Optional[Translator] = None,
        property_accessor: Optional[PropertyAccessor] = None,
    ):
        self.context_provider = context_provider or ApplicationContextProvider()
        self.translator = translator or default_translator
        self.property_accessor = property_accessor or default_accessor

    def supports(self, property_config: PropertyConfig, entity_dto: EntityDto) -> bool:
        # this configurator applies to all kinds of properties
        return True

    def configure(
        self,
        action: Union[Action, str],
        property_config: PropertyConfig,
        entity_dto: EntityDto,
    ) -> PropertyConfig:
        application_context = self.context_provider.get_context()
        translation_domain = application_context.get_translation_domain()

        value = self._build_value(property_config, entity_dto)
        property_config = property_config.with_options(
            value=value,
            formatted_value=value,
            label=self._build_label(property_config, translation_domain),
            sortable=self._build_sortable(property_config, entity_dto),
            virtual=self._build_virtual(property_config, entity_dto),
            template_path=self._build_template_path(
                application_context, property_config, entity_dto, value
            ),
            required=self._build_required(property_config, entity_dto),
        )

        if property_config.help is not None:
            property_config = property_config.with_options(
                help=self._build_help(property_config, translation_domain)
            )

        return property_config

    def _build_value(self, property_config: PropertyConfig, entity_dto: EntityDto) -> Any:
        instance = entity_dto.get_instance()
        if self.property_accessor.is_readable(instance, property_config.name):
            return self.property_accessor.get_value(instance, property_config.name)
        return None

    def _build_label(self, property_config: PropertyConfig, translation_domain: str) -> str:
        label = property_config.label
        if label is None:
            label = humanize(property_config.name)

        if not label:
            return label

        return self.translator.trans(
            label, property_config.translation_params, translation_domain
        )

    def _build_sortable(self, property_config: PropertyConfig, entity_dto: EntityDto) -> bool:
        if property_config.sortable is not None:
            return property_config.sortable

        return entity_dto.has_property(property_config.name)

    def _build_virtual(self, property_config: PropertyConfig, entity_dto: EntityDto) -> bool:
        return not entity_dto.has_property(property_config.name)

    def _build_template_path(
        self,
        application_context: ApplicationContext,
        property_config: PropertyConfig,
        entity_dto: EntityDto,
        value: Any,
    ) -> str:
        if property_config.template_path is not None:
            return property_config.template_path

        readable = self.property_accessor.is_readable(
            entity_dto.get_instance(), property_config.name
        )
        if not readable:
            return application_context.get_template_path("label/inaccessible")

        if value is None:
            return application_context.get_template_path("label/null")

        empty_value_types = get_setting("properties.empty_value_types", [])
        if property_config.type in empty_value_types and is_empty_value(value):
            return application_context.get_template_path("label/empty")

        if property_config.template_name is None:
            logger.error(
                "Property %s defines neither a template name nor a template path",
                property_config.name,
            )
            raise PropertyConfigurationError(
                "Properties must define either their template_name or their "
                f'template_path. None given for "{property_config.name}" property.',
                property_name=property_config.name,
            )

        return application_context.get_template_path(property_config.template_name)

    def _build_required(self, property_config: PropertyConfig, entity_dto: EntityDto) -> bool:
        if property_config.required is not None:
            return property_config.required

        # virtual properties are never required
        if not entity_dto.has_property(property_config.name):
            return False

        metadata = entity_dto.get_property_metadata(property_config.name)
        return not metadata.get("nullable", True)

    def _build_help(self, property_config: PropertyConfig, translation_domain: str) -> Optional[str]:
        help_text = property_config.help
        if not help_text:
            return help_text

        return self.translator.trans(
            help_text, property_config.translation_params, translation_domain
        )
