"""
Runs property configurators over property configurations.

Usage:
    from rail_fields.properties.builder import get_property_builder

    builder = get_property_builder()
    configs = builder.build_model_properties(Action.INDEX, article)

Each configuration goes through every configurator supporting it, highest
priority first, and the result of one configurator feeds the next.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional, Union

from django.db import models
from django.http import HttpRequest

from ..context import ApplicationContextProvider
from ..entity import EntityDto
from .config import Action, PropertyConfig
from .configurators import CommonConfigurator, PropertyConfigurator

logger = logging.getLogger(__name__)


class PropertyBuilder:
    def __init__(self, configurators: Optional[Iterable[PropertyConfigurator]] = None):
        self._configurators: list[PropertyConfigurator] = []
        for configurator in configurators or ():
            self.add_configurator(configurator)

    @property
    def configurators(self) -> tuple[PropertyConfigurator, ...]:
        return tuple(self._configurators)

    def add_configurator(self, configurator: PropertyConfigurator) -> None:
        """Register a configurator, keeping the list ordered by priority."""
        self._configurators.append(configurator)
        # sort is stable: equal priorities keep registration order
        self._configurators.sort(key=lambda c: c.priority, reverse=True)

    def build(
        self,
        action: Union[Action, str],
        property_config: PropertyConfig,
        entity_dto: EntityDto,
    ) -> PropertyConfig:
        for configurator in self._configurators:
            if not configurator.supports(property_config, entity_dto):
                continue
            logger.debug(
                "Running %s on property %s of %s",
                type(configurator).__name__,
                property_config.name,
                entity_dto.name,
            )
            property_config = configurator.configure(action, property_config, entity_dto)
        return property_config

    def build_all(
        self,
        action: Union[Action, str],
        property_configs: Iterable[PropertyConfig],
        entity_dto: EntityDto,
    ) -> list[PropertyConfig]:
        return [self.build(action, config, entity_dto) for config in property_configs]

    def build_model_properties(
        self,
        action: Union[Action, str],
        instance: models.Model,
        field_names: Optional[Sequence[str]] = None,
    ) -> list[PropertyConfig]:
        """
        Configure the fields of a Django model instance.

        ``field_names`` may list model fields and virtual properties (model
        attributes or methods); all concrete fields are used when omitted.
        """
        entity_dto = EntityDto.from_instance(instance)
        model_fields = {
            field.name: field
            for field in instance._meta.get_fields()
            if not (field.auto_created and not field.concrete)
        }
        if field_names is None:
            field_names = list(model_fields)

        property_configs = []
        for name in field_names:
            field = model_fields.get(name)
            if field is not None:
                property_configs.append(PropertyConfig.for_model_field(field))
            else:
                property_configs.append(
                    PropertyConfig(name=name, template_name="property/text")
                )
        return self.build_all(action, property_configs, entity_dto)


def get_property_builder(
    request: Optional[HttpRequest] = None,
) -> PropertyBuilder:
    """Builder with the default configurators, bound to ``request`` when given."""
    return PropertyBuilder(
        [CommonConfigurator(context_provider=ApplicationContextProvider(request))]
    )
