from typing import Union

from ...entity import EntityDto
from ..config import Action, PropertyConfig


class PropertyConfigurator:
    """
    Base class for property configurators.

    Configurators with a higher ``priority`` run first. ``configure`` returns
    the updated configuration and never mutates the one it receives.
    """

    priority: int = 0

    def supports(self, property_config: PropertyConfig, entity_dto: EntityDto) -> bool:
        raise NotImplementedError

    def configure(
        self,
        action: Union[Action, str],
        property_config: PropertyConfig,
        entity_dto: EntityDto,
    ) -> PropertyConfig:
        raise NotImplementedError
