from .base import PropertyConfigurator
from .common import CommonConfigurator, is_empty_value

__all__ = ["PropertyConfigurator", "CommonConfigurator", "is_empty_value"]
