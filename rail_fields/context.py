"""
Application context consumed while configuring properties.

The context carries the active translation domain and resolves logical
template keys (``label/null``, ``property/text``, ...) to concrete template
paths using the ``templates`` section of the ``RAIL_FIELDS`` setting.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from django.http import HttpRequest
from django.utils import translation
from django.utils.deprecation import MiddlewareMixin

from .config_proxy import SettingsProxy, get_settings_proxy
from .exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)

APPLICATION_CONTEXT_ATTR = "_rail_fields_context"


@dataclass(frozen=True)
class I18nContext:
    """Translation settings of the current request."""

    translation_domain: str
    locale: Optional[str] = None

    def get_translation_domain(self) -> str:
        return self.translation_domain

    def get_locale(self) -> Optional[str]:
        return self.locale


@dataclass(frozen=True)
class ApplicationContext:
    """Request-scoped rendering context."""

    i18n: I18nContext
    settings: SettingsProxy = field(default_factory=get_settings_proxy, compare=False)

    @classmethod
    def from_settings(cls, locale: Optional[str] = None) -> "ApplicationContext":
        proxy = get_settings_proxy()
        return cls(
            i18n=I18nContext(
                translation_domain=proxy.get("i18n.translation_domain", "messages"),
                locale=locale or translation.get_language(),
            ),
            settings=proxy,
        )

    @classmethod
    def from_request(cls, request: HttpRequest) -> "ApplicationContext":
        return cls.from_settings(locale=getattr(request, "LANGUAGE_CODE", None))

    def get_i18n(self) -> I18nContext:
        return self.i18n

    def get_translation_domain(self) -> str:
        return self.i18n.translation_domain

    def get_template_path(self, template_key: str) -> str:
        """Resolve a logical template key to its configured template path."""
        template_path = self.settings.get(f"templates.{template_key}")
        if not template_path:
            raise TemplateNotFoundError(template_key)
        logger.debug("Resolved template key %s to %s", template_key, template_path)
        return template_path


class ApplicationContextMiddleware(MiddlewareMixin):
    """Injects the ApplicationContext into every request."""

    def process_request(self, request: HttpRequest) -> None:
        setattr(request, APPLICATION_CONTEXT_ATTR, ApplicationContext.from_request(request))


def get_application_context(request: Optional[HttpRequest] = None) -> ApplicationContext:
    """Retrieve the context of ``request``, or one built from settings."""
    if request is None:
        return ApplicationContext.from_settings()
    ctx = getattr(request, APPLICATION_CONTEXT_ATTR, None)
    if ctx is None:
        # Fallback: create context if middleware wasn't applied
        ctx = ApplicationContext.from_request(request)
        setattr(request, APPLICATION_CONTEXT_ATTR, ctx)
    return ctx


class ApplicationContextProvider:
    """
    Hands the current ApplicationContext to configurators.

    Bind a request with ``for_request`` to reuse the context attached by
    ApplicationContextMiddleware; without one a context is built from
    settings on every call.
    """

    def __init__(self, request: Optional[HttpRequest] = None):
        self.request = request

    def for_request(self, request: HttpRequest) -> "ApplicationContextProvider":
        return type(self)(request)

    def get_context(self) -> ApplicationContext:
        return get_application_context(self.request)
