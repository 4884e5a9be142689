"""
Translation lookup backed by Django's gettext catalogs.

Django has no notion of translation domains, so the domain is used as the
gettext message context (``msgctxt``). Catalog entries without a context are
not matched; a message with no entry in the domain comes back unchanged.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from django.utils.translation import gettext, pgettext


class Translator:
    """Interface of the translation service used by configurators."""

    def trans(
        self,
        message: str,
        params: Optional[Mapping[str, Any]] = None,
        domain: Optional[str] = None,
    ) -> str:
        raise NotImplementedError


def replace_params(message: str, params: Optional[Mapping[str, Any]]) -> str:
    """Substitute every parameter key found in ``message`` with its value in one pass."""
    if not params:
        return message
    replacements = {str(key): str(value) for key, value in params.items() if str(key)}
    if not replacements:
        return message
    # longest keys first so "%name%" wins over a "%n" prefix, like strtr
    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda match: replacements[match.group(0)], message)


class DjangoTranslator(Translator):
    """Translate through ``pgettext`` using the domain as message context."""

    def trans(
        self,
        message: str,
        params: Optional[Mapping[str, Any]] = None,
        domain: Optional[str] = None,
    ) -> str:
        translated = pgettext(domain, message) if domain else gettext(message)
        return replace_params(str(translated), params)


default_translator = DjangoTranslator()
