"""
Localization and escaping functions used by the stylesheet renderer.

The renderer never calls Django's i18n or escaping helpers directly; it
receives a ``Capabilities`` bundle instead. ``django_capabilities()`` returns
the bundle backed by the active Django translation.
"""

from dataclasses import dataclass
from typing import Callable
from urllib.parse import urlsplit

from django.conf import settings
from django.utils.encoding import iri_to_uri
from django.utils.html import escape
from django.utils.translation import get_language, get_language_bidi, gettext

ALLOWED_URL_SCHEMES = ("http", "https", "ftp", "ftps", "mailto")


@dataclass(frozen=True)
class Capabilities:
    """Pure functions the renderer needs from its host."""

    translate: Callable[[str, str], str]
    escape_xml: Callable[[str], str]
    escape_url: Callable[[str], str]
    language_attributes: Callable[[], str]


def translate(text: str, domain: str) -> str:  # noqa: ARG001
    """
    Translate text with the active language.

    Django keeps a single catalogue per project, so the domain only
    documents where the message belongs.
    """
    return str(gettext(text))


def escape_xml(text: str) -> str:
    """Escape text for XML content and attribute values."""
    return str(escape(text))


def escape_url(url: str) -> str:
    """
    Escape a URL for use inside an XML attribute.

    Returns an empty string for schemes that are not safe to link to
    (e.g. ``javascript:``).
    """
    url = (url or "").strip()
    if not url:
        return ""

    scheme = urlsplit(url).scheme.lower()
    if scheme and scheme not in ALLOWED_URL_SCHEMES:
        return ""

    return str(escape(iri_to_uri(url)))


def language_attributes() -> str:
    """
    Return the ``dir``/``lang`` attributes for the root ``<html>`` element.

    Example: ``dir="rtl" lang="ar"`` or ``lang="en-us"``
    """
    language = get_language() or settings.LANGUAGE_CODE
    attributes = []
    if get_language_bidi():
        attributes.append('dir="rtl"')
    attributes.append(f'lang="{escape(language)}"')
    return " ".join(attributes)


def django_capabilities() -> Capabilities:
    """Capabilities backed by Django's translation and escaping helpers."""
    return Capabilities(
        translate=translate,
        escape_xml=escape_xml,
        escape_url=escape_url,
        language_attributes=language_attributes,
    )
