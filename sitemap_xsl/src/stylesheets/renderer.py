"""
XSL stylesheets for XML sitemaps.

Browsers apply these stylesheets to ``sitemap.xml`` and sitemap index files
and show a readable table instead of raw XML.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from django.http import HttpResponse
from django.template.loader import render_to_string
from django.utils.translation import gettext_noop
from src.exceptions import StylesheetHookError, UnknownStylesheetError

from .capabilities import Capabilities, django_capabilities

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/xml; charset=UTF-8"

TEXT_DOMAIN = "sitemaps"
DEFAULT_DOCS_URL = "https://www.sitemaps.org/"
DEFAULT_GENERATOR = "Django"

# Messages are marked for makemessages and translated at render time
TITLE = gettext_noop("XML Sitemap")
DESCRIPTION = gettext_noop(
    "This XML Sitemap is generated by %(generator)s to make your content more "
    "visible for search engines. Learn more about XML sitemaps on %(link)s."
)
URL_COUNT = gettext_noop("Number of URLs in this XML Sitemap: %(count)s.")
URL_LABEL = gettext_noop("URL")
LASTMOD_LABEL = gettext_noop("Last Modified")
CHANGEFREQ_LABEL = gettext_noop("Change Frequency")
PRIORITY_LABEL = gettext_noop("Priority")

STYLESHEET_CSS = """
    body {
        font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Oxygen-Sans, Ubuntu, Cantarell, "Helvetica Neue", sans-serif;
        color: #444;
    }

    #sitemap__table {
        border: solid 1px #ccc;
        border-collapse: collapse;
    }

    #sitemap__table tr th {
        text-align: left;
    }

    #sitemap__table tr td,
    #sitemap__table tr th {
        padding: 10px;
    }

    #sitemap__table tr:nth-child(odd) td {
        background-color: #eee;
    }

    a:hover {
        text-decoration: none;
    }"""

Hook = Callable[[str], str]


class StylesheetKind(str, enum.Enum):
    SITEMAP = "sitemap"
    INDEX = "index"

    @classmethod
    def from_value(cls, value) -> Optional["StylesheetKind"]:
        """Return the matching kind, or None for unrecognised values."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class StylesheetHooks:
    """
    Optional callbacks that may replace generated output.

    Each hook receives the assembled string and must return a string.
    A missing hook leaves the output unchanged.
    """

    sitemap: Optional[Hook] = None
    index: Optional[Hook] = None
    css: Optional[Hook] = None


def apply_hook(name: str, hook: Optional[Hook], value: str) -> str:
    """Run a single hook over the generated value."""
    if hook is None:
        return value

    result = hook(value)
    if not isinstance(result, str):
        raise StylesheetHookError(
            f"Stylesheet hook '{name}' must return a string",
            context={"hook": name, "returned_type": type(result).__name__},
        )
    return result


class StylesheetRenderer:
    """
    Builds the sitemap and sitemap index stylesheets.

    Args:
        capabilities: Translation and escaping functions (Django-backed by default)
        hooks: Callbacks that may replace the generated documents or CSS
        strict: Raise UnknownStylesheetError for unknown kinds instead of
            returning an empty response
        docs_url: Sitemap protocol documentation linked from the description
        generator: Name shown in the description sentence
    """

    def __init__(
        self,
        capabilities: Optional[Capabilities] = None,
        hooks: Optional[StylesheetHooks] = None,
        *,
        strict: bool = False,
        docs_url: str = DEFAULT_DOCS_URL,
        generator: str = DEFAULT_GENERATOR,
    ):
        self.capabilities = capabilities or django_capabilities()
        self.hooks = hooks or StylesheetHooks()
        self.strict = strict
        self.docs_url = docs_url
        self.generator = generator

    def render_stylesheet(self, kind: Union[StylesheetKind, str]) -> HttpResponse:
        """
        Build the HTTP response for a stylesheet kind.

        Unknown kinds produce an XML response with an empty body, unless the
        renderer is strict.
        """
        stylesheet = StylesheetKind.from_value(kind)
        if stylesheet is None and self.strict:
            raise UnknownStylesheetError(
                f"Unknown stylesheet kind: {kind!r}",
                context={"kind": str(kind)},
            )

        response = HttpResponse(content_type=CONTENT_TYPE)

        if stylesheet is StylesheetKind.SITEMAP:
            response.content = self.get_sitemap_stylesheet()
        elif stylesheet is StylesheetKind.INDEX:
            response.content = self.get_sitemap_index_stylesheet()
        else:
            logger.warning(
                "Unknown stylesheet kind requested",
                extra={"event": "stylesheet_unknown_kind", "kind": str(kind)},
            )
            return response

        logger.debug(
            "Rendered sitemap stylesheet",
            extra={
                "event": "stylesheet_rendered",
                "kind": stylesheet.value,
                "size_bytes": len(response.content),
            },
        )
        return response

    def get_sitemap_stylesheet(self) -> str:
        """Return the stylesheet for sitemap files (``<urlset>``)."""
        context = self.get_template_context(
            '<xsl:value-of select="count( sitemap:urlset/sitemap:url )" />'
        )
        context["changefreq"] = self._label(CHANGEFREQ_LABEL)
        context["priority"] = self._label(PRIORITY_LABEL)

        xsl_content = render_to_string("stylesheets/sitemap.xsl", context)
        return apply_hook("sitemap", self.hooks.sitemap, xsl_content)

    def get_sitemap_index_stylesheet(self) -> str:
        """Return the stylesheet for sitemap index files (``<sitemapindex>``)."""
        context = self.get_template_context(
            '<xsl:value-of select="count( sitemap:sitemapindex/sitemap:sitemap )" />'
        )

        xsl_content = render_to_string("stylesheets/sitemap_index.xsl", context)
        return apply_hook("index", self.hooks.index, xsl_content)

    def get_stylesheet_css(self) -> str:
        """Return the CSS embedded in both stylesheets."""
        return apply_hook("css", self.hooks.css, STYLESHEET_CSS)

    def get_template_context(self, count_expression: str) -> Dict[str, str]:
        """
        Build the placeholder values shared by both stylesheets.

        All values are escaped already; the templates insert them verbatim.
        """
        caps = self.capabilities
        sitemaps_link = '<a href="%s">sitemaps.org</a>' % caps.escape_url(
            caps.translate(self.docs_url, TEXT_DOMAIN)
        )
        description = self._label(DESCRIPTION) % {
            "generator": caps.escape_xml(self.generator),
            "link": sitemaps_link,
        }
        text = self._label(URL_COUNT) % {"count": count_expression}

        return {
            "css": self.get_stylesheet_css(),
            "lang": caps.language_attributes(),
            "title": self._label(TITLE),
            "description": description,
            "text": text,
            "url": self._label(URL_LABEL),
            "lastmod": self._label(LASTMOD_LABEL),
        }

    def _label(self, message: str) -> str:
        caps = self.capabilities
        return caps.escape_xml(caps.translate(message, TEXT_DOMAIN))
