"""Views serving the sitemap XSL stylesheets."""

import logging

from django.http import HttpResponseNotFound
from django.views.decorators.http import require_http_methods
from src.exceptions import UnknownStylesheetError

from .conf import get_renderer
from .renderer import StylesheetKind

logger = logging.getLogger(__name__)

STYLESHEET_QUERY_PARAM = "sitemap-stylesheet"


@require_http_methods(["GET", "HEAD"])
def sitemap_stylesheet(request):  # noqa: ARG001
    """Serve the stylesheet for individual sitemaps."""
    return get_renderer().render_stylesheet(StylesheetKind.SITEMAP)


@require_http_methods(["GET", "HEAD"])
def sitemap_index_stylesheet(request):  # noqa: ARG001
    """Serve the stylesheet for the sitemap index."""
    return get_renderer().render_stylesheet(StylesheetKind.INDEX)


@require_http_methods(["GET", "HEAD"])
def stylesheet_dispatch(request):
    """
    Serve a stylesheet selected by query parameter.

    Example: /sitemap-stylesheet/?sitemap-stylesheet=index
    """
    kind = request.GET.get(STYLESHEET_QUERY_PARAM, "")
    try:
        return get_renderer().render_stylesheet(kind)
    except UnknownStylesheetError as exc:
        logger.info(
            "Rejected stylesheet request",
            extra={**exc.context, "path": request.path},
        )
        return HttpResponseNotFound(exc.message)
