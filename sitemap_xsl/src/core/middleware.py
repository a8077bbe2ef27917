"""
Core middleware for the sitemap stylesheet site.
"""

STYLESHEET_URL_NAMES = frozenset(
    {
        "sitemap_stylesheet",
        "sitemap_index_stylesheet",
        "sitemap_stylesheet_dispatch",
    }
)


class StylesheetResponseMiddleware:
    """
    Strip cookies from stylesheet responses.

    Stylesheets only vary by language; ``Vary: Accept-Language`` is kept.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        match = getattr(request, "resolver_match", None)
        if match is not None and match.url_name in STYLESHEET_URL_NAMES:
            response.cookies.clear()
        return response
