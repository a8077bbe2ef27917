"""
Tests for stylesheet views, settings-driven hooks and middleware.
"""

from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import resolve, reverse
from src.core.middleware import StylesheetResponseMiddleware
from src.stylesheets.conf import get_renderer, load_hooks

CONTENT_TYPE = "application/xml; charset=UTF-8"


def replace_sitemap(xsl):
    return "sitemap from settings"


def replace_index(xsl):
    return "index from settings"


def replace_css(css):
    return "body { color: red; }"


class StylesheetViewsTestCase(SimpleTestCase):
    """Test cases for stylesheet views."""

    def test_sitemap_stylesheet_renders(self):
        response = self.client.get("/sitemap.xsl")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], CONTENT_TYPE)
        content = response.content.decode("utf-8")
        self.assertTrue(content.startswith('<?xml version="1.0" encoding="UTF-8"?>'))
        self.assertIn("sitemap:urlset/sitemap:url", content)

    def test_sitemap_index_stylesheet_renders(self):
        response = self.client.get(reverse("sitemap_index_stylesheet"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], CONTENT_TYPE)
        self.assertIn(
            "sitemap:sitemapindex/sitemap:sitemap", response.content.decode("utf-8")
        )

    def test_stylesheets_are_not_language_prefixed(self):
        self.assertEqual(reverse("sitemap_stylesheet"), "/sitemap.xsl")
        self.assertEqual(reverse("sitemap_index_stylesheet"), "/sitemap-index.xsl")

    def test_post_not_allowed(self):
        response = self.client.post("/sitemap.xsl")
        self.assertEqual(response.status_code, 405)

    def test_accept_language_selects_language(self):
        response = self.client.get("/sitemap.xsl", HTTP_ACCEPT_LANGUAGE="ar")
        self.assertIn('<html dir="rtl" lang="ar">', response.content.decode("utf-8"))

    def test_dispatch_by_query_parameter(self):
        url = reverse("sitemap_stylesheet_dispatch")

        sitemap = self.client.get(url, {"sitemap-stylesheet": "sitemap"})
        index = self.client.get(url, {"sitemap-stylesheet": "index"})

        self.assertIn("has-priority", sitemap.content.decode("utf-8"))
        self.assertIn("sitemap:sitemapindex", index.content.decode("utf-8"))
        self.assertNotIn("has-priority", index.content.decode("utf-8"))

    def test_dispatch_unknown_kind_returns_empty_body(self):
        with self.assertLogs("src.stylesheets.renderer", level="WARNING"):
            response = self.client.get(
                "/sitemap-stylesheet/", {"sitemap-stylesheet": "bogus"}
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], CONTENT_TYPE)
        self.assertEqual(response.content, b"")

    @override_settings(SITEMAP_STYLESHEET_STRICT=True)
    def test_dispatch_unknown_kind_is_404_in_strict_mode(self):
        response = self.client.get(
            "/sitemap-stylesheet/", {"sitemap-stylesheet": "bogus"}
        )
        self.assertEqual(response.status_code, 404)

    @override_settings(
        SITEMAP_STYLESHEET_HOOKS={
            "sitemap": "src.stylesheets.tests.test_views.replace_sitemap",
            "index": replace_index,
        }
    )
    def test_hooks_from_settings(self):
        sitemap = self.client.get("/sitemap.xsl")
        index = self.client.get("/sitemap-index.xsl")

        self.assertEqual(sitemap.content, b"sitemap from settings")
        self.assertEqual(index.content, b"index from settings")

    @override_settings(
        SITEMAP_STYLESHEET_HOOKS={"css": "src.stylesheets.tests.test_views.replace_css"}
    )
    def test_css_hook_from_settings(self):
        response = self.client.get("/sitemap.xsl")
        self.assertIn(
            "<style>body { color: red; }</style>", response.content.decode("utf-8")
        )

    @override_settings(
        SITEMAP_STYLESHEET_DOCS_URL="https://example.com/sitemaps/",
        SITEMAP_STYLESHEET_GENERATOR="Example CMS",
    )
    def test_description_from_settings(self):
        content = self.client.get("/sitemap.xsl").content.decode("utf-8")
        self.assertIn('<a href="https://example.com/sitemaps/">sitemaps.org</a>', content)
        self.assertIn("generated by Example CMS", content)

    def test_renderer_rebuilt_when_settings_change(self):
        before = get_renderer()
        with override_settings(SITEMAP_STYLESHEET_STRICT=True):
            self.assertTrue(get_renderer().strict)
        self.assertIsNot(get_renderer(), before)
        self.assertFalse(get_renderer().strict)


class LoadHooksTestCase(SimpleTestCase):
    def test_empty_config(self):
        hooks = load_hooks({})
        self.assertIsNone(hooks.sitemap)
        self.assertIsNone(hooks.index)
        self.assertIsNone(hooks.css)

    def test_dotted_path_is_imported(self):
        hooks = load_hooks({"css": "src.stylesheets.tests.test_views.replace_css"})
        self.assertIs(hooks.css, replace_css)

    def test_unknown_key_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            load_hooks({"robots": replace_css})

    def test_missing_module_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            load_hooks({"css": "src.stylesheets.tests.missing.hook"})

    def test_non_callable_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            load_hooks({"sitemap": 42})


class StylesheetResponseMiddlewareTestCase(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def _get_response(self, request):
        response = HttpResponse("ok")
        response.set_cookie("sessionid", "abc")
        return response

    def test_cookies_removed_from_stylesheet_responses(self):
        request = self.factory.get("/sitemap.xsl")
        request.resolver_match = resolve("/sitemap.xsl")

        response = StylesheetResponseMiddleware(self._get_response)(request)

        self.assertEqual(len(response.cookies), 0)

    def test_other_responses_untouched(self):
        request = self.factory.get("/elsewhere/")

        response = StylesheetResponseMiddleware(self._get_response)(request)

        self.assertIn("sessionid", response.cookies)
