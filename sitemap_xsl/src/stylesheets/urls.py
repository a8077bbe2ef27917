"""URLs for sitemap stylesheets - separate from i18n_patterns."""

from django.urls import path

from . import views

urlpatterns = [
    path("sitemap.xsl", views.sitemap_stylesheet, name="sitemap_stylesheet"),
    path(
        "sitemap-index.xsl",
        views.sitemap_index_stylesheet,
        name="sitemap_index_stylesheet",
    ),
    # Kind selected by ?sitemap-stylesheet=sitemap|index
    path(
        "sitemap-stylesheet/",
        views.stylesheet_dispatch,
        name="sitemap_stylesheet_dispatch",
    ),
]
