from django.urls import include, path

urlpatterns = [
    # Stylesheets are requested by the browser while it renders sitemap.xml,
    # so they live outside i18n_patterns like the sitemaps themselves.
    path("", include("src.stylesheets.urls")),
]
