from django.apps import AppConfig


class StylesheetsConfig(AppConfig):
    name = "src.stylesheets"
    verbose_name = "Sitemap stylesheets"

    def ready(self):
        """Connect the settings listener when app is ready."""
        from . import conf  # noqa: F401
