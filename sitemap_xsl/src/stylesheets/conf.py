"""
Settings-driven construction of the default stylesheet renderer.

Settings:
    SITEMAP_STYLESHEET_HOOKS: {"sitemap" | "index" | "css": callable or dotted path}
    SITEMAP_STYLESHEET_STRICT: reject unknown stylesheet kinds
    SITEMAP_STYLESHEET_DOCS_URL: documentation link in the description
    SITEMAP_STYLESHEET_GENERATOR: generator name in the description
"""

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from .renderer import (
    DEFAULT_DOCS_URL,
    DEFAULT_GENERATOR,
    StylesheetHooks,
    StylesheetRenderer,
)

SETTINGS_PREFIX = "SITEMAP_STYLESHEET_"
HOOK_NAMES = ("sitemap", "index", "css")


def load_hooks(config) -> StylesheetHooks:
    """
    Resolve the hooks mapping from settings.

    Values may be callables or dotted import paths.
    """
    config = config or {}
    unknown = sorted(set(config) - set(HOOK_NAMES))
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown SITEMAP_STYLESHEET_HOOKS keys: {', '.join(unknown)}. "
            f"Expected one of: {', '.join(HOOK_NAMES)}"
        )

    resolved = {}
    for name, hook in config.items():
        if isinstance(hook, str):
            try:
                hook = import_string(hook)
            except ImportError as exc:
                raise ImproperlyConfigured(
                    f"Cannot import stylesheet hook '{name}': {hook}"
                ) from exc
        if not callable(hook):
            raise ImproperlyConfigured(f"Stylesheet hook '{name}' is not callable")
        resolved[name] = hook

    return StylesheetHooks(**resolved)


@lru_cache(maxsize=None)
def get_renderer() -> StylesheetRenderer:
    """Return the renderer configured from Django settings."""
    return StylesheetRenderer(
        hooks=load_hooks(getattr(settings, "SITEMAP_STYLESHEET_HOOKS", {})),
        strict=getattr(settings, "SITEMAP_STYLESHEET_STRICT", False),
        docs_url=getattr(settings, "SITEMAP_STYLESHEET_DOCS_URL", DEFAULT_DOCS_URL),
        generator=getattr(
            settings, "SITEMAP_STYLESHEET_GENERATOR", DEFAULT_GENERATOR
        ),
    )


@receiver(setting_changed)
def reset_renderer(sender, setting, **kwargs):  # noqa: ARG001
    """Drop the cached renderer when a stylesheet setting changes."""
    if setting.startswith(SETTINGS_PREFIX):
        get_renderer.cache_clear()
