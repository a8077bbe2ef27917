"""
Management command to write the sitemap stylesheets to disk.

Usage:
    python manage.py export_stylesheets
    python manage.py export_stylesheets --output static/ --language de --validate
"""

from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import translation
from src.exceptions import StylesheetTransformError

from ...conf import get_renderer
from ...xslt import compile_stylesheet


class Command(BaseCommand):
    help = "Write sitemap.xsl and sitemap-index.xsl to a directory"

    def add_arguments(self, parser):
        parser.add_argument(
            "--output",
            type=Path,
            default=Path("."),
            help="Directory to write the stylesheets to (default: current directory)",
        )
        parser.add_argument(
            "--language",
            type=str,
            help="Language to render labels in (e.g., de). Defaults to LANGUAGE_CODE",
        )
        parser.add_argument(
            "--validate",
            action="store_true",
            help="Compile each stylesheet with lxml before writing it",
        )

    def handle(self, *args, **options):
        output = options["output"]
        language = options.get("language") or settings.LANGUAGE_CODE
        renderer = get_renderer()

        with translation.override(language):
            documents = {
                "sitemap.xsl": renderer.get_sitemap_stylesheet(),
                "sitemap-index.xsl": renderer.get_sitemap_index_stylesheet(),
            }

        output.mkdir(parents=True, exist_ok=True)
        for filename, document in documents.items():
            if options["validate"]:
                try:
                    compile_stylesheet(document)
                except StylesheetTransformError as exc:
                    raise CommandError(f"{filename}: {exc.message}") from exc

            path = output / filename
            path.write_text(document, encoding="utf-8")
            self.stdout.write(self.style.SUCCESS(f"✅ Wrote {path}"))
