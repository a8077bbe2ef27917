"""Compile and apply generated stylesheets with lxml."""

import logging
from typing import Union

from lxml import etree
from src.exceptions import StylesheetTransformError

logger = logging.getLogger(__name__)


def _as_bytes(document: Union[str, bytes]) -> bytes:
    # lxml rejects str input that carries an encoding declaration
    if isinstance(document, str):
        return document.encode("utf-8")
    return document


def compile_stylesheet(document: Union[str, bytes]) -> etree.XSLT:
    """Parse an XSL document and compile it into an XSLT transform."""
    try:
        return etree.XSLT(etree.fromstring(_as_bytes(document)))
    except (etree.XMLSyntaxError, etree.XSLTParseError) as exc:
        raise StylesheetTransformError(
            "Stylesheet is not a valid XSLT document",
            context={"detail": str(exc)},
        ) from exc


def transform(stylesheet: Union[str, bytes], xml: Union[str, bytes]):
    """Apply a stylesheet to an XML document and return the result tree."""
    xslt = compile_stylesheet(stylesheet)
    try:
        return xslt(etree.fromstring(_as_bytes(xml)))
    except (etree.XMLSyntaxError, etree.XSLTApplyError) as exc:
        for error in xslt.error_log:
            logger.error(
                "XSLT error",
                extra={"xslt_message": error.message, "line": error.line},
            )
        raise StylesheetTransformError(
            "Failed to apply stylesheet", context={"detail": str(exc)}
        ) from exc
