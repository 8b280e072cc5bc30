from __future__ import annotations

import logging
import re
import xml.dom
from collections.abc import Iterable, Iterator
from typing import Any

import cssutils
from cssutils.css import CSSUnknownRule
from cssutils.serialize import CSSSerializer

from profile_css.errors import MinificationError
from profile_css.models import Feature, MinifierConfig

logger = logging.getLogger(__name__)

# Parse errors are raised, not logged; warnings are noise.
cssutils.log.setLevel(logging.CRITICAL)

_AT_KEYWORD = re.compile(r"@[\w-]+")


def _serializer_for(options: MinifierConfig) -> CSSSerializer:
    serializer = CSSSerializer()
    if options.minify:
        serializer.prefs.useMinified()
    serializer.prefs.keepComments = Feature.COMMENTS in options.preserve_features
    # cssutils only ever drops declarations by collapsing a property to its
    # effective value; keeping them all keeps every prefixed variant too.
    serializer.prefs.keepAllProperties = Feature.VENDOR_PREFIXES in options.preserve_features
    return serializer


def _walk_rules(rules: Iterable[Any]) -> Iterator[Any]:
    for rule in rules:
        yield rule
        nested = getattr(rule, "cssRules", None)
        if nested is not None:
            yield from _walk_rules(nested)


def _reject_unknown_rules(sheet: Any) -> None:
    """Fail on at-rules cssutils has no model for.

    The minified serializer drops them, and keeping them mangles the selectors
    inside, so either way their content would not be published as written.
    """
    for rule in _walk_rules(sheet.cssRules):
        if isinstance(rule, CSSUnknownRule):
            match = _AT_KEYWORD.match(rule.cssText.lstrip())
            keyword = match.group(0) if match else "at-rule"
            raise MinificationError(f"Unsupported at-rule {keyword}: cssutils cannot minify it without loss")


class CssutilsMinifier:
    """Minify stylesheets with cssutils.

    Implements the ``MinifierEngine`` protocol. Parse errors and at-rules the
    engine does not understand are raised rather than logged, so such input
    fails the build instead of being silently dropped from the output.
    """

    def transform(self, code: str, *, filename: str, options: MinifierConfig) -> str:
        parser = cssutils.CSSParser(raiseExceptions=True, validate=False)
        try:
            sheet = parser.parseString(code, href=filename)
        except (xml.dom.DOMException, ValueError) as exc:
            raise MinificationError(str(exc)) from exc
        _reject_unknown_rules(sheet)

        previous = cssutils.ser
        cssutils.setSerializer(_serializer_for(options))
        try:
            output = sheet.cssText.decode("utf-8")
        finally:
            cssutils.setSerializer(previous)
        logger.debug("cssutils serialized %s (%d chars)", filename, len(output))
        return output
