import logging
import re

from profile_css.core.ports.minifier import MinifierEngine
from profile_css.models import AggregatedStylesheet, MinifierConfig, TransformResult

logger = logging.getLogger(__name__)

PREFIXED_PROPERTY = "-webkit-backdrop-filter"
UNPREFIXED_PROPERTY = "backdrop-filter"

# Value runs to the declaration terminator or the end of the block.
_PREFIXED_DECLARATION = re.compile(re.escape(PREFIXED_PROPERTY) + r":([^;}]+)(;?)")
_DECLARATION_BOUNDARY = frozenset("{; \t\r\n")


def _has_fallback(css: str, position: int, fallback: str) -> bool:
    start = position - len(fallback)
    if start < 0 or css[start:position] != fallback:
        return False
    return start == 0 or css[start - 1] in _DECLARATION_BOUNDARY


def restore_unprefixed_fallback(css: str) -> tuple[str, int]:
    """Put ``backdrop-filter`` back in front of every ``-webkit-backdrop-filter``.

    The host platform only honours the prefixed form, so the engine is told to
    keep prefixes; the unprefixed fallback can still get dropped as overridden.
    Declarations that already carry the identical fallback are left alone, so
    running this twice gives the same text.

    Returns the repaired text and the number of declarations inserted.
    """
    inserted = 0

    def _restore(match: re.Match[str]) -> str:
        nonlocal inserted
        value, terminator = match.group(1), match.group(2)
        fallback = f"{UNPREFIXED_PROPERTY}:{value};"
        if _has_fallback(css, match.start(), fallback):
            return match.group(0)
        inserted += 1
        return f"{fallback}{PREFIXED_PROPERTY}:{value}{terminator}"

    repaired = _PREFIXED_DECLARATION.sub(_restore, css)
    return repaired, inserted


def minify(
    stylesheet: AggregatedStylesheet,
    options: MinifierConfig,
    engine: MinifierEngine,
    filename: str = "stylesheet.css",
) -> TransformResult:
    """Minify through ``engine`` and repair the prefixed fallback.

    Engine failures propagate as ``MinificationError``; nothing is returned
    for a stylesheet the engine could not process.
    """
    output = engine.transform(stylesheet.text, filename=filename, options=options)
    repaired, inserted = restore_unprefixed_fallback(output)
    if inserted:
        logger.info("Restored %d unprefixed %s declaration(s)", inserted, UNPREFIXED_PROPERTY)
    return TransformResult.from_text(repaired)
