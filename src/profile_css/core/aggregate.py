from collections.abc import Sequence

from profile_css.models import AggregatedStylesheet, SourceDocument

SEPARATOR = "\n"


def aggregate(sources: Sequence[SourceDocument]) -> AggregatedStylesheet:
    """Join source texts in list order, one newline between neighbours."""
    if not sources:
        raise ValueError("At least one source document is required.")
    return AggregatedStylesheet.from_text(SEPARATOR.join(doc.text for doc in sources))
