import logging
from pathlib import PurePosixPath

from profile_css.config import BuildConfig
from profile_css.core.aggregate import aggregate
from profile_css.core.minify import minify
from profile_css.core.ports.minifier import MinifierEngine
from profile_css.core.ports.storage import BuildStorage
from profile_css.core.validate import validate
from profile_css.models import BuildReport, MinifierConfig

logger = logging.getLogger(__name__)


def compression_ratio(original_size: int, final_size: int) -> float:
    if original_size == 0:
        return 0.0
    return round((1 - final_size / original_size) * 100, 2)


def run_build(
    config: BuildConfig,
    storage: BuildStorage,
    engine: MinifierEngine,
    options: MinifierConfig | None = None,
) -> BuildReport:
    """Read, aggregate, minify, validate and persist one stylesheet.

    ``SourceReadError`` and ``MinificationError`` propagate before anything is
    written. Validation issues never stop the build; they land in the report.
    """
    options = options or MinifierConfig()

    documents = storage.read_sources(config.sources)
    logger.info("Read %d source file(s)", len(documents))

    aggregated = aggregate(documents)
    result = minify(aggregated, options, engine, filename=config.output_name)
    logger.info("Minified %d -> %d chars", aggregated.size_chars, result.size_chars)

    issues = validate(result.text, config.rules)
    if issues:
        logger.info("Validation found %d issue(s)", len(issues))

    storage.ensure_directory(str(PurePosixPath(config.output).parent))
    storage.write_output(config.output, result.text)
    logger.info("Wrote %s", config.output_path)

    return BuildReport(
        source_count=len(documents),
        original_size_chars=aggregated.size_chars,
        final_size_chars=result.size_chars,
        compression_ratio_percent=compression_ratio(aggregated.size_chars, result.size_chars),
        issues=tuple(issues),
        output_path=config.output_path,
        max_output_size=config.max_output_size,
    )
