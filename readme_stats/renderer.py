import logging
from typing import Callable

from readme_stats.aggregator import AggregateResult
from readme_stats.formatter import format_number, format_percent, placeholder_pattern

logger = logging.getLogger(__name__)

PLACEHOLDERS = ("downloadsCount", "avgQuality", "codeCov", "todayDate")


def render(
    template: str,
    result: AggregateResult,
    number_formatter: Callable[[int], str] = format_number,
    percent_formatter: Callable[[float], str] = format_percent,
) -> str:
    """Substitute every known placeholder in the template.

    Placeholders with other names are left as they are.
    """
    values = {
        "downloadsCount": number_formatter(result.total_downloads),
        "avgQuality": percent_formatter(result.average_quality),
        "codeCov": percent_formatter(result.average_coverage),
        "todayDate": result.generated_date,
    }

    rendered = template
    for name in PLACEHOLDERS:
        value = values[name]
        rendered, count = placeholder_pattern(name).subn(lambda _match: value, rendered)
        logger.debug("Replaced %d occurrence(s) of %s with %r", count, name, value)
    return rendered


def load_template(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_output(path: str, text: str) -> None:
    """Overwrite the output file with the rendered text, byte for byte."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.info("Wrote %d characters to %s", len(text), path)
