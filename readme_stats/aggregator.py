"""Concurrent fetch and reduction of per-package registry stats.

Every package is fetched on its own worker thread. The join is fail-fast:
the first fetch to raise aborts the whole aggregate and its exception is
re-raised to the caller, so a partial result is never produced.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from readme_stats.formatter import format_date
from readme_stats.registry.base import BaseRegistryClient, PackageStat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateResult:
    total_downloads: int
    average_quality: float
    average_coverage: float
    generated_date: str


def _fetch_worker(
    client: BaseRegistryClient, index: int, name: str, outcomes: queue.Queue
) -> None:
    try:
        outcomes.put((index, client.fetch(name), None))
    except Exception as e:
        outcomes.put((index, None, e))


def fetch_all(names: Sequence[str], client: BaseRegistryClient) -> list[PackageStat]:
    """Fetch stats for every name concurrently, preserving input order.

    Raises the first exception any fetch raises. Workers are daemon threads,
    so fetches still in flight at that point never delay process exit; their
    results are discarded.
    """
    outcomes: queue.Queue = queue.Queue()
    for index, name in enumerate(names):
        threading.Thread(
            target=_fetch_worker,
            args=(client, index, name, outcomes),
            name=f"fetch-{name}",
            daemon=True,
        ).start()

    stats: list[Optional[PackageStat]] = [None] * len(names)
    for _ in names:
        index, stat, error = outcomes.get()
        if error is not None:
            raise error
        stats[index] = stat
    return stats


def _qualifies(value: Optional[float], presence_filter: bool) -> bool:
    # Truthiness drops zeros as well as missing values.
    if presence_filter:
        return value is not None
    return bool(value)


def _mean_over_population(
    values: list[Optional[float]], population: int, presence_filter: bool
) -> float:
    if population == 0:
        return 0.0
    return float(sum(v / population for v in values if _qualifies(v, presence_filter)))


def summarize(
    stats: Sequence[PackageStat],
    presence_filter: bool = False,
    today: Optional[date] = None,
) -> AggregateResult:
    """Reduce fetched stats into a single AggregateResult.

    Averages divide by the number of fetched packages, not by the number of
    packages that reported a value.
    """
    population = len(stats)

    excluded = [s.name for s in stats if not _qualifies(s.download_count, presence_filter)]
    if excluded:
        logger.debug("Download counts excluded from total: %s", ", ".join(excluded))

    total_downloads = sum(
        s.download_count for s in stats if _qualifies(s.download_count, presence_filter)
    )

    return AggregateResult(
        total_downloads=total_downloads,
        average_quality=_mean_over_population(
            [s.quality for s in stats], population, presence_filter
        ),
        average_coverage=_mean_over_population(
            [s.coverage for s in stats], population, presence_filter
        ),
        generated_date=format_date(today or date.today()),
    )


def aggregate(
    names: Sequence[str],
    client: BaseRegistryClient,
    presence_filter: bool = False,
    today: Optional[date] = None,
) -> AggregateResult:
    logger.info(
        "Fetching stats for %d package(s): %s (filter: %s)",
        len(names), ", ".join(names), "presence" if presence_filter else "truthy",
    )
    stats = fetch_all(names, client)
    result = summarize(stats, presence_filter=presence_filter, today=today)
    logger.info(
        "Aggregate: downloads=%d, quality=%.4f, coverage=%.4f",
        result.total_downloads, result.average_quality, result.average_coverage,
    )
    return result
