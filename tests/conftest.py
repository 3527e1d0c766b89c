from typing import Optional

import pytest

from readme_stats.registry.base import BaseRegistryClient, PackageStat


class FakeRegistryClient(BaseRegistryClient):
    def __init__(
        self,
        stats: dict[str, PackageStat],
        failures: Optional[dict[str, Exception]] = None,
    ):
        self.stats = stats
        self.failures = failures or {}

    def fetch(self, package_name: str) -> PackageStat:
        if package_name in self.failures:
            raise self.failures[package_name]
        return self.stats[package_name]


@pytest.fixture
def registry_url():
    return "https://api.npms.test/v2/package/"


@pytest.fixture
def make_payload():
    """Builder for trimmed npms.io package documents."""

    def _make_payload(counts=(100, 200), quality=0.9, coverage=0.8) -> dict:
        return {
            "collected": {
                "metadata": {"name": "pkg"},
                "npm": {
                    "downloads": [
                        {"from": "2024-01-01T00:00:00.000Z", "to": "2024-01-02T00:00:00.000Z", "count": c}
                        for c in counts
                    ],
                },
                "source": {"coverage": coverage},
            },
            "score": {
                "final": 0.7,
                "detail": {"quality": quality, "popularity": 0.1, "maintenance": 0.5},
            },
        }

    return _make_payload


@pytest.fixture
def fake_client_cls():
    return FakeRegistryClient


@pytest.fixture
def sample_stats():
    return {
        "http-responder": PackageStat("http-responder", download_count=1000, quality=0.8, coverage=0.5),
        "pkgplay": PackageStat("pkgplay", download_count=2000, quality=0.9, coverage=0.7),
        "await-fn": PackageStat("await-fn", download_count=0, quality=None, coverage=0.0),
    }


@pytest.fixture
def fake_client(fake_client_cls, sample_stats):
    return fake_client_cls(sample_stats)
