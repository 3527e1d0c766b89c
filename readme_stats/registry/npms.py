import logging
from typing import Optional

import requests

from readme_stats.registry.base import BaseRegistryClient, PackageStat

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://api.npms.io/v2/package/"


class NpmsClient(BaseRegistryClient):
    """Client for the npms.io package metadata API."""

    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        timeout: Optional[float] = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "NpmsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get_metadata(self, url: str) -> dict:
        logger.debug("GET %s", url)
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @staticmethod
    def _parse_metadata(package_name: str, data: dict) -> PackageStat:
        """Extract the three facts from an npms.io package document.

        Intermediate objects must be present; a missing one raises KeyError
        (or TypeError when it is null). Leaf scores may be absent, and
        download entries without a count add nothing.
        """
        downloads = data["collected"]["npm"]["downloads"]
        return PackageStat(
            name=package_name,
            download_count=sum(entry.get("count") or 0 for entry in downloads),
            quality=data["score"]["detail"].get("quality"),
            coverage=data["collected"]["source"].get("coverage"),
        )

    def fetch(self, package_name: str, base_url: Optional[str] = None) -> PackageStat:
        # Names are concatenated as-is; callers pass URL-safe names.
        url = (base_url or self.base_url) + package_name
        data = self._get_metadata(url)
        stat = self._parse_metadata(package_name, data)
        logger.info(
            "%s: downloads=%s, quality=%s, coverage=%s",
            package_name, stat.download_count, stat.quality, stat.coverage,
        )
        return stat
