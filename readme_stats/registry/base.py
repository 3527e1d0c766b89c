from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PackageStat:
    name: str
    download_count: Optional[int] = None
    quality: Optional[float] = None
    coverage: Optional[float] = None


class BaseRegistryClient(ABC):
    @abstractmethod
    def fetch(self, package_name: str) -> PackageStat:
        """Fetch download, quality and coverage facts for one package.

        Raises on network, decoding or missing-field failures; callers decide
        how to handle them.
        """
