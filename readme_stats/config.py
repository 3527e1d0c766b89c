import os
from dataclasses import dataclass
from typing import Optional

from readme_stats.registry.npms import DEFAULT_REGISTRY_URL

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_PACKAGES = ("http-responder", "pkgplay", "await-fn")
DEFAULT_TEMPLATE_PATH = os.path.join(PACKAGE_DIR, "readme-template.md")
DEFAULT_OUTPUT_PATH = os.path.join(os.path.dirname(PACKAGE_DIR), "README.md")
FILTER_MODES = ("truthy", "presence")


@dataclass(frozen=True)
class AppConfig:
    packages: tuple[str, ...] = DEFAULT_PACKAGES
    registry_url: str = DEFAULT_REGISTRY_URL
    template_path: str = DEFAULT_TEMPLATE_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    request_timeout: Optional[float] = 30.0
    stats_filter: str = "truthy"
    log_level: str = "INFO"

    @property
    def presence_filter(self) -> bool:
        return self.stats_filter == "presence"


def load_config() -> AppConfig:
    """Load and validate configuration from environment variables.

    Every variable is optional; invalid values are reported together.
    """
    errors = []

    def _get(name: str, default: str) -> str:
        return os.environ.get(name, "").strip() or default

    packages = tuple(
        p.strip() for p in _get("README_PACKAGES", ",".join(DEFAULT_PACKAGES)).split(",")
        if p.strip()
    )

    raw_timeout = _get("REQUEST_TIMEOUT", "30")
    request_timeout: Optional[float] = None
    try:
        request_timeout = float(raw_timeout)
        if request_timeout < 0:
            errors.append(f"REQUEST_TIMEOUT must not be negative: {raw_timeout}")
        elif request_timeout == 0:
            request_timeout = None
    except ValueError:
        errors.append(f"REQUEST_TIMEOUT is not a number: {raw_timeout}")

    stats_filter = _get("STATS_FILTER", "truthy").lower()
    if stats_filter not in FILTER_MODES:
        errors.append(
            f"STATS_FILTER must be one of {', '.join(FILTER_MODES)}: {stats_filter}"
        )

    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    return AppConfig(
        packages=packages,
        registry_url=_get("NPMS_API_URL", DEFAULT_REGISTRY_URL),
        template_path=_get("README_TEMPLATE_PATH", DEFAULT_TEMPLATE_PATH),
        output_path=_get("README_OUTPUT_PATH", DEFAULT_OUTPUT_PATH),
        request_timeout=request_timeout,
        stats_filter=stats_filter,
        log_level=_get("LOG_LEVEL", "INFO"),
    )
