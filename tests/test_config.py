import os
from unittest.mock import patch

import pytest

from readme_stats.config import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PACKAGES,
    DEFAULT_TEMPLATE_PATH,
    load_config,
)
from readme_stats.registry.npms import DEFAULT_REGISTRY_URL


@patch.dict(os.environ, {}, clear=True)
def test_load_config_defaults():
    config = load_config()

    assert config.packages == DEFAULT_PACKAGES
    assert config.registry_url == DEFAULT_REGISTRY_URL
    assert config.template_path == DEFAULT_TEMPLATE_PATH
    assert config.output_path == DEFAULT_OUTPUT_PATH
    assert config.request_timeout == 30.0
    assert config.stats_filter == "truthy"
    assert config.presence_filter is False
    assert config.log_level == "INFO"


def test_default_paths_sit_next_to_and_above_the_package():
    assert os.path.basename(DEFAULT_TEMPLATE_PATH) == "readme-template.md"
    assert os.path.dirname(DEFAULT_OUTPUT_PATH) == os.path.dirname(
        os.path.dirname(DEFAULT_TEMPLATE_PATH)
    )


@patch.dict(os.environ, {
    "README_PACKAGES": " left-pad , is-odd,,",
    "NPMS_API_URL": "https://mirror.example.com/v2/package/",
    "README_TEMPLATE_PATH": "/tmp/template.md",
    "README_OUTPUT_PATH": "/tmp/README.md",
    "REQUEST_TIMEOUT": "0",
    "STATS_FILTER": "Presence",
    "LOG_LEVEL": "debug",
}, clear=True)
def test_load_config_overrides():
    config = load_config()

    assert config.packages == ("left-pad", "is-odd")
    assert config.registry_url == "https://mirror.example.com/v2/package/"
    assert config.template_path == "/tmp/template.md"
    assert config.output_path == "/tmp/README.md"
    assert config.request_timeout is None
    assert config.presence_filter is True
    assert config.log_level == "debug"


@patch.dict(os.environ, {"REQUEST_TIMEOUT": "soon", "STATS_FILTER": "loose"}, clear=True)
def test_load_config_reports_all_errors():
    with pytest.raises(ValueError) as excinfo:
        load_config()

    message = str(excinfo.value)
    assert "REQUEST_TIMEOUT" in message
    assert "STATS_FILTER" in message


@patch.dict(os.environ, {"REQUEST_TIMEOUT": "-1"}, clear=True)
def test_load_config_rejects_negative_timeout():
    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        load_config()
