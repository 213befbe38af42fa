"""Tests for the translator services configuration loader."""

import json
from pathlib import Path

import pytest

from translation_router_api.core.translators_config import TranslatorsConfig


def _write(tmp_path, config):
    path = tmp_path / "translators-config.json"
    path.write_text(json.dumps(config))
    return str(path)


class TestTranslatorsConfig:
    def test_loads_active_services_only(self, tmp_path):
        path = _write(
            tmp_path,
            {
                "active_services": ["translator-de-en"],
                "services": {
                    "translator-de-en": {"api_host": "http://de-en", "timeout": 60},
                    "translator-en-de": {"api_host": "http://en-de"},
                },
            },
        )

        config = TranslatorsConfig(path, default_timeout=300)

        assert config.active_services == ["translator-de-en"]
        assert list(config.services) == ["translator-de-en"]
        assert config.services["translator-de-en"].timeout == 60

    def test_missing_services(self, tmp_path):
        path = _write(
            tmp_path,
            {
                "active_services": ["translator-de-en"],
                "services": {"translator-de-en": {"api_host": "http://de-en"}},
            },
        )

        config = TranslatorsConfig(path)

        assert config.missing_services(["translator-de-en", "translator-en-de"]) == [
            "translator-en-de"
        ]

    def test_active_service_without_configuration(self, tmp_path):
        path = _write(
            tmp_path, {"active_services": ["translator-de-en"], "services": {}}
        )
        with pytest.raises(KeyError):
            TranslatorsConfig(path)

    def test_duplicate_active_service(self, tmp_path):
        path = _write(
            tmp_path,
            {
                "active_services": ["translator-de-en", "translator-de-en"],
                "services": {"translator-de-en": {"api_host": "http://de-en"}},
            },
        )
        with pytest.raises(ValueError):
            TranslatorsConfig(path)

    def test_shipped_configuration_covers_the_graph(self):
        from translation_router_lib.core.languages import DEFAULT_LANGUAGE_GRAPH

        path = Path(__file__).parent.parent / "resources/configs/translators-config.json"
        config = TranslatorsConfig(str(path))
        assert config.missing_services(DEFAULT_LANGUAGE_GRAPH.services()) == []
