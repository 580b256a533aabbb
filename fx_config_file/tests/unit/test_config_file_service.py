"""
Unit tests for ConfigFileService
"""

from unittest.mock import MagicMock

import pytest

from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.loaders.config_file_loader import ConfigFileLoader
from fx_config_file.services.config_file_service import ConfigFileService


class TestConfigFileService:

    @pytest.fixture
    def loader(self, diagnostic_logger):
        return ConfigFileLoader(diagnostic_logger=diagnostic_logger, silent=True)

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / ".hhconfig"
        path.write_text("workers = 4\nname = hh\n")
        return path

    def test_load_applies_readers_in_order(self, loader, config_file, diagnostic_logger):
        first = MagicMock()
        first.read_overrides.return_value = ConfigMap({"workers": "8", "mode": "a"})
        second = MagicMock()
        second.read_overrides.return_value = ConfigMap({"mode": "b"})

        service = ConfigFileService(loader, diagnostic_logger, [first, second], silent=True)
        config = service.load(str(config_file))

        assert config == ConfigMap({"workers": "8", "name": "hh", "mode": "b"})

    def test_extra_overrides_win(self, loader, config_file, diagnostic_logger):
        reader = MagicMock()
        reader.read_overrides.return_value = ConfigMap({"workers": "8"})

        service = ConfigFileService(loader, diagnostic_logger, [reader], silent=True)
        config = service.load(str(config_file), extra_overrides=ConfigMap({"workers": "16"}))

        assert config["workers"] == "16"

    def test_missing_config_file_starts_empty(self, loader, tmp_path, monkeypatch, diagnostic_logger):
        monkeypatch.chdir(tmp_path)
        service = ConfigFileService(loader, diagnostic_logger, config_file_name="never-there.cfg", silent=True)

        assert service.load() == ConfigMap.empty()

    def test_finds_config_file_from_cwd(self, loader, config_file, monkeypatch, diagnostic_logger):
        monkeypatch.chdir(config_file.parent)
        service = ConfigFileService(loader, diagnostic_logger, silent=True)

        assert service.load()["name"] == "hh"

    def test_reports_overrides_when_not_silent(self, loader, config_file, diagnostic_logger):
        service = ConfigFileService(loader, diagnostic_logger, silent=False)

        service.load(str(config_file), extra_overrides=ConfigMap({"name": "other"}))

        assert diagnostic_logger.messages[0] == "Config overrides:"
        assert "The combined config:" in diagnostic_logger.messages[2]

    def test_load_getters(self, loader, config_file, diagnostic_logger):
        getters = ConfigFileService(loader, diagnostic_logger, silent=True).load_getters(str(config_file))
        assert getters.int_with_default("workers", default=1) == 4
