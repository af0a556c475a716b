"""Settings persistence."""

import json

from versiongate.config.settings import AppSettings, default_platform


class TestAppSettings:

    def test_defaults(self, tmp_path):
        settings = AppSettings(data_dir=str(tmp_path))
        assert settings.request_timeout == 5.0
        assert settings.check_interval_minutes == 60
        assert settings.check_on_resume is True
        assert settings.platform == default_platform()
        assert settings.cache_path == str(tmp_path / "gate_cache.json")

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = AppSettings.load(str(tmp_path / "settings.json"))
        assert settings.config_url == ""

    def test_save_and_load(self, tmp_path):
        path = str(tmp_path / "sub" / "settings.json")
        settings = AppSettings(config_url="https://example.com/gate.json",
                               platform="android", dismissed_version="1.4.0",
                               data_dir=str(tmp_path))
        settings.save(path)

        loaded = AppSettings.load(path)
        assert loaded == settings

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"platform": "ios", "listen_port": 6881}), encoding='utf-8')
        assert AppSettings.load(str(path)).platform == "ios"

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2", encoding='utf-8')
        assert AppSettings.load(str(path)).request_timeout == 5.0

    def test_ensure_dirs(self, tmp_path):
        settings = AppSettings(data_dir=str(tmp_path / "data"))
        settings.ensure_dirs()
        assert (tmp_path / "data" / "logs").is_dir()
