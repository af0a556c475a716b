"""Last known good gate config cache."""

import json

from versiongate.core.cache import GateCache
from versiongate.core.models import GateConfig


def sample_config():
    return GateConfig(
        platform="linux",
        current_version="2.1.0",
        minimum_version="2.0.0",
        force_minimum_version="1.5.0",
        store_url="https://example.com/download/linux",
        maintenance_mode=True,
        maintenance_message="Database migration",
    )


class TestGateCache:

    def test_missing_file(self, tmp_path):
        assert GateCache(str(tmp_path / "nope.json")).load() is None

    def test_store_and_load(self, tmp_path):
        cache = GateCache(str(tmp_path / "cache" / "gate_cache.json"))
        cache.store(sample_config())
        assert cache.load() == sample_config()

    def test_store_records_fetch_time(self, tmp_path):
        path = tmp_path / "gate_cache.json"
        GateCache(str(path)).store(sample_config())
        data = json.loads(path.read_text(encoding='utf-8'))
        assert data['fetched_at'] > 0
        assert data['config']['platform'] == "linux"
        assert not (tmp_path / "gate_cache.json.tmp").exists()

    def test_store_into_uncreatable_directory_is_logged_only(self, tmp_path):
        blocker = tmp_path / "afile"
        blocker.write_text("not a directory", encoding='utf-8')
        cache = GateCache(str(blocker / "cache" / "gate_cache.json"))
        cache.store(sample_config())
        assert cache.load() is None

    def test_corrupt_file_is_ignored(self, tmp_path):
        path = tmp_path / "gate_cache.json"
        path.write_text("{not json", encoding='utf-8')
        assert GateCache(str(path)).load() is None

    def test_wrong_shape_is_ignored(self, tmp_path):
        path = tmp_path / "gate_cache.json"
        path.write_text(json.dumps({"config": ["a", "b"]}), encoding='utf-8')
        assert GateCache(str(path)).load() is None

    def test_clear(self, tmp_path):
        path = tmp_path / "gate_cache.json"
        cache = GateCache(str(path))
        cache.store(sample_config())
        cache.clear()
        assert not path.exists()
        cache.clear()


class TestGateConfig:

    def test_defaults_for_missing_fields(self):
        config = GateConfig.from_dict({}, "ios")
        assert config.platform == "ios"
        assert config.minimum_version == "0.0.0"
        assert config.force_minimum_version == "0.0.0"
        assert config.maintenance_mode is False

    def test_numbers_become_strings(self):
        config = GateConfig.from_dict({"minimum_version": 2, "current_version": 3.1}, "ios")
        assert config.minimum_version == "2"
        assert config.current_version == "3.1"

    def test_round_trip(self):
        config = sample_config()
        assert GateConfig.from_dict(config.to_dict(), "other") == config
