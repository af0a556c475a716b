"""Connectivity probe."""

from types import SimpleNamespace

from versiongate.network import detector
from versiongate.network.detector import NetworkDetector


def fake_stats(monkeypatch, stats):
    monkeypatch.setattr(detector.psutil, 'net_if_stats', lambda: stats)


class TestNetworkDetector:

    def test_online_with_active_interface(self, monkeypatch):
        fake_stats(monkeypatch, {
            'lo': SimpleNamespace(isup=True),
            'eth0': SimpleNamespace(isup=True),
        })
        assert NetworkDetector.is_online()

    def test_offline_with_only_loopback(self, monkeypatch):
        fake_stats(monkeypatch, {
            'lo': SimpleNamespace(isup=True),
            'Loopback Pseudo-Interface 1': SimpleNamespace(isup=True),
            'wlan0': SimpleNamespace(isup=False),
        })
        assert not NetworkDetector.is_online()

    def test_probe_failure_counts_as_online(self, monkeypatch):
        def boom():
            raise OSError("no permission")

        monkeypatch.setattr(detector.psutil, 'net_if_stats', boom)
        assert NetworkDetector.is_online()
