import dataclasses

import pytest

from canarysim.faults import DEFAULT_PROFILE, FAULT_PROFILES, FaultProfile, resolve_profile
from canarysim.settings import Settings, load_settings


def test_defaults_when_unset():
    s = load_settings({})
    assert s.version == "v1.0.0"
    assert s.channel == "stable"
    assert s.error_rate == 0.0
    assert s.latency_ms == 50
    assert s.port == 8080
    assert s.status_page is True
    assert s.is_canary is False


def test_empty_version_is_same_as_unset():
    assert load_settings({"APP_VERSION": ""}) == load_settings({})


def test_v120_only_raises_error_rate():
    s = load_settings({"APP_VERSION": "v1.2.0"})
    assert s.version == "v1.2.0"
    assert s.error_rate == 0.3
    assert s.latency_ms == 50


def test_v130_only_raises_latency():
    s = load_settings({"APP_VERSION": "v1.3.0"})
    assert s.latency_ms == 2000
    assert s.error_rate == 0.0


@pytest.mark.parametrize("version", ["v1.0.0", "v1.1.0", "v2.0.0", "V1.2.0", "v1.2.0 ", "latest"])
def test_other_versions_get_default_profile(version):
    s = load_settings({"APP_VERSION": version})
    assert s.version == version
    assert (s.error_rate, s.latency_ms) == (0.0, 50)


def test_profile_table():
    assert set(FAULT_PROFILES) == {"v1.2.0", "v1.3.0"}
    assert resolve_profile("v1.2.0") == FaultProfile(error_rate=0.3, latency_ms=50)
    assert resolve_profile("v1.3.0") == FaultProfile(error_rate=0.0, latency_ms=2000)
    assert resolve_profile("nope") is DEFAULT_PROFILE


def test_channel_and_canary_flag():
    assert load_settings({"DEPLOYMENT_CHANNEL": "canary"}).is_canary is True
    assert load_settings({"DEPLOYMENT_CHANNEL": ""}).channel == "stable"
    other = load_settings({"DEPLOYMENT_CHANNEL": "beta"})
    assert other.channel == "beta"
    assert other.is_canary is False


def test_port_parsing_falls_back_to_default():
    assert load_settings({"PORT": "9090"}).port == 9090
    assert load_settings({"PORT": "not-a-port"}).port == 8080
    assert load_settings({"PORT": ""}).port == 8080


def test_status_page_flag():
    assert load_settings({"APP_STATUS_PAGE": "false"}).status_page is False
    assert load_settings({"APP_STATUS_PAGE": "On"}).status_page is True


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("APP_VERSION", "v1.3.0")
    monkeypatch.delenv("PORT", raising=False)
    s = load_settings()
    assert s.version == "v1.3.0"
    assert s.latency_ms == 2000


def test_settings_are_immutable():
    s = Settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.version = "v9"  # type: ignore[misc]
    assert s.profile == DEFAULT_PROFILE


def test_from_version_applies_fault_table():
    s = Settings.from_version("v1.2.0", channel="canary")
    assert (s.error_rate, s.latency_ms, s.channel) == (0.3, 50, "canary")
    assert Settings.from_version("v1.3.0").latency_ms == 2000
    assert Settings.from_version("v7").profile == DEFAULT_PROFILE


def test_out_of_range_port_is_passed_through_for_bind_to_reject():
    assert load_settings({"PORT": "70000"}).port == 70000
