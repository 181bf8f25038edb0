import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.platform import OperatingSystem


def test_docker_host_is_read_from_docker_host_env(monkeypatch):
    monkeypatch.delenv("KUBEDESK_DOCKER_HOST", raising=False)
    monkeypatch.setenv("DOCKER_HOST", "tcp://10.0.0.5:2376")

    assert AppSettings().docker_host == "tcp://10.0.0.5:2376"


def test_prefixed_env_overrides_backend_settings(monkeypatch):
    monkeypatch.setenv("KUBEDESK_BACKEND_URL", "http://127.0.0.1:9999")
    monkeypatch.setenv("KUBEDESK_HTTP_TIMEOUT_SECONDS", "5")

    settings = AppSettings()

    assert settings.backend_url == "http://127.0.0.1:9999"
    assert settings.http_timeout_seconds == 5.0


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        AppSettings(http_timeout_seconds=0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("darwin", OperatingSystem.DARWIN),
        ("win32", OperatingSystem.WINDOWS),
        ("windows", OperatingSystem.WINDOWS),
        ("linux", OperatingSystem.LINUX),
        ("freebsd13", None),
        ("", None),
    ],
)
def test_operating_system_parse(raw, expected):
    assert OperatingSystem.parse(raw) is expected


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("KUBEDESK_LOG_LEVEL", " debug ")

    assert AppSettings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("KUBEDESK_LOG_LEVEL", "bogus")

    with pytest.raises(ValidationError, match="log_level"):
        AppSettings()
