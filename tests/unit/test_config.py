"""Unit tests for ExaSettings.from_env."""
import pytest

from core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ExaSettings


def test_defaults_with_empty_environment():
    settings = ExaSettings.from_env({})
    assert settings.api_key == ""
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_reads_all_variables():
    settings = ExaSettings.from_env({
        "EXA_API_KEY": "abc",
        "EXA_BASE_URL": "http://localhost:9000",
        "EXA_TIMEOUT": "5.5",
    })
    assert settings == ExaSettings(api_key="abc", base_url="http://localhost:9000", timeout=5.5)


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout_rejected(raw):
    with pytest.raises(ValueError, match="EXA_TIMEOUT"):
        ExaSettings.from_env({"EXA_TIMEOUT": raw})
