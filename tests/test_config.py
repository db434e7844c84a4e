import pytest

from pagefactory.config import DEFAULT_AJAX_PROBE, FactoryConfig, load_config


def test_defaults() -> None:
    config = FactoryConfig()

    assert config.expected_element_timeout == 30.0
    assert config.expected_element_state == "visible"
    assert config.ajax_timeout == 10.0
    assert config.ajax_probe == DEFAULT_AJAX_PROBE
    assert config.ajax_poll_intervals == (0.3, 0.7)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGEFACTORY_EXPECTED_ELEMENT_TIMEOUT", "12.5")
    monkeypatch.setenv("PAGEFACTORY_EXPECTED_ELEMENT_STATE", "attached")
    monkeypatch.setenv("PAGEFACTORY_AJAX_TIMEOUT", "4")
    monkeypatch.setenv("PAGEFACTORY_AJAX_PROBE", "() => window.pendingRequests")

    config = FactoryConfig.from_env()

    assert config.expected_element_timeout == 12.5
    assert config.expected_element_state == "attached"
    assert config.ajax_timeout == 4.0
    assert config.ajax_probe == "() => window.pendingRequests"


def test_from_env_rejects_bad_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGEFACTORY_AJAX_TIMEOUT", "soon")

    with pytest.raises(ValueError):
        FactoryConfig.from_env()


def test_load_config_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGEFACTORY_AJAX_TIMEOUT", "7")
    first = load_config()
    monkeypatch.setenv("PAGEFACTORY_AJAX_TIMEOUT", "8")

    assert load_config() is first
    assert first.ajax_timeout == 7.0
