from types import SimpleNamespace

import pytest

import config


def test_setting_resolution_order(monkeypatch):
    fake_secrets: dict[str, object] = {"SUPABASE_URL": "https://secret.supabase.co"}
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=fake_secrets), raising=False)
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")

    # Direct Streamlit secret wins over environment variables.
    assert config.get_setting("SUPABASE_URL") == "https://secret.supabase.co"

    # Nested supabase section is used when the top-level key is missing.
    fake_secrets.pop("SUPABASE_URL")
    fake_secrets["supabase"] = {"SUPABASE_URL": " https://section.supabase.co "}
    assert config.get_setting("SUPABASE_URL") == "https://section.supabase.co"

    # Environment variable is the final fallback.
    fake_secrets["supabase"].pop("SUPABASE_URL")  # type: ignore[union-attr]
    assert config.get_setting("SUPABASE_URL") == "https://env.supabase.co"

    monkeypatch.delenv("SUPABASE_URL", raising=False)
    assert config.get_setting("SUPABASE_URL", "fallback") == "fallback"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, True), ("", True), ("off", False), ("YES", True), (0, False)],
)
def test_normalise_bool(value, expected):
    assert config._normalise_bool(value, default=True) is expected


def test_normalise_bool_warns_on_garbage():
    with pytest.warns(RuntimeWarning):
        assert config._normalise_bool("maybe", default=False) is False


def test_normalise_seconds():
    assert config._normalise_seconds("2.5", name="X", default=1.0) == 2.5
    assert config._normalise_seconds(None, name="X", default=1.0) == 1.0
    with pytest.warns(RuntimeWarning):
        assert config._normalise_seconds("soon", name="X", default=1.0) == 1.0
    with pytest.warns(RuntimeWarning):
        assert config._normalise_seconds("-3", name="X", default=1.0) == 1.0


def test_store_configuration_flag(monkeypatch):
    monkeypatch.setattr(config, "SUPABASE_URL", "https://demo.supabase.co")
    monkeypatch.setattr(config, "SUPABASE_ANON_KEY", "")
    assert not config.is_store_configured()
    monkeypatch.setattr(config, "SUPABASE_ANON_KEY", "key")
    assert config.is_store_configured()
