import json

from cleanfeed import config, dependencies
from cleanfeed.schemas import FilterSettings


def test_load_settings_without_path_uses_defaults():
    assert config.load_settings("") == FilterSettings()


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"enabled": False, "filter_mode": "remove", "whitelist": ["friend"], "keywords": ["spicy"]}),
        encoding="utf-8",
    )
    settings = config.load_settings(str(path))
    assert settings.enabled is False
    assert settings.filter_mode == "remove"
    assert settings.whitelist == ["friend"]
    assert settings.keywords == ["spicy"]


def test_load_settings_falls_back_on_errors(tmp_path, caplog):
    missing = tmp_path / "missing.json"
    assert config.load_settings(str(missing)) == FilterSettings()

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert config.load_settings(str(broken)) == FilterSettings()

    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"strictness": "extreme"}), encoding="utf-8")
    assert config.load_settings(str(invalid)) == FilterSettings()

    assert "using defaults" in caplog.text


def test_shared_filter_uses_settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"keywords": ["Spicy Page"]}), encoding="utf-8")
    monkeypatch.setattr(config, "SETTINGS_FILE", str(path))
    monkeypatch.setattr(config, "CACHE_MAX_ENTRIES", 5)

    dependencies.reset_filter()
    try:
        cf = dependencies.get_filter()
        assert cf is dependencies.get_filter()
        assert cf.cache.max_entries == 5
        assert cf.detector.detect_text("a spicy page").should_filter
    finally:
        dependencies.reset_filter()
