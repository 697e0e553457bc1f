from pathlib import Path

from wordgrid.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MIN_COMMON_WORDS"] == cfg.MIN_COMMON_WORDS
    assert result["MAX_ATTEMPTS"] == cfg.MAX_ATTEMPTS


def test_derived_paths():
    cfg = Settings(BASE_DIR=Path("/srv/wordgrid"))
    assert cfg.DICTIONARY_PATH == Path("/srv/wordgrid/data/full-dictionary.json")
    assert cfg.DICTIONARY_COMMON_PATH == Path("/srv/wordgrid/data/common-dictionary.json")
    assert cfg.PUZZLES_DIR == Path("/srv/wordgrid/puzzles")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MAX_ATTEMPTS", "500")
    monkeypatch.setenv("NOTIFY_ON_GENERATE", "yes")
    monkeypatch.setenv("PUZZLE_TIMEZONE", "UTC")
    monkeypatch.setenv("PUZZLES_DIR", "/tmp/puzzles")
    cfg = _fresh_settings()
    assert cfg.MAX_ATTEMPTS == 500
    assert cfg.NOTIFY_ON_GENERATE is True
    assert cfg.PUZZLE_TIMEZONE == "UTC"
    assert cfg.PUZZLES_DIR == Path("/tmp/puzzles")


def test_base_dir_from_environment_moves_derived_paths(monkeypatch, tmp_path):
    monkeypatch.setenv("BASE_DIR", str(tmp_path))
    cfg = _fresh_settings()
    assert cfg.BASE_DIR == tmp_path
    assert cfg.DICTIONARY_PATH == tmp_path / "data" / "full-dictionary.json"
    assert cfg.DICTIONARY_COMMON_PATH == tmp_path / "data" / "common-dictionary.json"
    assert cfg.PUZZLES_DIR == tmp_path / "puzzles"


def test_explicit_path_env_wins_over_base_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("BASE_DIR", str(tmp_path))
    monkeypatch.setenv("PUZZLES_DIR", "/var/lib/puzzles")
    cfg = _fresh_settings()
    assert cfg.PUZZLES_DIR == Path("/var/lib/puzzles")
    assert cfg.DICTIONARY_PATH == tmp_path / "data" / "full-dictionary.json"


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_COMMON_WORDS=25)
    assert errors == {}
    assert cfg.MIN_COMMON_WORDS == 25


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_ATTEMPTS="2000")
    assert errors == {}
    assert cfg.MAX_ATTEMPTS == 2000


def test_update_int_rejects_garbage():
    cfg = _fresh_settings()
    original = cfg.MAX_ATTEMPTS
    errors = update_settings(cfg, MAX_ATTEMPTS="lots")
    assert "MAX_ATTEMPTS" in errors
    assert cfg.MAX_ATTEMPTS == original


def test_update_int_rejects_bool():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_VOWELS=True)
    assert "MAX_VOWELS" in errors
    assert cfg.MAX_VOWELS == 7


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY_ON_GENERATE=True)
    assert errors == {}
    assert cfg.NOTIFY_ON_GENERATE is True


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_string_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NTFY_TOPIC="test-topic")
    assert errors == {}
    assert cfg.NTFY_TOPIC == "test-topic"


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_VOWELS=4, MAX_VOWELS=8, NTFY_TOPIC="multi")
    assert errors == {}
    assert cfg.MIN_VOWELS == 4
    assert cfg.MAX_VOWELS == 8
    assert cfg.NTFY_TOPIC == "multi"


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert "PORT" in errors


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_TOTAL_WORDS=80, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_TOTAL_WORDS == 80
