from pathlib import Path

from wordsearch.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.MAX_RESULTS == 50
    assert cfg.MAX_BOARD_SIZE == 12
    assert cfg.DEBUG is False
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "dictionary.txt"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MIN_WORD_LENGTH", "4")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.DEBUG is True
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MIN_WORD_LENGTH"] == cfg.MIN_WORD_LENGTH
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_BOARD_SIZE=7)
    assert errors == {}
    assert cfg.MAX_BOARD_SIZE == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH="5")
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 5


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4)
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MIN_WORD_LENGTH == 4


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DICTIONARY_PATH="/tmp/words.txt")
    assert "DICTIONARY_PATH" in errors
    assert cfg.DICTIONARY_PATH != Path("/tmp/words.txt")


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_bad_value_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="lots", MIN_WORD_LENGTH=0, MAX_BOARD_SIZE=True)
    assert set(errors) == {"MAX_RESULTS", "MIN_WORD_LENGTH", "MAX_BOARD_SIZE"}
    assert cfg.MAX_RESULTS == 50
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.MAX_BOARD_SIZE == 12


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25


def test_dictionary_dir_default():
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_DIR == cfg.BASE_DIR / "dictionaries"


def test_update_int_rejects_fractional_float():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH=3.7)
    assert "MIN_WORD_LENGTH" in errors
    assert cfg.MIN_WORD_LENGTH == 3

    errors = update_settings(cfg, MIN_WORD_LENGTH=4.0)
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 4
