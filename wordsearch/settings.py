import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    DICTIONARY_DIR: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 50
    MAX_BOARD_SIZE: int = 12

    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"
        self.DICTIONARY_DIR = self.BASE_DIR / "dictionaries"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        if isinstance(value, bool):
            raise ValueError("expected an integer")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError("expected an integer")
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through the settings API.
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "MAX_BOARD_SIZE": int,
    "DEBUG": bool,
}

_MINIMUMS = {
    "MIN_WORD_LENGTH": 1,
    "MAX_RESULTS": 0,
    "MAX_BOARD_SIZE": 1,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``. Returns {field: error} for every rejected key.

    Valid fields are applied even when others in the same call are rejected.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError):
            errors[name] = f"expected {EDITABLE_FIELDS[name].__name__}, got {value!r}"
            continue
        minimum = _MINIMUMS.get(name)
        if minimum is not None and coerced < minimum:
            errors[name] = f"must be >= {minimum}"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
