import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    DICTIONARY_COMMON_PATH: Path = field(init=False)
    PUZZLES_DIR: Path = field(init=False)

    PUZZLE_TIMEZONE: str = "America/New_York"

    MIN_VOWELS: int = 5
    MAX_VOWELS: int = 7
    MAX_HARD_CONSONANTS: int = 1
    MIN_COMMON_WORDS: int = 30
    MAX_TOTAL_WORDS: int = 100
    MAX_ATTEMPTS: int = 10_000

    NTFY_TOPIC: str = "wordgrid"
    NTFY_URL: str = "https://ntfy.sh"
    NOTIFY_ON_GENERATE: bool = False

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        # BASE_DIR first: the derived paths below hang off it
        if os.environ.get("BASE_DIR") is not None:
            self.BASE_DIR = Path(os.environ["BASE_DIR"])

        self.DICTIONARY_PATH = self.BASE_DIR / "data" / "full-dictionary.json"
        self.DICTIONARY_COMMON_PATH = self.BASE_DIR / "data" / "common-dictionary.json"
        self.PUZZLES_DIR = self.BASE_DIR / "puzzles"

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
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_VOWELS": int,
    "MAX_VOWELS": int,
    "MAX_HARD_CONSONANTS": int,
    "MIN_COMMON_WORDS": int,
    "MAX_TOTAL_WORDS": int,
    "MAX_ATTEMPTS": int,
    "NOTIFY_ON_GENERATE": bool,
    "NTFY_TOPIC": str,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values in place. Returns {field: error} for rejected ones."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        expected = EDITABLE_FIELDS[name]
        if expected is int and isinstance(value, bool):
            errors[name] = "expected int"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError):
            errors[name] = f"expected {expected.__name__}"
    return errors


settings = Settings()
