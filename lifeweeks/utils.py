import calendar
import datetime
from pathlib import Path
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import InvalidConfig
from .models import TimelineConfig

CONFIG_DIR = Path("config")
DEFAULT_CONFIG = CONFIG_DIR / "life.yaml"
DEFAULT_OUTPUT = Path("_includes") / "life-in-weeks.html"


def parse_config(data: Any) -> TimelineConfig:
    """Validates a raw mapping (as read from YAML) into a TimelineConfig."""
    if isinstance(data, TimelineConfig):
        return data
    if not isinstance(data, Mapping):
        raise InvalidConfig(f"Expected a mapping at the top level, got {type(data).__name__}")
    try:
        return TimelineConfig(**data)
    except ValidationError as e:
        raise InvalidConfig(_describe(e)) from e


def load_config(path: Path = DEFAULT_CONFIG) -> TimelineConfig:
    """Loads the timeline configuration from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Timeline config file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        # impossible native dates such as 1990-02-30 surface as ValueError
        except (yaml.YAMLError, ValueError) as e:
            raise InvalidConfig(f"Could not parse {path}: {e}") from e

    return parse_config(data)


def add_years(day: datetime.date, years: int) -> datetime.date:
    """Anniversary of `day` after `years` years; 29 Feb maps to 28 Feb in non-leap years."""
    year = day.year + years
    if day.month == 2 and day.day == 29 and not calendar.isleap(year):
        return day.replace(year=year, day=28)
    return day.replace(year=year)


def elapsed_years(birthday: datetime.date, day: datetime.date) -> int:
    """Whole years completed between `birthday` and `day`."""
    years = day.year - birthday.year
    if add_years(birthday, years) > day:
        years -= 1
    return years


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "Invalid timeline config: " + "; ".join(parts)
