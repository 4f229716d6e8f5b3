import re
import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Event(BaseModel):
    # YAML reads bare labels like 2020 as numbers
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    date: datetime.date
    label: str = Field(min_length=1)
    description: Optional[str] = None  # hover/detail text only

    @field_validator("label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("label must not be blank")
        return v

    @property
    def is_birthday_marker(self) -> bool:
        return False


class BirthdayMarker(Event):
    """Generated event for a completed year of life."""

    years: int

    @property
    def is_birthday_marker(self) -> bool:
        return True


class DecadeStyle(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    label: str
    fill: str
    border: str

    @field_validator("fill", "border")
    @classmethod
    def hex_color(cls, v: str) -> str:
        if not HEX_COLOR.match(v):
            raise ValueError(f"expected a hex color like #RRGGBB, got {v!r}")
        return v


class TimelineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    birthday: datetime.date
    lifespan_years: int = Field(gt=0)
    events: List[Event] = []
    decades: List[DecadeStyle] = []

    @model_validator(mode="after")
    def lifespan_fits_calendar(self):
        if self.birthday.year + self.lifespan_years >= datetime.MAXYEAR:
            raise ValueError(
                f"lifespan_years {self.lifespan_years} runs past year {datetime.MAXYEAR - 1}"
            )
        return self


class WeekCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_index: int
    start_date: datetime.date
    end_date: datetime.date  # exclusive
    decade_style: DecadeStyle
    events: List[Event] = []
    is_birthday_marker: bool = False

    def contains(self, day: datetime.date) -> bool:
        return self.start_date <= day < self.end_date


class Timeline(BaseModel):
    model_config = ConfigDict(frozen=True)

    birthday: datetime.date
    end_date: datetime.date  # exclusive
    cells: List[WeekCell]
    skipped_events: List[Event] = []

    @property
    def week_count(self) -> int:
        return len(self.cells)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_events)

    @property
    def birthday_markers(self) -> List[BirthdayMarker]:
        return [e for cell in self.cells for e in cell.events if e.is_birthday_marker]
