"""
Timeline builder: turns a TimelineConfig into the week grid.

The grid starts on the birthday and is cut into 7-day windows up to the end
of the lifespan. The last window is truncated so the grid covers exactly
[birthday, birthday + lifespan_years). Each window gets the style of the
decade of life its first day falls in, the user events dated inside it and
the birthday markers for years completed inside it.
"""

import datetime
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence, Union

from loguru import logger

from .errors import EmptyDecadeStyles
from .models import BirthdayMarker, DecadeStyle, Event, Timeline, TimelineConfig, WeekCell
from .utils import add_years, elapsed_years, parse_config

DAYS_PER_WEEK = 7
YEARS_PER_DECADE = 10
BIRTHDAY_LABEL = "🎂 {years}"


def resolve_decade_style(decades: Sequence[DecadeStyle], years: int) -> DecadeStyle:
    """Style for a week `years` into life; the last style repeats past the end of the list."""
    if not decades:
        raise EmptyDecadeStyles("At least one decade style is required to render the timeline")
    index = min(years // YEARS_PER_DECADE, len(decades) - 1)
    return decades[index]


def birthday_markers(birthday: datetime.date, lifespan_years: int) -> List[BirthdayMarker]:
    markers = []
    for years in range(1, lifespan_years + 1):
        markers.append(BirthdayMarker(
            date=add_years(birthday, years),
            label=BIRTHDAY_LABEL.format(years=years),
            description=f"Completed {years} {'year' if years == 1 else 'years'} of life",
            years=years,
        ))
    return markers


def build(config: Union[TimelineConfig, Mapping[str, Any]]) -> Timeline:
    """
    Builds the week grid for a configuration.

    Args:
        config: a TimelineConfig, or a raw mapping as read from the YAML file.

    Returns:
        Timeline with one WeekCell per week, ordered by week_index, plus the
        user events that fell outside the lifespan. Every birthday marker sits
        in the cell that contains its date, except the last one: it falls on
        the exclusive end of the span, so it is placed in the final cell even
        though that cell's contains() is False for its date.

    Raises:
        InvalidConfig: the raw mapping does not validate.
        EmptyDecadeStyles: no decade styles are configured.
    """
    config = parse_config(config)

    birthday = config.birthday
    end_date = add_years(birthday, config.lifespan_years)
    total_days = (end_date - birthday).days
    week_count = -(-total_days // DAYS_PER_WEEK)
    logger.debug(f"Building {week_count} weeks from {birthday} to {end_date}")

    buckets: Dict[int, List[Event]] = {}
    marker_weeks = set()

    # The last anniversary is the end of the span itself; it belongs to the final week.
    for marker in birthday_markers(birthday, config.lifespan_years):
        week = min((marker.date - birthday).days // DAYS_PER_WEEK, week_count - 1)
        buckets.setdefault(week, []).append(marker)
        marker_weeks.add(week)

    skipped = []
    for event in config.events:
        if not birthday <= event.date < end_date:
            skipped.append(event)
            continue
        week = (event.date - birthday).days // DAYS_PER_WEEK
        buckets.setdefault(week, []).append(event)

    cells = []
    for week in range(week_count):
        start = birthday + datetime.timedelta(days=week * DAYS_PER_WEEK)
        end = min(start + datetime.timedelta(days=DAYS_PER_WEEK), end_date)
        cells.append(WeekCell(
            week_index=week,
            start_date=start,
            end_date=end,
            decade_style=resolve_decade_style(config.decades, elapsed_years(birthday, start)),
            events=sorted(buckets.get(week, []), key=lambda e: e.date),
            is_birthday_marker=week in marker_weeks,
        ))

    if skipped:
        logger.warning(
            f"Skipped {len(skipped)} event(s) outside {birthday} .. {end_date}: "
            + ", ".join(f"{e.date} {e.label}" for e in skipped)
        )

    return Timeline(birthday=birthday, end_date=end_date, cells=cells, skipped_events=skipped)
