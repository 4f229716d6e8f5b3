"""Tests for loading the YAML config and the date helpers."""

import datetime
from pathlib import Path

import pytest

from lifeweeks.errors import InvalidConfig
from lifeweeks.utils import add_years, elapsed_years, load_config, parse_config

REPO_ROOT = Path(__file__).resolve().parent.parent


def test_load_config(write_config, one_year_config):
    one_year_config["events"] = [
        {"date": "2000-05-04", "label": "⚔", "description": "May the fourth"},
        {"date": "2000-07-01", "label": "summer"},
    ]
    config = load_config(write_config(one_year_config))

    assert config.birthday == datetime.date(2000, 1, 1)
    assert config.lifespan_years == 1
    assert config.events[0].label == "⚔"
    assert config.events[0].description == "May the fourth"
    assert config.events[1].description is None
    assert config.decades[0].fill == "#fff"


def test_load_config_with_native_yaml_dates(tmp_path):
    path = tmp_path / "life.yaml"
    path.write_text(
        "birthday: 1990-03-14\n"
        "lifespan_years: 3\n"
        "events:\n"
        "  - date: 1991-01-01\n"
        "    label: x\n"
        "decades:\n"
        "  - {label: a, fill: '#123456', border: '#abcdef'}\n",
        encoding="utf-8",
    )
    config = load_config(path)

    assert config.birthday == datetime.date(1990, 3, 14)
    assert config.events[0].date == datetime.date(1991, 1, 1)


def test_bundled_config_is_valid():
    config = load_config(REPO_ROOT / "config" / "life.yaml")

    assert config.lifespan_years > 0
    assert config.decades


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unparseable_yaml(tmp_path):
    path = tmp_path / "life.yaml"
    path.write_text("birthday: [2000-01-01\n", encoding="utf-8")

    with pytest.raises(InvalidConfig):
        load_config(path)


@pytest.mark.parametrize("data", [None, [], "birthday"])
def test_top_level_must_be_a_mapping(data):
    with pytest.raises(InvalidConfig):
        parse_config(data)


def test_validation_errors_name_the_field(one_year_config):
    one_year_config["events"] = [{"date": "2000-02-30", "label": "x"}]

    with pytest.raises(InvalidConfig, match="events.0.date"):
        parse_config(one_year_config)


def test_add_years():
    assert add_years(datetime.date(2000, 1, 1), 1) == datetime.date(2001, 1, 1)
    assert add_years(datetime.date(2000, 2, 29), 4) == datetime.date(2004, 2, 29)
    assert add_years(datetime.date(2000, 2, 29), 1) == datetime.date(2001, 2, 28)


def test_elapsed_years():
    birthday = datetime.date(2000, 1, 1)
    assert elapsed_years(birthday, birthday) == 0
    assert elapsed_years(birthday, datetime.date(2009, 12, 31)) == 9
    assert elapsed_years(birthday, datetime.date(2010, 1, 1)) == 10

    leap = datetime.date(2000, 2, 29)
    assert elapsed_years(leap, datetime.date(2001, 2, 27)) == 0
    assert elapsed_years(leap, datetime.date(2001, 2, 28)) == 1


@pytest.mark.parametrize("body", [
    "birthday: 1990-02-30\nlifespan_years: 3\ndecades: [{label: a, fill: '#000', border: '#fff'}]\n",
    "birthday: 1990-03-14\nlifespan_years: 3\n"
    "events:\n  - date: 1991-13-01\n    label: x\n"
    "decades: [{label: a, fill: '#000', border: '#fff'}]\n",
])
def test_impossible_native_yaml_date_is_invalid(tmp_path, body):
    """Unquoted dates are built by PyYAML itself, before any model validation runs."""
    path = tmp_path / "life.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(InvalidConfig):
        load_config(path)


def test_numeric_labels_are_read_as_text(tmp_path):
    path = tmp_path / "life.yaml"
    path.write_text(
        "birthday: 1990-03-14\n"
        "lifespan_years: 40\n"
        "events:\n"
        "  - date: 2020-01-01\n"
        "    label: 2020\n"
        "    description: 42\n"
        "decades:\n"
        "  - {label: 1990, fill: '#123456', border: '#abcdef'}\n",
        encoding="utf-8",
    )
    config = load_config(path)

    assert config.events[0].label == "2020"
    assert config.events[0].description == "42"
    assert config.decades[0].label == "1990"


def test_add_years_past_the_calendar_is_not_masked():
    with pytest.raises(ValueError):
        add_years(datetime.date(2000, 3, 1), 9000)
    with pytest.raises(ValueError):
        add_years(datetime.date(2000, 2, 29), 9000)
