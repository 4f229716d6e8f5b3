"""Shared fixtures for the timeline tests."""

import pytest
import yaml


@pytest.fixture
def one_year_config():
    """Scenario from the docs: one year of life, a single decade style, no events."""
    return {
        "birthday": "2000-01-01",
        "lifespan_years": 1,
        "events": [],
        "decades": [{"label": "Y0", "fill": "#fff", "border": "#000"}],
    }


@pytest.fixture
def two_decades():
    return [
        {"label": "first", "fill": "#ffeeee", "border": "#aa0000"},
        {"label": "second", "fill": "#eeffee", "border": "#00aa00"},
    ]


@pytest.fixture
def write_config(tmp_path):
    """Writes a config mapping to a YAML file and returns its path."""

    def _write(data, name="life.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        return path

    return _write
