import datetime
from pathlib import Path
from typing import Optional

import typer

from lifeweeks.errors import BuildError
from lifeweeks.generator import TimelineGenerator
from lifeweeks.utils import DEFAULT_CONFIG, DEFAULT_OUTPUT

app = typer.Typer()


def _report_skipped(timeline):
    if timeline.skipped_count:
        typer.echo(f"⚠️  Skipped {timeline.skipped_count} event(s) outside the lifespan:", err=True)
        for event in timeline.skipped_events:
            typer.echo(f"   {event.date} {event.label}", err=True)


@app.command()
def build(
    config: Path = typer.Option(DEFAULT_CONFIG, help="Timeline YAML file"),
    output: Path = typer.Option(DEFAULT_OUTPUT, help="Where to write the rendered HTML grid"),
    today: Optional[datetime.datetime] = typer.Option(None, formats=["%Y-%m-%d"], help="Mark weeks up to this date as lived"),
    template_dir: Optional[Path] = typer.Option(None, help="Override the bundled templates"),
):
    """
    Render the life-in-weeks grid for the static site.
    """
    try:
        gen = TimelineGenerator(config_path=config, template_dir=template_dir)
        timeline = gen.generate(output_path=output, today=today.date() if today else None)
    except (BuildError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _report_skipped(timeline)
    typer.echo(f"Rendered {timeline.week_count} weeks to {output}")


@app.command()
def verify_config(config: Path = typer.Option(DEFAULT_CONFIG, help="Timeline YAML file")):
    """Load, validate and build the timeline without writing anything."""
    try:
        timeline = TimelineGenerator(config_path=config).build()
    except (BuildError, OSError) as e:
        typer.echo(f"❌ Configuration invalid: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("✅ Configuration valid!")
    typer.echo(f"{timeline.week_count} weeks from {timeline.birthday} to {timeline.end_date}.")
    markers = len(timeline.birthday_markers)
    placed = sum(len(c.events) for c in timeline.cells) - markers
    typer.echo(f"{markers} birthdays, {placed} events placed.")
    _report_skipped(timeline)


if __name__ == "__main__":
    app()
