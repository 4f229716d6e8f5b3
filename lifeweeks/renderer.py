import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape

from .errors import RenderError
from .models import Timeline, WeekCell

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "life_in_weeks.html"


def cell_tooltip(cell: WeekCell) -> str:
    """Hover text for a cell: the week's dates, then one line per event."""
    last_day = cell.end_date - datetime.timedelta(days=1)
    lines = [f"Week {cell.week_index + 1}: {cell.start_date} to {last_day}"]
    for event in cell.events:
        if event.description:
            lines.append(f"{event.label} ({event.date}): {event.description}")
        else:
            lines.append(f"{event.label} ({event.date})")
    return "\n".join(lines)


class HtmlRenderer:
    def __init__(self, template_dir: Optional[str] = None):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["tooltip"] = cell_tooltip

    def render(self, timeline: Timeline, template_name: str = DEFAULT_TEMPLATE,
               today: Optional[datetime.date] = None) -> str:
        # legend keeps first-seen order of the decade bands actually used
        legend = []
        for cell in timeline.cells:
            if cell.decade_style not in legend:
                legend.append(cell.decade_style)

        try:
            template = self.env.get_template(template_name)
            return template.render(timeline=timeline, legend=legend, today=today)
        except TemplateNotFound as e:
            raise RenderError(f"Template {e.name!r} not found in {self.env.loader.searchpath}") from e
        except TemplateError as e:
            raise RenderError(f"Could not render {template_name}: {e}") from e
