import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from .builder import build
from .models import Timeline
from .renderer import HtmlRenderer
from .utils import DEFAULT_CONFIG, DEFAULT_OUTPUT, load_config


class TimelineGenerator:
    def __init__(self, config_path: Path = DEFAULT_CONFIG, template_dir: Optional[str] = None):
        self.config = load_config(config_path)
        self.renderer = HtmlRenderer(template_dir)

    def build(self) -> Timeline:
        return build(self.config)

    def generate(self, output_path: Path = DEFAULT_OUTPUT,
                 today: Optional[datetime.date] = None) -> Timeline:
        """Builds the timeline and writes the rendered grid to `output_path`."""
        timeline = self.build()
        html = self.renderer.render(timeline, today=today)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")

        logger.info(f"Wrote {timeline.week_count} weeks to {output_path}")
        return timeline
