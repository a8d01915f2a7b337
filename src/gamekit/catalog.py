import logging
import os
from typing import Dict, List, Optional

import pandas as pd

from .models import GameTemplate

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("slug", "name")

DEFAULT_TEMPLATES = [
    {"slug": "anagram", "name": "Anagram"},
    {"slug": "crossword", "name": "Crossword"},
    {"slug": "maze-chase", "name": "Maze Chase", "is_time_limit_based": True},
    {"slug": "true-or-false", "name": "True or False", "is_time_limit_based": True},
    {"slug": "type-speed", "name": "Type Speed", "is_time_limit_based": True},
    {"slug": "find-the-match", "name": "Find the Match", "is_life_based": True},
]


class TemplateCatalog:
    """Manages loading and looking up game templates."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.templates: Dict[str, GameTemplate] = {}

    def load_all(self):
        self.templates = {}
        if os.path.exists(self.file_path):
            try:
                df = pd.read_csv(self.file_path, encoding="utf-8")
                if all(col in df.columns for col in REQUIRED_COLUMNS):
                    df = df.fillna({"description": ""}).fillna(False)
                    for record in df.to_dict("records"):
                        template = GameTemplate(**record)
                        self.templates[template.slug] = template
                    logger.info(f"Loaded {len(df)} templates from {self.file_path}")
                else:
                    logger.error(f"Skipping {self.file_path}: Missing columns.")
            except Exception as e:
                logger.error(f"Failed to load {self.file_path}: {e}")

        if not self.templates:
            logger.warning("No template file found. Loading built-in templates.")
            for record in DEFAULT_TEMPLATES:
                template = GameTemplate(**record)
                self.templates[template.slug] = template

    def get(self, slug: str) -> Optional[GameTemplate]:
        return self.templates.get(slug)

    def list_templates(self) -> List[GameTemplate]:
        return sorted(self.templates.values(), key=lambda t: t.name)
