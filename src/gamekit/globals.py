from .catalog import TemplateCatalog
from .config import settings
from .database import GameRepository

template_catalog = TemplateCatalog(settings.TEMPLATES_FILE)
game_repository = GameRepository()
