import os


class Settings:
    PROJECT_NAME: str = "gamekit"
    DEBUG: bool = os.environ.get("GAMEKIT_DEBUG", "0") == "1"
    LOG_DIR: str = os.environ.get("GAMEKIT_LOG_DIR", "log")
    LOG_FILE: str = "gamekit.log"
    DB_DIR: str = os.environ.get("GAMEKIT_DB_DIR", "db")
    DB_FILE: str = "gamekit.db"
    TEMPLATES_FILE: str = os.environ.get(
        "GAMEKIT_TEMPLATES_FILE", "data/game_templates.csv"
    )
    SUPER_ADMIN_ROLE: str = "SUPER_ADMIN"
    DEFAULT_INITIAL_LIVES: int = 3
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
