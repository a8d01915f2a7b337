import json
import logging
import os
import sqlite3
from datetime import datetime
from typing import Optional

from .config import settings
from .errors import InvalidGameData
from .models import GameRecord

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, name, description, thumbnail_image, template_slug, creator_id, "
    "is_published, game_json, total_played, created_at"
)


def get_db_connection():
    """Establishes a connection to the SQLite database."""
    db_path = os.path.join(settings.DB_DIR, settings.DB_FILE)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def create_tables():
    """Creates the games and likes tables if they don't exist."""
    conn = get_db_connection()
    try:
        with conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS games (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL UNIQUE,
                    description TEXT DEFAULT '',
                    thumbnail_image TEXT DEFAULT '',
                    template_slug TEXT NOT NULL,
                    creator_id TEXT NOT NULL,
                    is_published INTEGER DEFAULT 0,
                    game_json TEXT NOT NULL,
                    total_played INTEGER DEFAULT 0,
                    created_at TEXT NOT NULL
                );
            """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS game_likes (
                    game_id TEXT NOT NULL REFERENCES games(id) ON DELETE CASCADE,
                    user_id TEXT NOT NULL,
                    PRIMARY KEY (game_id, user_id)
                );
            """
            )
    finally:
        conn.close()


def init_db():
    """Initializes the database and creates necessary tables."""
    if not os.path.exists(settings.DB_DIR):
        os.makedirs(settings.DB_DIR)
    create_tables()


def _to_record(row: sqlite3.Row) -> GameRecord:
    return GameRecord(
        id=row["id"],
        name=row["name"],
        description=row["description"] or "",
        thumbnail_image=row["thumbnail_image"] or "",
        template_slug=row["template_slug"],
        creator_id=row["creator_id"],
        is_published=bool(row["is_published"]),
        game_json=json.loads(row["game_json"]),
        total_played=row["total_played"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class GameRepository:
    """Stores game records; the payload is kept as an opaque JSON string."""

    def get(self, game_id: str) -> Optional[GameRecord]:
        conn = get_db_connection()
        try:
            row = conn.execute("SELECT * FROM games WHERE id = ?", (game_id,)).fetchone()
        finally:
            conn.close()
        return _to_record(row) if row else None

    def find_by_name(self, name: str) -> Optional[GameRecord]:
        conn = get_db_connection()
        try:
            row = conn.execute("SELECT * FROM games WHERE name = ?", (name,)).fetchone()
        finally:
            conn.close()
        return _to_record(row) if row else None

    def create(self, record: GameRecord) -> GameRecord:
        conn = get_db_connection()
        try:
            with conn:
                conn.execute(
                    f"INSERT INTO games ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        record.id,
                        record.name,
                        record.description,
                        record.thumbnail_image,
                        record.template_slug,
                        record.creator_id,
                        int(record.is_published),
                        json.dumps(record.game_json),
                        record.total_played,
                        record.created_at.isoformat(),
                    ),
                )
        except sqlite3.IntegrityError as e:
            logger.info(f"Rejected game {record.id}: {e}")
            raise InvalidGameData("Game name is already used") from e
        finally:
            conn.close()
        logger.debug(f"Created game {record.id} ({record.template_slug})")
        return record

    def update(self, record: GameRecord) -> GameRecord:
        conn = get_db_connection()
        try:
            with conn:
                conn.execute(
                    """
                    UPDATE games SET name = ?, description = ?, thumbnail_image = ?,
                        is_published = ?, game_json = ?
                    WHERE id = ?
                """,
                    (
                        record.name,
                        record.description,
                        record.thumbnail_image,
                        int(record.is_published),
                        json.dumps(record.game_json),
                        record.id,
                    ),
                )
        except sqlite3.IntegrityError as e:
            logger.info(f"Rejected update of game {record.id}: {e}")
            raise InvalidGameData("Game name is already used") from e
        finally:
            conn.close()
        logger.debug(f"Updated game {record.id}")
        return record

    def delete(self, game_id: str) -> None:
        conn = get_db_connection()
        try:
            with conn:
                conn.execute("DELETE FROM game_likes WHERE game_id = ?", (game_id,))
                conn.execute("DELETE FROM games WHERE id = ?", (game_id,))
        finally:
            conn.close()

    def increment_played(self, game_id: str) -> None:
        conn = get_db_connection()
        try:
            with conn:
                conn.execute(
                    "UPDATE games SET total_played = total_played + 1 WHERE id = ?",
                    (game_id,),
                )
        finally:
            conn.close()

    # --- Likes ---
    def has_liked(self, game_id: str, user_id: str) -> bool:
        conn = get_db_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM game_likes WHERE game_id = ? AND user_id = ?",
                (game_id, user_id),
            ).fetchone()
        finally:
            conn.close()
        return row is not None

    def count_likes(self, game_id: str) -> int:
        conn = get_db_connection()
        try:
            row = conn.execute(
                "SELECT COUNT(*) FROM game_likes WHERE game_id = ?", (game_id,)
            ).fetchone()
        finally:
            conn.close()
        return row[0]

    def add_like(self, game_id: str, user_id: str) -> bool:
        """Returns False when the user had already liked the game."""
        conn = get_db_connection()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO game_likes (game_id, user_id) VALUES (?, ?)",
                    (game_id, user_id),
                )
        except sqlite3.IntegrityError:
            return False
        finally:
            conn.close()
        return True

    def remove_like(self, game_id: str, user_id: str) -> bool:
        """Returns False when there was no like to remove."""
        conn = get_db_connection()
        try:
            with conn:
                cursor = conn.execute(
                    "DELETE FROM game_likes WHERE game_id = ? AND user_id = ?",
                    (game_id, user_id),
                )
        finally:
            conn.close()
        return cursor.rowcount > 0
