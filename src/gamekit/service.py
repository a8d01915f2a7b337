"""
Game lifecycle around the evaluators: create, update, publish, like, delete,
play and check.

Access rules:
  - mutations and private play need the game's creator or the super admin role
  - public play needs the game to be published
  - likes need a signed-in user and a published game
  - check-answer only needs the game to exist under the requested template
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel

from .catalog import TemplateCatalog
from .config import settings
from .database import GameRepository
from .errors import Forbidden, InvalidGameData, NotFound, Unauthorized
from .evaluators import EvaluatorFactory
from .models import GameCreate, GameRecord, GameUpdate, LikeUpdate, Principal, PublishUpdate

logger = logging.getLogger(__name__)


def can_manage(record: GameRecord, principal: Optional[Principal]) -> bool:
    if principal is None:
        return False
    return principal.role == settings.SUPER_ADMIN_ROLE or record.creator_id == principal.user_id


class GameService:
    def __init__(self, repository: GameRepository, catalog: TemplateCatalog):
        self.repository = repository
        self.catalog = catalog

    # --- Helpers ---
    def _get_game(self, slug: str, game_id: str) -> GameRecord:
        record = self.repository.get(game_id)
        if record is None or record.template_slug != slug:
            raise NotFound("Game not found")
        return record

    def _require_manager(self, record: GameRecord, principal: Optional[Principal]):
        if principal is None:
            raise Unauthorized("Authentication required")
        if not can_manage(record, principal):
            raise Forbidden("User cannot modify this game")

    def _ensure_unique_name(self, name: str, game_id: Optional[str] = None):
        existing = self.repository.find_by_name(name)
        if existing and existing.id != game_id:
            raise InvalidGameData("Game name is already used")

    def _prepare_payload(self, slug: str, game_json: Dict[str, Any]) -> Dict[str, Any]:
        evaluator = EvaluatorFactory.create(slug)
        payload = evaluator.validate(evaluator.parse_payload(game_json))
        return payload.model_dump()

    # --- Lifecycle ---
    def create_game(self, slug: str, data: GameCreate, principal: Optional[Principal]) -> GameRecord:
        if principal is None:
            raise Unauthorized("Authentication required")
        if self.catalog.get(slug) is None:
            raise NotFound(f"Game template '{slug}' not found")
        self._ensure_unique_name(data.name)

        record = GameRecord(
            id=str(uuid.uuid4()),
            name=data.name,
            description=data.description,
            thumbnail_image=data.thumbnail_image,
            template_slug=slug,
            creator_id=principal.user_id,
            is_published=data.is_publish_immediately,
            game_json=self._prepare_payload(slug, data.game_json),
            created_at=datetime.now(),
        )
        self.repository.create(record)
        logger.info(f"Created {slug} game {record.id} for user {principal.user_id}")
        return record

    def update_game(
        self, slug: str, game_id: str, data: GameUpdate, principal: Optional[Principal]
    ) -> GameRecord:
        record = self._get_game(slug, game_id)
        self._require_manager(record, principal)

        changes: Dict[str, Any] = {}
        if data.name is not None and data.name != record.name:
            self._ensure_unique_name(data.name, game_id)
            changes["name"] = data.name
        if data.description is not None:
            changes["description"] = data.description
        if data.thumbnail_image is not None:
            changes["thumbnail_image"] = data.thumbnail_image
        if data.is_publish is not None:
            changes["is_published"] = data.is_publish
        if data.game_json is not None:
            changes["game_json"] = self._prepare_payload(slug, data.game_json)

        updated = record.model_copy(update=changes)
        self.repository.update(updated)
        logger.info(f"Updated {slug} game {game_id}")
        return updated

    def delete_game(self, slug: str, game_id: str, principal: Optional[Principal]) -> Dict[str, str]:
        record = self._get_game(slug, game_id)
        self._require_manager(record, principal)
        self.repository.delete(game_id)
        logger.info(f"Deleted {slug} game {game_id}")
        return {"id": game_id}

    def get_detail(self, slug: str, game_id: str, principal: Optional[Principal]) -> Dict[str, Any]:
        """Full record including the answer-bearing payload, for the editor."""
        record = self._get_game(slug, game_id)
        self._require_manager(record, principal)
        return {
            **record.model_dump(),
            "total_liked": self.repository.count_likes(game_id),
            "is_game_liked": self.repository.has_liked(game_id, principal.user_id),
        }

    def update_publish_status(
        self, slug: str, game_id: str, data: PublishUpdate, principal: Optional[Principal]
    ) -> Dict[str, Any]:
        record = self._get_game(slug, game_id)
        self._require_manager(record, principal)
        self.repository.update(record.model_copy(update={"is_published": data.is_publish}))
        logger.info(f"Set {slug} game {game_id} published={data.is_publish}")
        return {"id": game_id, "is_published": data.is_publish}

    def update_like(
        self, slug: str, game_id: str, data: LikeUpdate, principal: Optional[Principal]
    ) -> Dict[str, Any]:
        if principal is None:
            raise Unauthorized("Authentication required")
        record = self._get_game(slug, game_id)
        if not record.is_published:
            raise NotFound("Game not found")

        if data.is_like:
            if not self.repository.add_like(game_id, principal.user_id):
                raise InvalidGameData("User already liked this game")
        elif not self.repository.remove_like(game_id, principal.user_id):
            raise InvalidGameData("User did not like this game")

        return {
            "id": game_id,
            "is_game_liked": data.is_like,
            "total_liked": self.repository.count_likes(game_id),
        }

    # --- Play ---
    def get_play(
        self, slug: str, game_id: str, is_public: bool, principal: Optional[Principal] = None
    ) -> Dict[str, Any]:
        record = self._get_game(slug, game_id)
        if is_public and not record.is_published:
            raise NotFound("Game not found")
        if not is_public:
            self._require_manager(record, principal)

        evaluator = EvaluatorFactory.create(slug)
        play = evaluator.build_play(evaluator.parse_payload(record.game_json))
        return {
            "id": record.id,
            "name": record.name,
            "description": record.description,
            "thumbnail_image": record.thumbnail_image,
            "is_published": record.is_published,
            "total_liked": self.repository.count_likes(game_id),
            **play,
        }

    def check_answer(self, slug: str, game_id: str, data: Dict[str, Any]) -> BaseModel:
        record = self._get_game(slug, game_id)
        evaluator = EvaluatorFactory.create(slug)
        submission = evaluator.parse_submission(data)
        result = evaluator.check(evaluator.parse_payload(record.game_json), submission)
        self.repository.increment_played(game_id)
        return result
