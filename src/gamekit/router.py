from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header

from .globals import game_repository, template_catalog
from .models import GameCreate, GameUpdate, LikeUpdate, Principal, PublishUpdate
from .service import GameService

router = APIRouter(prefix="/api")


# --- Dependencies ---
def get_service() -> GameService:
    return GameService(game_repository, template_catalog)


def get_principal(
    user_id: Optional[str] = Header(None, alias="X-User-Id"),
    role: Optional[str] = Header(None, alias="X-User-Role"),
) -> Optional[Principal]:
    # the auth layer in front of the service sets these headers
    if not user_id:
        return None
    return Principal(user_id=user_id, role=role or "USER")


# --- Routes ---
@router.get("/templates")
def get_templates():
    return template_catalog.list_templates()


@router.post("/game/{slug}", status_code=201)
def create_game(
    slug: str,
    data: GameCreate,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    record = service.create_game(slug, data, principal)
    return {"id": record.id}


@router.put("/game/{slug}/{game_id}")
def update_game(
    slug: str,
    game_id: str,
    data: GameUpdate,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    record = service.update_game(slug, game_id, data, principal)
    return {"id": record.id}


@router.delete("/game/{slug}/{game_id}")
def delete_game(
    slug: str,
    game_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    return service.delete_game(slug, game_id, principal)


@router.get("/game/{slug}/{game_id}")
def get_game_detail(
    slug: str,
    game_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    return service.get_detail(slug, game_id, principal)


@router.patch("/game/{slug}/{game_id}/publish")
def update_publish_status(
    slug: str,
    game_id: str,
    data: PublishUpdate,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    return service.update_publish_status(slug, game_id, data, principal)


@router.post("/game/{slug}/{game_id}/like")
def update_like(
    slug: str,
    game_id: str,
    data: LikeUpdate,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    return service.update_like(slug, game_id, data, principal)


@router.get("/game/{slug}/{game_id}/play/public")
def get_public_play(
    slug: str, game_id: str, service: GameService = Depends(get_service)
):
    return service.get_play(slug, game_id, is_public=True)


@router.get("/game/{slug}/{game_id}/play/private")
def get_private_play(
    slug: str,
    game_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: GameService = Depends(get_service),
):
    return service.get_play(slug, game_id, is_public=False, principal=principal)


@router.post("/game/{slug}/{game_id}/check")
def check_answer(
    slug: str,
    game_id: str,
    data: Dict[str, Any] = Body(...),
    service: GameService = Depends(get_service),
):
    result = service.check_answer(slug, game_id, data)
    return result.model_dump(exclude_none=True)
