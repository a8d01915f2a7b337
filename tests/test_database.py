from datetime import datetime

import pytest

from gamekit.config import settings
from gamekit.database import GameRepository, init_db
from gamekit.errors import InvalidGameData
from gamekit.models import GameRecord


@pytest.fixture
def repository(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_DIR", str(tmp_path / "db"))
    init_db()
    return GameRepository()


def make_record(game_id, name="Quiz", **overrides):
    fields = dict(
        id=game_id,
        name=name,
        template_slug="true-or-false",
        creator_id="user-1",
        game_json={"questions": []},
        created_at=datetime(2024, 1, 1, 12, 0),
    )
    fields.update(overrides)
    return GameRecord(**fields)


def test_create_then_get(repository):
    repository.create(make_record("g1", description="first"))
    record = repository.get("g1")
    assert record.name == "Quiz"
    assert record.description == "first"
    assert record.created_at == datetime(2024, 1, 1, 12, 0)


def test_duplicate_name_keeps_existing_game(repository):
    repository.create(make_record("g1"))
    with pytest.raises(InvalidGameData, match="already used"):
        repository.create(make_record("g2"))
    assert repository.get("g1") is not None
    assert repository.get("g2") is None


def test_duplicate_id_is_rejected(repository):
    repository.create(make_record("g1"))
    with pytest.raises(InvalidGameData):
        repository.create(make_record("g1", name="Other"))
    assert repository.get("g1").name == "Quiz"


def test_update_rename_onto_taken_name_changes_nothing(repository):
    repository.create(make_record("g1", name="First"))
    repository.create(make_record("g2", name="Second"))
    with pytest.raises(InvalidGameData):
        repository.update(repository.get("g2").model_copy(update={"name": "First"}))
    assert repository.get("g1").name == "First"
    assert repository.get("g2").name == "Second"


def test_update_keeps_play_count_and_creator(repository):
    repository.create(make_record("g1"))
    repository.increment_played("g1")
    stale = make_record("g1", name="Renamed", creator_id="someone-else", is_published=True)
    repository.update(stale)
    record = repository.get("g1")
    assert record.name == "Renamed"
    assert record.is_published
    assert record.total_played == 1
    assert record.creator_id == "user-1"


def test_likes_are_unique_per_user(repository):
    repository.create(make_record("g1"))
    assert repository.add_like("g1", "user-2")
    assert not repository.add_like("g1", "user-2")
    assert repository.add_like("g1", "user-3")
    assert repository.count_likes("g1") == 2
    assert repository.has_liked("g1", "user-2")

    assert repository.remove_like("g1", "user-2")
    assert not repository.remove_like("g1", "user-2")
    assert repository.count_likes("g1") == 1


def test_delete_drops_likes(repository):
    repository.create(make_record("g1"))
    repository.add_like("g1", "user-2")
    repository.delete("g1")
    assert repository.get("g1") is None
    assert repository.count_likes("g1") == 0
