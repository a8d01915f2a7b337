import pytest
from pydantic import ValidationError

from gamekit.errors import InvalidElapsedTime, NotFound
from gamekit.evaluators.type_speed import (
    TypeSpeedCheck,
    TypeSpeedEvaluator,
    TypeSpeedJson,
    score_type_speed,
)

CONTENT = "the quick brown fox jumps over the lazy dog again!"


def test_content_fixture_length():
    assert len(CONTENT) == 50


def test_partial_input_wpm_and_accuracy():
    result = score_type_speed(CONTENT, CONTENT[:45], 30)

    assert result.total_characters == 50
    assert result.correct_characters == 45
    assert result.incorrect_characters == 5
    assert result.wpm == 18
    assert result.accuracy == 90


@pytest.mark.parametrize("time_taken", [0, -5])
def test_non_positive_time_is_rejected(time_taken):
    with pytest.raises(InvalidElapsedTime):
        score_type_speed(CONTENT, CONTENT, time_taken)


@pytest.mark.parametrize(
    "user_input",
    [CONTENT, CONTENT + " extra typing past the end", "x" * 50, "T", CONTENT.upper()],
)
def test_accuracy_stays_in_bounds(user_input):
    result = score_type_speed(CONTENT, user_input, 12.5)
    assert 0 <= result.accuracy <= 100
    assert result.wpm >= 0


def test_empty_content_has_zero_accuracy():
    assert score_type_speed("", "abc", 10).accuracy == 0


@pytest.fixture
def payload():
    evaluator = TypeSpeedEvaluator()
    return evaluator.validate(
        TypeSpeedJson(
            time_limit=60,
            texts=[
                {"content": CONTENT, "difficulty": "easy"},
                {"content": "  pack my box with five dozen liquor jugs  ", "difficulty": "medium"},
                {"content": "sphinx of black quartz, judge my vow", "difficulty": "hard"},
            ],
        )
    )


def test_text_ids_are_assigned_in_order(payload):
    assert [t.id for t in payload.texts] == ["text-001", "text-002", "text-003"]
    assert payload.texts[1].content == "pack my box with five dozen liquor jugs"


def test_check_looks_up_text_by_id(payload):
    evaluator = TypeSpeedEvaluator()
    submission = TypeSpeedCheck(text_id="text-003", user_input="sphinx", time_taken=6)
    result = evaluator.check(payload, submission)
    assert result.correct_characters == 6

    with pytest.raises(NotFound):
        evaluator.check(
            payload, TypeSpeedCheck(text_id="text-009", user_input="x", time_taken=6)
        )


@pytest.mark.parametrize(
    "data",
    [
        {"text_id": "abc", "user_input": "x", "time_taken": 5},
        {"text_id": "text-001", "user_input": "", "time_taken": 5},
        {"text_id": "text-001", "user_input": "x", "time_taken": 0},
    ],
)
def test_submission_shape_is_validated(data):
    with pytest.raises(ValidationError):
        TypeSpeedCheck(**data)


def test_play_view_picks_one_text(payload):
    play = TypeSpeedEvaluator().build_play(payload)
    assert play["time_limit"] == 60
    assert play["text"]["id"] in {"text-001", "text-002", "text-003"}
