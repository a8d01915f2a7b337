import logging
import random
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..errors import InvalidElapsedTime, NotFound
from .base import GameEvaluator, round_half_up

logger = logging.getLogger(__name__)

# standard typing-test convention: five characters make one word
CHARS_PER_WORD = 5


# --- Models ---
class TypeSpeedText(BaseModel):
    id: Optional[str] = None
    content: str = Field(min_length=10, max_length=500)
    difficulty: Literal["easy", "medium", "hard"]

    @field_validator("content", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value


class TypeSpeedJson(BaseModel):
    time_limit: int = Field(ge=30, le=300)
    texts: List[TypeSpeedText] = Field(min_length=3, max_length=20)


class TypeSpeedCheck(BaseModel):
    text_id: str = Field(pattern=r"^text-\d{3}$")
    user_input: str = Field(min_length=1, max_length=500)
    time_taken: float = Field(ge=1, le=300)


class TypeSpeedResult(BaseModel):
    total_characters: int
    correct_characters: int
    incorrect_characters: int
    wpm: int
    accuracy: int
    time_taken: float


# --- Scoring ---
def score_type_speed(content: str, user_input: str, time_taken: float) -> TypeSpeedResult:
    """
    Compare ``user_input`` to ``content`` position by position.

    ``time_taken`` is in seconds and must be positive; zero or negative
    values raise InvalidElapsedTime instead of producing an infinite rate.
    """
    if time_taken <= 0:
        raise InvalidElapsedTime(time_taken)

    total = len(content)
    correct = sum(1 for expected, typed in zip(content, user_input) if expected == typed)
    accuracy = round_half_up(correct / total * 100) if total > 0 else 0
    wpm = round_half_up((len(user_input) / CHARS_PER_WORD) / (time_taken / 60))

    return TypeSpeedResult(
        total_characters=total,
        correct_characters=correct,
        incorrect_characters=total - correct,
        wpm=wpm,
        accuracy=accuracy,
        time_taken=time_taken,
    )


# --- Evaluator ---
class TypeSpeedEvaluator(GameEvaluator):
    slug = "type-speed"
    payload_model = TypeSpeedJson
    submission_model = TypeSpeedCheck

    def validate(self, payload: TypeSpeedJson) -> TypeSpeedJson:
        for number, text in enumerate(payload.texts, start=1):
            text.id = f"text-{number:03d}"
        return payload

    def build_play(
        self, payload: TypeSpeedJson, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        text = (rng or random).choice(payload.texts)
        return {"time_limit": payload.time_limit, "text": text.model_dump()}

    def check(self, payload: TypeSpeedJson, submission: TypeSpeedCheck) -> TypeSpeedResult:
        text = next((t for t in payload.texts if t.id == submission.text_id), None)
        if text is None:
            logger.info(f"Unknown type-speed text {submission.text_id}")
            raise NotFound("Text not found")
        return score_type_speed(text.content, submission.user_input, submission.time_taken)
