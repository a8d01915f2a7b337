import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..config import settings
from ..shuffle import shuffle_array
from .base import GameEvaluator

logger = logging.getLogger(__name__)


# --- Models ---
class FindTheMatchItem(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class FindTheMatchJson(BaseModel):
    initial_lives: int = Field(default=settings.DEFAULT_INITIAL_LIVES, ge=1)
    items: List[FindTheMatchItem] = Field(min_length=1)


class FindTheMatchCheck(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    remaining_answers: Optional[List[str]] = None
    current_lives: Optional[int] = Field(default=None, ge=0)


class FindTheMatchResult(BaseModel):
    is_correct: bool
    new_remaining_answers: List[str]
    new_lives: int
    is_game_over: bool


# --- Scoring ---
def evaluate_find_the_match(
    payload: FindTheMatchJson, submission: FindTheMatchCheck
) -> FindTheMatchResult:
    """
    One turn of the game. Lives and remaining answers are whatever the
    client reports from its previous turn; nothing is kept between calls.
    """
    lives = (
        submission.current_lives
        if submission.current_lives is not None
        else payload.initial_lives
    )
    remaining = list(submission.remaining_answers or [])

    matched = any(
        item.question == submission.question and item.answer == submission.answer
        for item in payload.items
    )

    if matched:
        remaining = [a for a in remaining if a != submission.answer]
        return FindTheMatchResult(
            is_correct=True,
            new_remaining_answers=remaining,
            new_lives=lives,
            is_game_over=False,
        )

    lives = max(lives - 1, 0)
    if lives == 0:
        logger.debug(f"Find-the-match game over after '{submission.question}'")
    return FindTheMatchResult(
        is_correct=False,
        new_remaining_answers=remaining,
        new_lives=lives,
        is_game_over=lives <= 0,
    )


# --- Evaluator ---
class FindTheMatchEvaluator(GameEvaluator):
    slug = "find-the-match"
    payload_model = FindTheMatchJson
    submission_model = FindTheMatchCheck

    def build_play(
        self, payload: FindTheMatchJson, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        return {
            "initial_lives": payload.initial_lives,
            "questions": [item.question for item in payload.items],
            "answers": shuffle_array([item.answer for item in payload.items], rng),
        }

    def check(
        self, payload: FindTheMatchJson, submission: FindTheMatchCheck
    ) -> FindTheMatchResult:
        return evaluate_find_the_match(payload, submission)
