"""
Crossword: words placed on a grid, each answered independently.

Grid integrity is checked whenever a puzzle is created or updated: every
cell shared by two words must hold the same letter.
"""

import logging
import random
import uuid
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from ..errors import GridConflict
from .base import GameEvaluator, round_half_up

logger = logging.getLogger(__name__)

Direction = Literal["horizontal", "vertical"]


# --- Models ---
class CrosswordWord(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    number: int = Field(ge=1)
    direction: Direction
    row_index: int = Field(ge=0)
    col_index: int = Field(ge=0)
    answer: str = Field(min_length=1, max_length=30)
    clue: str = Field(min_length=1, max_length=500)

    @field_validator("answer")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()

    def cells(self) -> List[Tuple[int, int, str]]:
        """(row, col, letter) for every cell the word occupies."""
        out = []
        for offset, letter in enumerate(self.answer):
            if self.direction == "vertical":
                out.append((self.row_index + offset, self.col_index, letter.upper()))
            else:
                out.append((self.row_index, self.col_index + offset, letter.upper()))
        return out


class CrosswordJson(BaseModel):
    rows: int = Field(ge=5, le=50)
    cols: int = Field(ge=5, le=50)
    words: List[CrosswordWord] = Field(min_length=1)


class CrosswordAnswer(BaseModel):
    word_id: str
    user_answer: str

    @field_validator("user_answer")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class CrosswordCheck(BaseModel):
    answers: List[CrosswordAnswer] = Field(min_length=1)


class CrosswordResultItem(BaseModel):
    word_id: str
    is_correct: bool
    error: Optional[str] = None


class CrosswordCheckResult(BaseModel):
    total_questions: int
    correct_count: int
    score: int
    results: List[CrosswordResultItem]


# --- Grid validation ---
def validate_grid_integrity(words: Sequence[CrosswordWord]) -> None:
    """Raise GridConflict on the first cell two words disagree on."""
    grid: Dict[Tuple[int, int], str] = {}
    for word in words:
        for row, col, letter in word.cells():
            existing = grid.get((row, col))
            if existing is not None and existing != letter:
                logger.warning(
                    f"Grid conflict at ({row}, {col}): '{existing}' vs '{letter}'"
                )
                raise GridConflict(row, col, existing, letter)
            grid[(row, col)] = letter


# --- Scoring ---
def score_crossword_answers(
    words: Sequence[CrosswordWord], answers: List[CrosswordAnswer]
) -> CrosswordCheckResult:
    """
    Percentage is taken over every word in the puzzle, not only the ones
    submitted, so a partial submission never reaches 100.
    """
    expected = {w.id: w.answer for w in words}
    results: List[CrosswordResultItem] = []
    correct_count = 0

    for answer in answers:
        correct_word = expected.get(answer.word_id)
        if correct_word is None:
            results.append(
                CrosswordResultItem(
                    word_id=answer.word_id, is_correct=False, error="Word ID not found"
                )
            )
            continue

        is_correct = answer.user_answer.upper() == correct_word
        if is_correct:
            correct_count += 1
        results.append(CrosswordResultItem(word_id=answer.word_id, is_correct=is_correct))

    total = len(words)
    score = round_half_up(correct_count / total * 100) if total > 0 else 0
    return CrosswordCheckResult(
        total_questions=total,
        correct_count=correct_count,
        score=score,
        results=results,
    )


# --- Evaluator ---
class CrosswordEvaluator(GameEvaluator):
    slug = "crossword"
    payload_model = CrosswordJson
    submission_model = CrosswordCheck

    def validate(self, payload: CrosswordJson) -> CrosswordJson:
        validate_grid_integrity(payload.words)
        return payload

    def build_play(
        self, payload: CrosswordJson, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        words = []
        for w in payload.words:
            item = w.model_dump(exclude={"answer"})
            item["length"] = len(w.answer)
            words.append(item)
        return {"rows": payload.rows, "cols": payload.cols, "words": words}

    def check(
        self, payload: CrosswordJson, submission: CrosswordCheck
    ) -> CrosswordCheckResult:
        return score_crossword_answers(payload.words, submission.answers)
