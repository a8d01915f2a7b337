"""
Anagram: the player rebuilds a word from shuffled letters.

Scoring per question, first matching rule wins:
  1. exact guess, no hints        -> 2 points per letter
  2. no hints, guess not exact    -> 1 point per letter in the right position
  3. hints used                   -> 1 point per letter not revealed by a hint
  4. anything else                -> 0

Letter counts ignore whitespace; ``is_hinted`` has one flag per letter.
"""

import logging
import math
import random
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..errors import HintLengthMismatch
from ..shuffle import shuffle_array, shuffle_word
from .base import GameEvaluator, round_half_up

logger = logging.getLogger(__name__)


# --- Models ---
class AnagramQuestion(BaseModel):
    question_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    correct_word: str = Field(min_length=2, max_length=50)
    image_url: str = ""

    @field_validator("correct_word", mode="before")
    @classmethod
    def _upper(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class AnagramJson(BaseModel):
    score_per_question: int = 1
    is_question_randomized: bool = False
    questions: List[AnagramQuestion] = Field(min_length=1, max_length=20)


class AnagramAnswer(BaseModel):
    question_id: str
    guessed_word: str = Field(max_length=50)
    is_hinted: Optional[List[bool]] = None

    @field_validator("guessed_word", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value


class AnagramCheck(BaseModel):
    answers: List[AnagramAnswer] = Field(min_length=1)


class AnagramScore(BaseModel):
    score: int
    is_correct: bool


class AnagramResultItem(BaseModel):
    question_id: str
    guessed_word: str
    is_correct: bool
    score: int
    correct_word: str


class AnagramCheckResult(BaseModel):
    total_questions: int
    score: int
    max_score: int
    percentage: float
    results: List[AnagramResultItem]


# --- Scoring ---
def letter_count(word: str) -> int:
    return len("".join(word.split()))


def score_anagram_answer(
    correct_word: str,
    guessed_word: str,
    is_hinted: Optional[List[bool]] = None,
    question_id: str = "",
) -> AnagramScore:
    """
    Score a single guess. Raises HintLengthMismatch when a non-empty hint
    mask does not have one flag per letter of ``correct_word``.
    """
    hints = is_hinted or []
    letters = letter_count(correct_word)

    if hints and len(hints) != letters:
        raise HintLengthMismatch(question_id, letters, len(hints))

    guess = guessed_word.upper()
    hint_count = sum(1 for flag in hints if flag)
    exact = guess == correct_word

    if exact and hint_count == 0:
        score = letters * 2
    elif hint_count == 0:
        bound = min(letters, len(guess), len(correct_word))
        score = sum(1 for i in range(bound) if guess[i] == correct_word[i])
    elif hint_count > 0:
        score = letters - hint_count
    else:
        score = 0

    return AnagramScore(score=score, is_correct=exact)


def score_anagram_answers(
    payload: AnagramJson, answers: List[AnagramAnswer]
) -> AnagramCheckResult:
    words = {q.question_id: q.correct_word for q in payload.questions}
    max_score = sum(letter_count(q.correct_word) * 2 for q in payload.questions)

    results: List[AnagramResultItem] = []
    total = 0
    for answer in answers:
        correct_word = words.get(answer.question_id)
        if correct_word is None:
            logger.debug(f"Skipping unknown anagram question {answer.question_id}")
            continue

        scored = score_anagram_answer(
            correct_word, answer.guessed_word, answer.is_hinted, answer.question_id
        )
        total += scored.score
        results.append(
            AnagramResultItem(
                question_id=answer.question_id,
                guessed_word=answer.guessed_word,
                is_correct=scored.is_correct,
                score=scored.score,
                correct_word=correct_word,
            )
        )

    percentage = round_half_up(total / max_score * 100, 2) if max_score > 0 else 0
    return AnagramCheckResult(
        total_questions=len(payload.questions),
        score=total,
        max_score=max_score,
        percentage=percentage,
        results=results,
    )


# --- Evaluator ---
class AnagramEvaluator(GameEvaluator):
    slug = "anagram"
    payload_model = AnagramJson
    submission_model = AnagramCheck

    def build_play(
        self, payload: AnagramJson, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        questions = payload.questions
        if payload.is_question_randomized:
            questions = shuffle_array(questions, rng)

        return {
            "questions": [
                {
                    "question_id": q.question_id,
                    "image_url": q.image_url,
                    "shuffled_letters": shuffle_word(q.correct_word, rng),
                    # one hint per started block of five letters
                    "hint_limit": math.ceil(letter_count(q.correct_word) / 5),
                    "correct_word": q.correct_word,
                }
                for q in questions
            ]
        }

    def check(self, payload: AnagramJson, submission: AnagramCheck) -> AnagramCheckResult:
        return score_anagram_answers(payload, submission.answers)
