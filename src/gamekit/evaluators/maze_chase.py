import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import InvalidGameData
from ..shuffle import shuffle_array
from .base import GameEvaluator, round_half_up

logger = logging.getLogger(__name__)


# --- Models ---
class MazeChaseAnswerOption(BaseModel):
    answer_text: str = Field(max_length=512)
    is_correct: bool


class MazeChaseQuestion(BaseModel):
    question_text: str = Field(max_length=2000)
    answers: List[MazeChaseAnswerOption] = Field(min_length=4, max_length=4)


class MazeChaseJson(BaseModel):
    score_per_question: int = Field(ge=1, le=1000)
    is_question_randomized: bool = False
    is_answer_randomized: bool = False
    map_id: str = ""
    countdown: int = Field(default=0, ge=0, le=60)
    questions: List[MazeChaseQuestion] = Field(min_length=1, max_length=20)


class MazeChaseAnswer(BaseModel):
    question_index: int
    selected_answer_index: int


class MazeChaseCheck(BaseModel):
    answers: List[MazeChaseAnswer] = Field(min_length=1)


class MazeChaseResultItem(BaseModel):
    question_index: int
    selected_answer_index: int
    is_correct: bool
    correct_answer_index: int
    selected_answer_text: str
    correct_answer_text: str
    error: Optional[str] = None


class MazeChaseCheckResult(BaseModel):
    total_questions: int
    correct_answers: int
    incorrect_answers: int
    score: int
    max_score: int
    percentage: float
    results: List[MazeChaseResultItem]


# --- Scoring ---
def _out_of_range(answer: MazeChaseAnswer, kind: str) -> MazeChaseResultItem:
    return MazeChaseResultItem(
        question_index=answer.question_index,
        selected_answer_index=answer.selected_answer_index,
        is_correct=False,
        correct_answer_index=-1,
        selected_answer_text=f"Invalid {kind} index",
        correct_answer_text="N/A",
        error=f"{kind.capitalize()} index out of range",
    )


def score_maze_chase_answers(
    payload: MazeChaseJson, answers: List[MazeChaseAnswer]
) -> MazeChaseCheckResult:
    questions = payload.questions
    results: List[MazeChaseResultItem] = []
    correct_count = 0

    for answer in answers:
        if not 0 <= answer.question_index < len(questions):
            logger.debug(f"Maze-chase question index {answer.question_index} out of range")
            results.append(_out_of_range(answer, "question"))
            continue

        options = questions[answer.question_index].answers
        if not 0 <= answer.selected_answer_index < len(options):
            results.append(_out_of_range(answer, "answer"))
            continue

        selected = options[answer.selected_answer_index]
        correct_index = next(
            (i for i, option in enumerate(options) if option.is_correct), -1
        )
        if selected.is_correct:
            correct_count += 1

        results.append(
            MazeChaseResultItem(
                question_index=answer.question_index,
                selected_answer_index=answer.selected_answer_index,
                is_correct=selected.is_correct,
                correct_answer_index=correct_index,
                selected_answer_text=selected.answer_text,
                correct_answer_text=(
                    options[correct_index].answer_text if correct_index >= 0 else "N/A"
                ),
            )
        )

    score = correct_count * payload.score_per_question
    max_score = len(questions) * payload.score_per_question
    percentage = round_half_up(score / max_score * 100, 2) if max_score > 0 else 0
    return MazeChaseCheckResult(
        total_questions=len(questions),
        correct_answers=correct_count,
        incorrect_answers=len(answers) - correct_count,
        score=score,
        max_score=max_score,
        percentage=percentage,
        results=results,
    )


# --- Evaluator ---
class MazeChaseEvaluator(GameEvaluator):
    slug = "maze-chase"
    payload_model = MazeChaseJson
    submission_model = MazeChaseCheck

    def validate(self, payload: MazeChaseJson) -> MazeChaseJson:
        for number, question in enumerate(payload.questions, start=1):
            correct = [a for a in question.answers if a.is_correct]
            if len(correct) != 1:
                raise InvalidGameData(
                    f"There should be 1 correct answer in question no. {number}"
                )
        return payload

    def build_play(
        self, payload: MazeChaseJson, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        # indices refer to the stored order so check-answer works after shuffling
        questions = list(enumerate(payload.questions))
        if payload.is_question_randomized:
            questions = shuffle_array(questions, rng)

        cleaned = []
        for question_index, question in questions:
            answers = [
                {"answer_text": a.answer_text, "answer_index": i}
                for i, a in enumerate(question.answers)
            ]
            if payload.is_answer_randomized:
                answers = shuffle_array(answers, rng)
            cleaned.append(
                {
                    "question_text": question.question_text,
                    "question_index": question_index,
                    "answers": answers,
                }
            )

        return {
            "score_per_question": payload.score_per_question,
            "map_id": payload.map_id,
            "countdown": payload.countdown,
            "questions": cleaned,
        }

    def check(
        self, payload: MazeChaseJson, submission: MazeChaseCheck
    ) -> MazeChaseCheckResult:
        return score_maze_chase_answers(payload, submission.answers)
