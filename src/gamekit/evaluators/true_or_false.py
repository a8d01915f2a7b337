import random
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .base import GameEvaluator, round_half_up

Choice = Literal["A", "B"]


# --- Models ---
class TrueOrFalseQuestion(BaseModel):
    questionText: str = Field(min_length=1)
    correctAnswer: Choice


class TrueOrFalseChoices(BaseModel):
    A: str = Field(min_length=1)
    B: str = Field(min_length=1)


class TrueOrFalseJson(BaseModel):
    countdown: int = Field(ge=1)
    choices: TrueOrFalseChoices
    questions: List[TrueOrFalseQuestion] = Field(min_length=1, max_length=10)


class TrueOrFalseAnswer(BaseModel):
    questionIndex: int
    selectedAnswer: Choice


class TrueOrFalseCheck(BaseModel):
    answers: List[TrueOrFalseAnswer] = Field(min_length=1)


class TrueOrFalseResultItem(BaseModel):
    questionIndex: int
    is_correct: bool
    correctAnswer: str
    selectedAnswer: Optional[Choice] = None
    error: Optional[str] = None


class TrueOrFalseCheckResult(BaseModel):
    total_questions: int
    correct_answers: int
    incorrect_answers: int
    score: int
    max_score: int = 100
    results: List[TrueOrFalseResultItem]


# --- Scoring ---
def score_true_or_false_answers(
    questions: List[TrueOrFalseQuestion], answers: List[TrueOrFalseAnswer]
) -> TrueOrFalseCheckResult:
    """
    The score is out of 100 over the answers actually submitted, unlike the
    crossword score which is taken over the whole puzzle.
    """
    results: List[TrueOrFalseResultItem] = []
    correct_count = 0

    for answer in answers:
        if not 0 <= answer.questionIndex < len(questions):
            results.append(
                TrueOrFalseResultItem(
                    questionIndex=answer.questionIndex,
                    is_correct=False,
                    correctAnswer="N/A",
                    error="Question index out of range",
                )
            )
            continue

        question = questions[answer.questionIndex]
        is_correct = question.correctAnswer == answer.selectedAnswer
        if is_correct:
            correct_count += 1
        results.append(
            TrueOrFalseResultItem(
                questionIndex=answer.questionIndex,
                is_correct=is_correct,
                correctAnswer=question.correctAnswer,
                selectedAnswer=answer.selectedAnswer,
            )
        )

    submitted = len(answers)
    score = round_half_up(correct_count / submitted * 100) if submitted > 0 else 0
    return TrueOrFalseCheckResult(
        total_questions=len(questions),
        correct_answers=correct_count,
        incorrect_answers=submitted - correct_count,
        score=score,
        results=results,
    )


# --- Evaluator ---
class TrueOrFalseEvaluator(GameEvaluator):
    slug = "true-or-false"
    payload_model = TrueOrFalseJson
    submission_model = TrueOrFalseCheck

    def build_play(
        self, payload: TrueOrFalseJson, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        return {
            "countdown": payload.countdown,
            "choices": payload.choices.model_dump(),
            "questions": [
                {"questionIndex": i, "questionText": q.questionText}
                for i, q in enumerate(payload.questions)
            ],
        }

    def check(
        self, payload: TrueOrFalseJson, submission: TrueOrFalseCheck
    ) -> TrueOrFalseCheckResult:
        return score_true_or_false_answers(payload.questions, submission.answers)
