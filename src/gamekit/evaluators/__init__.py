"""
Per-template evaluators.

Each game template has one GameEvaluator that validates its payload,
builds the player view and scores submissions. ``EvaluatorFactory`` maps a
template slug to its evaluator.
"""

from typing import Dict

from ..errors import NotFound
from .anagram import AnagramEvaluator, score_anagram_answer, score_anagram_answers
from .base import GameEvaluator, round_half_up
from .crossword import (
    CrosswordEvaluator,
    score_crossword_answers,
    validate_grid_integrity,
)
from .find_the_match import FindTheMatchEvaluator, evaluate_find_the_match
from .maze_chase import MazeChaseEvaluator, score_maze_chase_answers
from .true_or_false import TrueOrFalseEvaluator, score_true_or_false_answers
from .type_speed import TypeSpeedEvaluator, score_type_speed

_EVALUATORS: Dict[str, GameEvaluator] = {
    evaluator.slug: evaluator
    for evaluator in (
        AnagramEvaluator(),
        CrosswordEvaluator(),
        MazeChaseEvaluator(),
        TrueOrFalseEvaluator(),
        TypeSpeedEvaluator(),
        FindTheMatchEvaluator(),
    )
}


class EvaluatorFactory:
    """Looks up the evaluator for a template slug."""

    @staticmethod
    def create(slug: str) -> GameEvaluator:
        evaluator = _EVALUATORS.get(slug)
        if evaluator is None:
            raise NotFound(f"No evaluator for game template '{slug}'")
        return evaluator


__all__ = [
    "EvaluatorFactory",
    "GameEvaluator",
    "round_half_up",
    "validate_grid_integrity",
    "score_anagram_answer",
    "score_anagram_answers",
    "score_crossword_answers",
    "score_maze_chase_answers",
    "score_true_or_false_answers",
    "score_type_speed",
    "evaluate_find_the_match",
]
