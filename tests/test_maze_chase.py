import random

import pytest

from gamekit.errors import InvalidGameData
from gamekit.evaluators.maze_chase import (
    MazeChaseAnswer,
    MazeChaseEvaluator,
    MazeChaseJson,
    score_maze_chase_answers,
)


def question(text, correct_index, n_correct=1):
    answers = []
    for i in range(4):
        answers.append(
            {"answer_text": f"{text}-{i}", "is_correct": i == correct_index or i < n_correct - 1}
        )
    return {"question_text": text, "answers": answers}


@pytest.fixture
def payload():
    return MazeChaseJson(
        score_per_question=10,
        is_question_randomized=True,
        is_answer_randomized=True,
        questions=[question("q0", 1), question("q1", 2), question("q2", 0)],
    )


def test_scores_and_percentage(payload):
    answers = [
        MazeChaseAnswer(question_index=0, selected_answer_index=1),
        MazeChaseAnswer(question_index=1, selected_answer_index=0),
    ]
    result = score_maze_chase_answers(payload, answers)

    assert result.correct_answers == 1
    assert result.incorrect_answers == 1
    assert result.score == 10
    assert result.max_score == 30
    assert result.percentage == 33.33
    assert result.results[1].correct_answer_index == 2
    assert result.results[1].correct_answer_text == "q1-2"
    assert result.results[1].selected_answer_text == "q1-0"


@pytest.mark.parametrize("index", [5, 3, -1])
def test_out_of_range_question_never_raises(payload, index):
    answers = [
        MazeChaseAnswer(question_index=index, selected_answer_index=0),
        MazeChaseAnswer(question_index=2, selected_answer_index=0),
    ]
    result = score_maze_chase_answers(payload, answers)

    assert result.results[0].is_correct is False
    assert result.results[0].error == "Question index out of range"
    assert result.results[1].is_correct is True
    assert result.correct_answers == 1


def test_out_of_range_answer_is_marked(payload):
    result = score_maze_chase_answers(
        payload, [MazeChaseAnswer(question_index=0, selected_answer_index=7)]
    )
    assert result.results[0].error == "Answer index out of range"
    assert result.results[0].correct_answer_index == -1


def test_exactly_one_correct_answer_required():
    payload = MazeChaseJson(
        score_per_question=1,
        questions=[question("ok", 0), question("two", 0, n_correct=3)],
    )
    with pytest.raises(InvalidGameData, match="question no. 2"):
        MazeChaseEvaluator().validate(payload)


def test_play_view_keeps_stored_indices(payload):
    play = MazeChaseEvaluator().build_play(payload, rng=random.Random(7))

    assert sorted(q["question_index"] for q in play["questions"]) == [0, 1, 2]
    for q in play["questions"]:
        assert sorted(a["answer_index"] for a in q["answers"]) == [0, 1, 2, 3]
        assert all("is_correct" not in a for a in q["answers"])
        assert q["question_text"] == f"q{q['question_index']}"
