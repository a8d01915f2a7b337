import pytest

from gamekit.evaluators.true_or_false import (
    TrueOrFalseAnswer,
    TrueOrFalseEvaluator,
    TrueOrFalseJson,
    score_true_or_false_answers,
)


@pytest.fixture
def payload():
    return TrueOrFalseJson(
        countdown=30,
        choices={"A": "True", "B": "False"},
        questions=[
            {"questionText": "The sky is blue", "correctAnswer": "A"},
            {"questionText": "Fire is cold", "correctAnswer": "B"},
            {"questionText": "Water is wet", "correctAnswer": "A"},
        ],
    )


def test_score_is_over_submitted_answers(payload):
    answers = [
        TrueOrFalseAnswer(questionIndex=0, selectedAnswer="A"),
        TrueOrFalseAnswer(questionIndex=1, selectedAnswer="A"),
    ]
    result = score_true_or_false_answers(payload.questions, answers)

    assert result.total_questions == 3
    assert result.correct_answers == 1
    assert result.incorrect_answers == 1
    assert result.score == 50
    assert result.max_score == 100


def test_single_correct_answer_scores_full_marks(payload):
    result = score_true_or_false_answers(
        payload.questions, [TrueOrFalseAnswer(questionIndex=2, selectedAnswer="A")]
    )
    assert result.score == 100


@pytest.mark.parametrize("index", [3, 10, -1])
def test_out_of_range_index_is_marked_not_raised(payload, index):
    answers = [
        TrueOrFalseAnswer(questionIndex=index, selectedAnswer="A"),
        TrueOrFalseAnswer(questionIndex=1, selectedAnswer="B"),
    ]
    result = score_true_or_false_answers(payload.questions, answers)

    assert result.results[0].is_correct is False
    assert result.results[0].error == "Question index out of range"
    assert result.results[0].correctAnswer == "N/A"
    assert result.results[1].is_correct is True
    assert result.score == 50


def test_no_answers_scores_zero(payload):
    assert score_true_or_false_answers(payload.questions, []).score == 0


def test_play_view_hides_correct_answers(payload):
    play = TrueOrFalseEvaluator().build_play(payload)

    assert play["choices"] == {"A": "True", "B": "False"}
    assert play["questions"][1] == {"questionIndex": 1, "questionText": "Fire is cold"}
