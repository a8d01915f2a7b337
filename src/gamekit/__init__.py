"""
gamekit: answer scoring and payload validation for mini-game templates.

Quick start:
    from gamekit.evaluators import EvaluatorFactory

    evaluator = EvaluatorFactory.create("crossword")
    payload = evaluator.validate(evaluator.parse_payload(game_json))
    result = evaluator.check(payload, evaluator.parse_submission(body))
"""

__version__ = "0.1.0"
