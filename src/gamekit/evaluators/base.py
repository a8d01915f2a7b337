import math
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel


class GameEvaluator(ABC):
    """
    One implementation per game template.

    Holds no state of its own, so a single instance is shared between
    requests.
    """

    slug: str
    payload_model: Type[BaseModel]
    submission_model: Type[BaseModel]

    def parse_payload(self, game_json: Dict[str, Any]) -> BaseModel:
        return self.payload_model.model_validate(game_json)

    def parse_submission(self, data: Dict[str, Any]) -> BaseModel:
        return self.submission_model.model_validate(data)

    def validate(self, payload: BaseModel) -> BaseModel:
        """Creation/update rules beyond field validation. Default: none."""
        return payload

    @abstractmethod
    def build_play(
        self, payload: BaseModel, rng: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        pass

    @abstractmethod
    def check(self, payload: BaseModel, submission: BaseModel) -> BaseModel:
        pass


def round_half_up(value: float, ndigits: int = 0):
    """Round halves upward for non-negative values (12.5 -> 13)."""
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded
