"""
Game results - one record per finished game.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GameResult(BaseModel):
    """
    Outcome of a finished game.

    Stored with camelCase keys (playerOne, numberOfMoves, ...).
    Player one plays the dogs, player two the fox.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    player_one: str
    player_two: str
    winner: str
    number_of_moves: int = Field(ge=0)
    time_of_play: datetime
