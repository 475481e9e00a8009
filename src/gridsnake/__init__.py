"""Grid snake: movement, apples, game loop and high-score persistence."""

from .config import Direction
from .apple import Apple
from .snake import Snake, MoveResult
from .highscore import HighScoreFile, HighScoreError

__all__ = ["Direction", "Apple", "Snake", "MoveResult", "HighScoreFile", "HighScoreError"]
