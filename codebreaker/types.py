"""
Labels for clarity.
"""

from typing import List, Literal

Digit = int  # 0 -> 9
Code = List[Digit]  # 4 digit code or guess
GameStatus = Literal["no_game", "in_progress", "won"]

CODE_LENGTH = 4
DIGIT_MIN = 0
DIGIT_MAX = 9
