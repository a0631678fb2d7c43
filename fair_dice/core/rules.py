
"""
rules.py
Defines helper functions for the dice game rules: who moves first and who wins a pair of rolls.
Related modules:
- engine.py: Uses these to turn exchange results into game decisions.
"""

from typing import Optional

USER = "user"
COMPUTER = "computer"


def first_mover(exchange_result: int) -> str:
    """
    The user moves first when the first-move exchange yields 0 (the user guessed the computer's number).
    Args:
        exchange_result (int): Result of the range-2 exchange.
    Returns:
        str: USER or COMPUTER.
    """
    return USER if exchange_result == 0 else COMPUTER


def decide_winner(user_roll: int, computer_roll: int) -> Optional[str]:
    """
    Compare two rolled faces.
    Returns:
        str|None: USER or COMPUTER for the higher face, None on a draw.
    """
    if user_roll > computer_roll:
        return USER
    if computer_roll > user_roll:
        return COMPUTER
    return None
