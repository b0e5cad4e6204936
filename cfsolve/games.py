"""Two-player game outcomes and simple yes/no decisions."""

from __future__ import annotations

__all__ = ["alice_wins", "buttons_winner", "can_split_watermelon"]


def alice_wins(s: str) -> bool:
    """Return whether Alice wins the 01-deletion game on the binary string ``s``.

    Each move deletes one adjacent pair of different characters. The number of
    moves that can be made is the smaller of the counts of zeros and ones, so
    the first player wins exactly when that number is odd.
    """
    zeros = s.count("0")
    ones = len(s) - zeros
    return min(zeros, ones) % 2 == 1


def buttons_winner(a: int, b: int, c: int) -> str:
    """Return ``"First"`` or ``"Second"`` for the buttons game.

    The first player owns ``a`` buttons, the second ``b``, and ``c`` buttons
    may be pressed by either. The player with more private buttons wins; with
    equal counts the shared buttons decide: an odd number favours the first
    player.
    """
    if a > b:
        return "First"
    if b > a:
        return "Second"
    return "First" if c % 2 == 1 else "Second"


def can_split_watermelon(weight: int) -> bool:
    """Return whether ``weight`` splits into two positive even parts."""
    return weight % 2 == 0 and weight != 2