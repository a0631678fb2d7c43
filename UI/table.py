"""
table.py
Renders the win probability matrix and the game rules for the console.
"""

from tabulate import tabulate

from fair_dice.core.probability import ProbabilityMatrix

CORNER = "User dice \\ Computer dice"
DIAGONAL = "-"


def render_probability_table(matrix: ProbabilityMatrix) -> str:
    """
    Build a grid with one row per user die and one column per computer die.
    Args:
        matrix (ProbabilityMatrix): Pairwise win probabilities.
    Returns:
        str: The table text.
    """
    headers = [CORNER] + [d.label() for d in matrix.dice]
    rows = []
    for i, die in enumerate(matrix.dice):
        cells = []
        for j in range(matrix.size):
            p = matrix.probability(i, j)
            cells.append(DIAGONAL if p is None else f"{p:.{matrix.digits}f}")
        rows.append([die.label()] + cells)
    return tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)


def render_rules(matrix: ProbabilityMatrix) -> str:
    """
    Rules text followed by the probability table.
    Args:
        matrix (ProbabilityMatrix): Pairwise win probabilities.
    Returns:
        str: Help screen text.
    """
    lines = [
        "",
        "=== GAME RULES ===",
        "You and the computer each pick a different die; the higher roll wins.",
        "Every random number is produced fairly: the computer publishes the HMAC of its number first,",
        "you add your own number, then the computer reveals its number and key so you can check the HMAC.",
        "The result is (computer number + your number) mod range.",
        "",
        "Probability of the win for the user:",
        render_probability_table(matrix),
    ]
    return "\n".join(lines)
