from .base import Agent
from . import register_agent


@register_agent("optimal")
class OptimalAgent(Agent):
    """
    Plays the die with the best odds. Against a known die it picks the best response; when it has to pick
    first it takes the die whose worst matchup against the remaining dice is strongest (maximin).
    Ties go to the lowest index.
    """

    def choose_die(self, view):
        """
        Decide which die to play.
        Args:
            view (dict): Keys 'matrix', 'available' and 'opponent_die'.
        Returns:
            int: Chosen die index.
        """
        matrix = view["matrix"]
        available = self.available(view)
        opponent = view.get("opponent_die")
        if opponent is not None:
            return matrix.best_against(opponent, available)

        if len(available) == 1:
            return available[0]

        def worst_case(c):
            return min(matrix.exact(c, o) for o in available if o != c)

        return max(available, key=lambda c: (worst_case(c), -c))
