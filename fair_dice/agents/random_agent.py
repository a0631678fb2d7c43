from .base import Agent
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Picks uniformly among the available dice using the secure random source, ignoring the odds.
    """

    def choose_die(self, view):
        available = self.available(view)
        if len(available) == 1:
            return available[0]
        return available[self.random_source.uniform(len(available))]
