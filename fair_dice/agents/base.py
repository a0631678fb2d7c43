from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from ..core.actions import PromptResult
from ..fairness.random_source import SecureRandomSource


class Agent(ABC):
    """
    Abstract base class for computer opponents.
    Agents implement choose_die(view), which receives the probability matrix and the dice still available,
    and return the index of the die to play.
    """

    def __init__(self, random_source: Optional[SecureRandomSource] = None):
        """
        Args:
            random_source (SecureRandomSource, optional): Source for agents that draw randomness.
        """
        self.random_source = random_source or SecureRandomSource()

    @abstractmethod
    def choose_die(self, view: Any) -> int:
        """
        Given a view of the table, return the index of the die to play.
        Args:
            view (dict): Keys 'matrix' (ProbabilityMatrix), 'available' (list[int]) and
                'opponent_die' (int|None, None when the computer picks first).
        Returns:
            int: One of view['available'].
        """
        raise NotImplementedError

    def available(self, view: Any) -> List[int]:
        """
        Sorted die indices the agent may pick from.
        Args:
            view (dict): Agent view.
        Returns:
            list[int]: Available indices.
        """
        return sorted(view["available"])


class Prompter(ABC):
    """
    Interactive boundary: asks the user a question and returns a tagged PromptResult.
    Implementations loop until the answer is in allowed_values, or the user asks for help or cancels.
    """

    @abstractmethod
    def ask(self, prompt_text: str, allowed_values: Iterable[int]) -> PromptResult:
        """
        Args:
            prompt_text (str): Question shown to the user.
            allowed_values (iterable[int]): Accepted answers.
        Returns:
            PromptResult: Answer(value), ShowHelp() or Cancel().
        """
        raise NotImplementedError
