
"""
actions.py
Defines the tagged results returned by the interactive prompt boundary.
The orchestrator decodes them explicitly instead of comparing sentinel strings.
Related modules:
- agents/base.py: Prompter.ask returns one of these.
- engine.py: Decodes Answer, ShowHelp and Cancel.
"""

from dataclasses import dataclass



class PromptResult:
    """
    Base class for all prompt results. Subclassed by Answer, ShowHelp and Cancel.
    """
    pass



@dataclass(frozen=True)
class Answer(PromptResult):
    """
    A validated answer from the allowed set.
    Args:
        value (int): The chosen value.
    """
    value: int



@dataclass(frozen=True)
class ShowHelp(PromptResult):
    """
    The user asked for the rules and the probability table; the question is asked again afterwards.
    """
    pass



@dataclass(frozen=True)
class Cancel(PromptResult):
    """
    The user asked to leave the game. Ends the process with exit status 0.
    """
    pass
