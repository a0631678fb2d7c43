
"""
engine.py
Implements the GameEngine class, which sequences fair exchanges to decide the first move, the dice allocation
and both rolls, and emits events describing every commitment and reveal.
Related modules:
- config.py: GameConfig is used to configure the engine.
- state.py: GameState, PlayerState, PublicState hold all game data.
- actions.py: Prompt results decoded from the interactive boundary.
- probability.py: Matrix shown on help and used by the computer agent.
- rules.py: First-move and winner decisions.
- fairness/exchange.py: The commit-reveal exchange itself.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .config import GameConfig
from .state import PlayerState, GameState
from .die import Die
from .actions import Answer, Cancel, ShowHelp
from .probability import compute_win_probabilities, ProbabilityMatrix
from .rules import USER, COMPUTER, first_mover, decide_winner
from ..agents import make_agent
from ..agents.base import Agent, Prompter
from ..fairness.exchange import FairExchange, RevealedExchange
from ..fairness.random_source import SecureRandomSource
from ..fairness.commitment import CommitmentScheme


class IllegalMoveError(Exception):
    """
    Raised when an agent picks a die that is not available.
    """
    pass


class GameCancelled(Exception):
    """
    Raised when the user cancels at a prompt. The in-progress exchange is abandoned without a reveal.
    """
    pass


class GameEngine:
    """
    Thin orchestrator for the non-transitive dice game. Owns the exchanges and the game state, talks to the user
    only through the Prompter boundary and reports progress as event dicts.
    """
    def __init__(self,
                 dice: Sequence[Die],
                 prompter: Prompter,
                 agent: Optional[Agent] = None,
                 config: Optional[GameConfig] = None,
                 random_source: Optional[SecureRandomSource] = None,
                 on_help: Optional[Callable[[ProbabilityMatrix], None]] = None,
                 on_event: Optional[Callable[[Dict], None]] = None):
        """
        Args:
            dice (sequence[Die]): At least three dice.
            prompter (Prompter): Interactive boundary.
            agent (Agent, optional): Computer opponent; defaults to make_agent(config.agent) sharing random_source.
            config (GameConfig, optional): Game configuration.
            random_source (SecureRandomSource, optional): Shared secure source for all exchanges.
            on_help (callable, optional): Called with the probability matrix when the user asks for help.
            on_event (callable, optional): Called synchronously with every emitted event.
        """
        self.config = config or GameConfig()
        self.prompter = prompter
        self.random_source = random_source or SecureRandomSource()
        self.scheme = CommitmentScheme(self.random_source, key_size=self.config.key_size, hash_name=self.config.hash_name)
        self.agent = agent or make_agent(self.config.agent, self.random_source)
        self.matrix = compute_win_probabilities(dice, digits=self.config.probability_digits)
        self.on_help = on_help
        self.on_event = on_event
        self.state = GameState(
            config=self.config,
            dice=tuple(dice),
            players=(PlayerState(name=USER), PlayerState(name=COMPUTER)),
        )
        self._events = []
        # turn_log holds a snapshot after each step of a round
        self.turn_log = []

    def _emit(self, event: Dict):
        """
        Internal: Record an event (dict) and forward it to on_event.
        """
        self._events.append(event)
        if self.on_event is not None:
            self.on_event(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        Returns:
            list[dict]: List of event dicts.
        """
        return list(self._events)

    def _snapshot(self, step: str):
        """
        Internal: Append a snapshot of the current state to turn_log.
        Args:
            step (str): Name of the step that produced this state.
        Returns:
            dict: Snapshot of state.
        """
        public = self.state.public
        snap = {
            "step": step,
            "public": {
                "round_index": public.round_index,
                "status": public.status,
                "first_mover": public.first_mover,
                "winner": public.winner,
                "draw": public.draw,
            },
            "players": [
                {
                    "name": p.name,
                    "die_index": p.die_index,
                    "roll_index": p.roll_index,
                    "roll_value": p.roll_value,
                }
                for p in self.state.players
            ],
        }
        self.turn_log.append(snap)
        return snap

    def ask(self, prompt_text: str, allowed_values: Iterable[int]) -> int:
        """
        Ask the user until an answer arrives, serving help requests in between.
        Args:
            prompt_text (str): Question.
            allowed_values (iterable[int]): Accepted answers.
        Returns:
            int: The answer.
        Raises:
            GameCancelled: If the user cancels.
        """
        allowed = sorted(set(allowed_values))
        while True:
            result = self.prompter.ask(prompt_text, allowed)
            if isinstance(result, Answer):
                if result.value not in allowed:
                    raise IllegalMoveError(f"prompter returned {result.value}, expected one of {allowed}")
                return result.value
            if isinstance(result, ShowHelp):
                self._emit({"type": "HelpRequested"})
                if self.on_help is not None:
                    self.on_help(self.matrix)
                continue
            if isinstance(result, Cancel):
                self.state.public.status = "CANCELLED"
                self._emit({"type": "GameCancelled", "round": self.state.public.round_index})
                raise GameCancelled("user cancelled the game")
            raise TypeError(f"unexpected prompt result: {result!r}")

    def run_exchange(self, purpose: str, range_: int, prompt_text: str) -> RevealedExchange:
        """
        Run one fair exchange with the user as counterparty.
        The digest is published before the user is asked; key and number are revealed only after the answer.
        Args:
            purpose (str): Label used in events ("first_move", "computer_roll", "user_roll").
            range_ (int): Outcome space size.
            prompt_text (str): Question asking for the user's number.
        Returns:
            RevealedExchange: The finished exchange.
        """
        committed = FairExchange(range_, self.random_source, self.scheme).commit()
        self._emit({"type": "CommitmentPublished", "purpose": purpose, "range": range_, "digest": committed.digest})
        user_number = self.ask(prompt_text, range(range_))
        revealed = committed.contribute(user_number).reveal()
        self._emit({
            "type": "CommitmentRevealed",
            "purpose": purpose,
            "range": range_,
            "own_number": revealed.own_number,
            "counterparty_number": revealed.counterparty_number,
            "key": revealed.key_hex,
            "digest": revealed.digest,
            "result": revealed.result,
        })
        return revealed

    def get_view(self, opponent_die: Optional[int]):
        """
        Build the computer agent's view of the table.
        Args:
            opponent_die (int|None): The user's die, None when the computer picks first.
        Returns:
            dict: Agent view.
        """
        return {
            "matrix": self.matrix,
            "available": self._available(),
            "opponent_die": opponent_die,
            "config": self.config,
        }

    def _available(self) -> List[int]:
        taken = {p.die_index for p in self.state.players if p.die_index is not None}
        return [i for i in range(len(self.state.dice)) if i not in taken]

    def _user_picks(self) -> int:
        available = self._available()
        self._emit({"type": "DiceOffered", "options": [(i, list(self.state.dice[i].faces)) for i in available]})
        index = self.ask("Choose your dice", available)
        self.state.players[0].die_index = index
        self._emit({"type": "DieChosen", "player": USER, "die_index": index, "faces": list(self.state.dice[index].faces)})
        return index

    def _computer_picks(self, opponent_die: Optional[int]) -> int:
        view = self.get_view(opponent_die)
        index = self.agent.choose_die(view)
        if index not in view["available"]:
            raise IllegalMoveError(f"agent chose die {index}, which is not available")
        self.state.players[1].die_index = index
        self._emit({"type": "DieChosen", "player": COMPUTER, "die_index": index, "faces": list(self.state.dice[index].faces)})
        return index

    def _roll(self, player: PlayerState, purpose: str) -> int:
        faces = self.config.faces_per_die
        revealed = self.run_exchange(purpose, faces, f"Add your number modulo {faces}")
        die = self.state.dice[player.die_index]
        player.roll_index = revealed.result
        player.roll_value = die.roll(revealed.result)
        self._emit({"type": "RollResult", "player": player.name, "roll_index": player.roll_index, "value": player.roll_value})
        return player.roll_value

    def start_new_round(self) -> None:
        """
        Reset per-round state and emit RoundStarted.
        """
        for p in self.state.players:
            p.die_index = None
            p.roll_index = None
            p.roll_value = None
        public = self.state.public
        public.round_index += 1
        public.status = "FIRST_MOVE"
        public.first_mover = None
        public.winner = None
        public.draw = False
        self._emit({"type": "RoundStarted", "round": public.round_index})
        self._snapshot("round_started")

    def play_round(self) -> Optional[str]:
        """
        Play one full round: first move, dice selection, computer roll, user roll, comparison.
        Each roll uses its own exchange, so every outcome combines exactly one computer and one user contribution.
        Returns:
            str|None: "user" or "computer", None on a draw.
        Raises:
            GameCancelled: If the user cancels at any prompt.
        """
        self.start_new_round()
        public = self.state.public
        user, computer = self.state.players

        revealed = self.run_exchange("first_move", self.config.first_move_range,
                                     f"Guess my number (0..{self.config.first_move_range - 1})")
        public.first_mover = first_mover(revealed.result)
        self._emit({"type": "FirstMoveDecided", "first_mover": public.first_mover})
        self._snapshot("first_move")

        public.status = "DICE_SELECTION"
        if public.first_mover == USER:
            user_die = self._user_picks()
            self._computer_picks(user_die)
        else:
            self._computer_picks(None)
            self._user_picks()
        self._snapshot("dice_selection")

        public.status = "ROLLING"
        computer_roll = self._roll(computer, "computer_roll")
        user_roll = self._roll(user, "user_roll")
        self._snapshot("rolls")

        public.winner = decide_winner(user_roll, computer_roll)
        public.draw = public.winner is None
        public.status = "ENDED"
        self._emit({
            "type": "RoundEnded",
            "round": public.round_index,
            "user_roll": user_roll,
            "computer_roll": computer_roll,
            "winner": public.winner,
        })
        self._snapshot("round_ended")
        return public.winner

    def is_terminal(self) -> bool:
        """
        Returns True if the current round has ended or was cancelled.
        """
        return self.state.public.status in ("ENDED", "CANCELLED")
