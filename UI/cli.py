import argparse
import dataclasses
import datetime
import hashlib
import os
import sys
from typing import Dict, Iterable, List, Optional


from fair_dice.core.config import GameConfig
from fair_dice.core.engine import GameEngine, GameCancelled, IllegalMoveError
from fair_dice.core.actions import Answer, Cancel, ShowHelp, PromptResult
from fair_dice.core.parser import parse_dice, DiceValidationError
from fair_dice.core.rules import USER
from fair_dice.agents import AGENT_MAP
from fair_dice.agents.base import Prompter
from fair_dice.audit.events import GameEvent
from fair_dice.audit.recorder import InMemoryRecorder
from fair_dice.audit import serializer
from fair_dice.fairness.random_source import EntropySourceError
from fair_dice.fairness.exchange import ProtocolStateError

from UI.table import render_rules

EXIT_OK = 0
EXIT_VALIDATION = 1
EXIT_ENTROPY = 2
EXIT_INTERNAL = 3


class ConsolePrompter(Prompter):
    """
    Prompter reading answers from the terminal.
    Loops until the input is an allowed integer, the help token or the cancel token; end of input counts as cancel.
    """
    def __init__(self, config: GameConfig, input_fn=None, output_fn=None):
        self.config = config
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def ask(self, prompt_text: str, allowed_values: Iterable[int]) -> PromptResult:
        """
        Ask until the answer is valid.
        Args:
            prompt_text (str): Question shown to the user.
            allowed_values (iterable[int]): Accepted answers.
        Returns:
            PromptResult: Answer, ShowHelp or Cancel.
        """
        allowed = sorted(set(allowed_values))
        help_token = self.config.help_token
        cancel_token = self.config.cancel_token.upper()
        options = ", ".join(str(v) for v in allowed)
        while True:
            try:
                raw = self.input_fn(f"{prompt_text} [{options}, {help_token} help, {cancel_token} exit]: ")
            except EOFError:
                return Cancel()
            choice = raw.strip().upper()
            if choice == cancel_token:
                return Cancel()
            if choice == help_token:
                return ShowHelp()
            try:
                value = int(choice)
            except ValueError:
                self.output_fn(f"Please enter one of: {options}.")
                continue
            if value in allowed:
                return Answer(value)
            self.output_fn(f"Please enter one of: {options}.")


def describe_event(event: Dict, dice) -> Optional[str]:
    """
    Turn an engine event into the line shown to the user.
    Args:
        event (dict): Engine event.
        dice (sequence[Die]): Dice at the table, for die labels.
    Returns:
        str or None: Text to print, None for events that are not shown.
    """
    t = event.get("type")
    if t == "RoundStarted":
        return f"\n=== ROUND {event['round']} ==="
    if t == "CommitmentPublished":
        if event["purpose"] == "first_move":
            intro = "Let's determine who makes the first move."
        elif event["purpose"] == "computer_roll":
            intro = "It's time for my roll."
        else:
            intro = "It's time for your roll."
        return f"{intro}\nI selected a random value in the range 0..{event['range'] - 1} (HMAC={event['digest']})."
    if t == "CommitmentRevealed":
        return (
            f"My number is {event['own_number']} (KEY={event['key']}).\n"
            f"The fair number generation result is {event['own_number']} + {event['counterparty_number']} "
            f"= {event['result']} (mod {event['range']})."
        )
    if t == "FirstMoveDecided":
        return "You make the first move." if event["first_mover"] == USER else "I make the first move."
    if t == "DiceOffered":
        lines = ["Choose your dice:"] + [f"{i} - {','.join(str(f) for f in faces)}" for i, faces in event["options"]]
        return "\n".join(lines)
    if t == "DieChosen":
        who = "You choose" if event["player"] == USER else "I choose"
        return f"{who} the [{dice[event['die_index']].label()}] dice."
    if t == "RollResult":
        whose = "Your" if event["player"] == USER else "My"
        return f"{whose} roll result is {event['value']}."
    if t == "RoundEnded":
        if event["winner"] is None:
            return f"It's a draw ({event['user_roll']} = {event['computer_roll']})."
        if event["winner"] == USER:
            return f"You win ({event['user_roll']} > {event['computer_roll']})!"
        return f"I win ({event['computer_roll']} > {event['user_roll']})!"
    return None


def make_game_id(agent_name: str) -> str:
    """Hashed session id, stable for one process run."""
    timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    raw_id = f"cli_{timestamp}_{os.getpid()}_{agent_name}"
    return hashlib.sha256(raw_id.encode()).hexdigest()[:16]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play a provably fair game of non-transitive dice against the computer')
    parser.add_argument('dice', nargs='*', help='Dice as comma-separated faces, e.g. 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7')
    parser.add_argument('--agent', type=str, default=GameConfig.agent, choices=sorted(AGENT_MAP), help='Computer opponent')
    parser.add_argument('--rounds', type=int, default=1, help='Rounds to play (0 keeps playing until you exit)')
    parser.add_argument('--transcript', action='store_true', help='Print the JSON transcript of all commitments and reveals at the end')
    return parser


def play(dice, config: GameConfig, prompter: Prompter, output_fn=print, recorder: Optional[InMemoryRecorder] = None) -> int:
    """
    Run the configured number of rounds.
    Args:
        dice (list[Die]): Validated dice.
        config (GameConfig): Game configuration.
        prompter (Prompter): Interactive boundary.
        output_fn (callable): Where text goes.
        recorder (InMemoryRecorder, optional): Receives every event.
    Returns:
        int: Rounds completed.
    Raises:
        GameCancelled: If the user exits.
    """
    game_id = make_game_id(config.agent)

    def on_event(event):
        if recorder is not None:
            recorder.record(GameEvent.from_engine(game_id, event))
        text = describe_event(event, dice)
        if text is not None:
            output_fn(text)

    def on_help(matrix):
        output_fn(render_rules(matrix))

    engine = GameEngine(dice, prompter, config=config, on_help=on_help, on_event=on_event)
    output_fn(f"\nType '{config.help_token}' for help or '{config.cancel_token}' to exit.")
    output_fn(render_rules(engine.matrix))
    completed = 0
    while config.rounds is None or completed < config.rounds:
        engine.play_round()
        completed += 1
    return completed


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entry point.
    Returns:
        int: 0 on normal or cancelled completion, 1 on invalid dice, 2 if the secure random source fails,
            3 on an internal protocol or move error.
    """
    args = build_parser().parse_args(argv)
    cfg = GameConfig()
    cfg = dataclasses.replace(cfg, agent=args.agent, rounds=args.rounds if args.rounds > 0 else None)
    recorder = InMemoryRecorder()
    try:
        dice = parse_dice(args.dice, cfg)
        play(dice, cfg, ConsolePrompter(cfg), recorder=recorder)
    except DiceValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION
    except EntropySourceError as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return EXIT_ENTROPY
    except (ProtocolStateError, IllegalMoveError) as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return EXIT_INTERNAL
    except (GameCancelled, KeyboardInterrupt):
        print("\nExiting the game. Goodbye!")
    finally:
        if args.transcript and recorder.events():
            print(serializer.dumps(recorder.events(), indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
