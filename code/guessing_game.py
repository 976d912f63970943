#!/usr/bin/env python3
"""
Terminal Number Guessing Game
- Pick an upper bound, then guess the secret number
- "Too small." / "Too big." hints until you win
- Type "quit" at any prompt to leave
"""

import argparse
import logging
import random
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional


__version__ = "1.0.0"

QUIT_WORD = "quit"
REPLAY_WORD = "y"
# Largest value accepted by the parser (unsigned 32-bit)
MAX_NUMBER = 4_294_967_295

_NUMBER_RE = re.compile(r"^\+?[0-9]+$")


# ============================================================================
# CONFIGURATION
# ============================================================================

class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class Configuration:
    """Runtime options, filled from the command line"""
    log_level: str = "WARNING"
    seed: Optional[int] = None
    show_banner: bool = True

    def validate(self) -> List[str]:
        errors = []
        if self.log_level not in [level.value for level in LogLevel]:
            errors.append(f"log_level must be one of {[level.value for level in LogLevel]}, got {self.log_level}")
        return errors


class InputClosedError(Exception):
    """Standard input could not deliver another line"""


# ============================================================================
# CONSOLE I/O
# ============================================================================

class Console:
    """Line-oriented reader/writer pair shared by the session and its rounds"""

    def __init__(self, reader: Callable[[], str] = input, writer: Callable[[str], None] = print):
        self.reader = reader
        self.writer = writer

    @classmethod
    def scripted(cls, lines: List[str], writer: Callable[[str], None] = print) -> "Console":
        """Console fed from a fixed list of lines; running out counts as a closed stream"""
        it: Iterator[str] = iter(lines)

        def reader() -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError("scripted input exhausted") from None

        return cls(reader, writer)

    def write(self, text: str = ""):
        self.writer(text)

    def read_line(self) -> str:
        try:
            return self.reader()
        except (EOFError, OSError) as e:
            raise InputClosedError("Failed to read line.") from e


# ============================================================================
# INPUT PARSER
# ============================================================================

class ParseKind(Enum):
    NUMBER = "number"
    QUIT = "quit"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseOutcome:
    kind: ParseKind
    value: Optional[int] = None

    @property
    def is_number(self) -> bool:
        return self.kind is ParseKind.NUMBER

    @property
    def is_quit(self) -> bool:
        return self.kind is ParseKind.QUIT


def parse_input(text: str, output: Callable[[str], None] = print) -> ParseOutcome:
    """
    Interpret one line of user input.

    Returns a NUMBER outcome for a non-negative whole number, QUIT for the
    exact word "quit", and INVALID for anything else. Only the INVALID case
    writes anything: "Invalid number: <trimmed text>". Never raises.
    """
    trimmed = text.strip()

    if _NUMBER_RE.match(trimmed):
        value = int(trimmed)
        if value <= MAX_NUMBER:
            return ParseOutcome(ParseKind.NUMBER, value)

    if trimmed == QUIT_WORD:
        return ParseOutcome(ParseKind.QUIT)

    output(f"Invalid number: {trimmed}")
    return ParseOutcome(ParseKind.INVALID)


# ============================================================================
# ROUND
# ============================================================================

class RoundStep(Enum):
    CONTINUE_ROUND = "continue_round"
    END_ROUND = "end_round"
    END_SESSION = "end_session"


class GameRound:
    """One play-through against a single secret number"""

    def __init__(self, max_value: int, console: Console,
                 number_source: Callable[[int, int], int] = random.randint):
        if max_value < 1:
            raise ValueError(f"max_value must be >= 1, got {max_value}")
        self.max_value = max_value
        self.console = console
        self.number_source = number_source
        self.secret: Optional[int] = None
        self.guess_count = 0

    def _draw_secret(self) -> int:
        secret = self.number_source(1, self.max_value)
        if not (1 <= secret <= self.max_value):
            raise ValueError(f"Secret {secret} outside [1, {self.max_value}]")
        return secret

    def check_guess(self, guess: int) -> RoundStep:
        """Compare a parsed number against the secret and report the result"""
        if self.secret is None:
            raise RuntimeError("Round not started. Call play().")

        if guess > self.max_value or guess < 1:
            self.console.write(f"Invalid number: {guess}")
            return RoundStep.CONTINUE_ROUND

        self.guess_count += 1

        if guess < self.secret:
            self.console.write("Too small.")
            result = "too small"
        elif guess > self.secret:
            self.console.write("Too big.")
            result = "too big"
        else:
            self.console.write("You win!")
            result = "correct"

        logging.debug(f"Guess #{self.guess_count}: {guess} -> {result}")

        if result == "correct":
            return RoundStep.END_ROUND
        return RoundStep.CONTINUE_ROUND

    def play(self) -> bool:
        """Run the round. True if the user guessed the secret, False if they quit."""
        self.console.write()
        self.console.write(f"Guess a number from 1 to {self.max_value}.")

        self.secret = self._draw_secret()
        self.guess_count = 0
        logging.info(f"Round started: max={self.max_value}")

        step = RoundStep.CONTINUE_ROUND
        while step is RoundStep.CONTINUE_ROUND:
            self.console.write()
            self.console.write("Input your guess!")

            outcome = parse_input(self.console.read_line(), self.console.write)
            if outcome.is_quit:
                step = RoundStep.END_SESSION
            elif outcome.is_number:
                step = self.check_guess(outcome.value)

        if step is RoundStep.END_ROUND:
            logging.info(f"Round won in {self.guess_count} guesses")
            return True

        logging.info("Round abandoned by user")
        return False


# ============================================================================
# SESSION
# ============================================================================

class GameSession:
    """Prompts for a maximum, plays rounds and offers replays"""

    def __init__(self, console: Optional[Console] = None,
                 number_source: Callable[[int, int], int] = random.randint,
                 show_banner: bool = True):
        self.console = console or Console()
        self.number_source = number_source
        self.show_banner = show_banner
        self.rounds_played = 0

    def _banner(self):
        self.console.write()
        self.console.write("Welcome to the guessing game.")
        self.console.write(f'Type "{QUIT_WORD}" at any time to quit.')

    def _farewell(self) -> RoundStep:
        self.console.write("Goodbye!")
        return RoundStep.END_SESSION

    def ask_max_value(self) -> Optional[int]:
        """
        Prompt until a usable maximum is entered.

        Returns None when the user quits.
        """
        while True:
            self.console.write()
            self.console.write("What is the max value to guess?")

            outcome = parse_input(self.console.read_line(), self.console.write)
            if outcome.is_quit:
                return None
            if not outcome.is_number:
                self.console.write()
                continue
            if outcome.value < 1:
                self.console.write("Value must be greater than zero.")
                continue
            return outcome.value

    def ask_play_again(self) -> bool:
        self.console.write()
        self.console.write(f'Enter "{REPLAY_WORD}" to play again.')
        return self.console.read_line().strip() == REPLAY_WORD

    def play_once(self) -> RoundStep:
        """One session iteration: choose a maximum, play, maybe offer a replay"""
        max_value = self.ask_max_value()
        if max_value is None:
            return self._farewell()

        won = GameRound(max_value, self.console, self.number_source).play()
        self.rounds_played += 1
        if not won:
            return self._farewell()

        if not self.ask_play_again():
            self.console.write("At least you're leaving a winner.")
            return RoundStep.END_SESSION
        return RoundStep.END_ROUND

    def run(self) -> int:
        """Main session loop, returns the process exit status"""
        if self.show_banner:
            self._banner()

        step = RoundStep.END_ROUND
        while step is not RoundStep.END_SESSION:
            step = self.play_once()

        logging.info(f"Session finished after {self.rounds_played} round(s)")
        return 0


# ============================================================================
# ENTRY POINT
# ============================================================================

def _setup_logging(config: Configuration):
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Terminal number guessing game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  guessing-game                  # Play
  guessing-game --seed 42        # Reproducible secret numbers
  guessing-game --log-level INFO # Show round events on stderr
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        default="WARNING",
        help="Logging verbosity (written to stderr)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the secret number generator")
    parser.add_argument("--no-banner", dest="show_banner", action="store_false",
                        help="Skip the welcome message")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None):
    """Main entry point"""
    args = build_parser().parse_args(argv)
    config = Configuration(log_level=args.log_level, seed=args.seed, show_banner=args.show_banner)

    errors = config.validate()
    if errors:
        print("Configuration errors:", file=sys.stderr)
        for e in errors:
            print(" -", e, file=sys.stderr)
        sys.exit(1)

    _setup_logging(config)

    number_source = random.Random(config.seed).randint if config.seed is not None else random.randint
    session = GameSession(console, number_source, config.show_banner)

    try:
        status = session.run()
    except KeyboardInterrupt:
        session.console.write()
        session.console.write("Goodbye!")
        sys.exit(0)
    except InputClosedError as e:
        print(e, file=sys.stderr)
        logging.debug("Standard input closed", exc_info=True)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
