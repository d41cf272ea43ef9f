"""Command line interface for exact competition outcome probabilities."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from typing import Callable, Sequence

from .config import get_config, update_config
from .errors import InvalidArgumentError
from .logging import configure_logging
from .queries import (
    loss_probability,
    outcome_summary,
    score_distribution,
    score_probability,
    tie_probability,
    win_probability,
)
from .schedule import EventsOrSchedule, tie_value
from .schedule_files import load_schedule

CommandHandler = Callable[["CommandContext", argparse.Namespace], None]


@dataclasses.dataclass(slots=True)
class CommandContext:
    """Inputs shared by every command handler."""

    schedule: EventsOrSchedule
    probability: float


@dataclasses.dataclass(slots=True)
class Subcommand:
    """Container describing a CLI sub-command."""

    name: str
    help: str
    configure: Callable[[argparse.ArgumentParser], None]
    handler: CommandHandler

    def add_to_parser(
        self,
        subparsers,
        parent: argparse.ArgumentParser,
    ) -> argparse.ArgumentParser:
        """Create the parser for this subcommand."""

        parser = subparsers.add_parser(self.name, parents=[parent], help=self.help)
        self.configure(parser)
        parser.set_defaults(handler=self.handler, command=self.name)
        return parser


class SubcommandApp:
    """Registry that wires handlers into an :class:`argparse` parser."""

    def __init__(self, description: str | None = None) -> None:
        self._commands: list[Subcommand] = []
        self._description = description

    def command(
        self,
        name: str,
        *,
        help: str,
        configure: Callable[[argparse.ArgumentParser], None] | None = None,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Register ``handler`` as a sub-command with configuration callback."""

        def _decorator(handler: CommandHandler) -> CommandHandler:
            self._commands.append(
                Subcommand(
                    name=name,
                    help=help,
                    configure=configure or _configure_nothing,
                    handler=handler,
                )
            )
            return handler

        return _decorator

    @property
    def commands(self) -> Sequence[Subcommand]:
        return tuple(self._commands)

    def build_parser(self) -> argparse.ArgumentParser:
        parent = argparse.ArgumentParser(add_help=False)
        source = parent.add_mutually_exclusive_group(required=True)
        source.add_argument("--events", type=int, help="number of events scored 1..N")
        source.add_argument("--points", type=float, nargs="+", help="custom point per event")
        source.add_argument("--schedule-file", help="YAML or JSON file holding the points")
        parent.add_argument("--probability", type=float, help="per-event win probability")
        parent.add_argument("--max-events", type=int, help="override the enumeration ceiling")
        parent.add_argument("--log-level", default="WARNING")

        parser = argparse.ArgumentParser(prog="scoresystem", description=self._description)
        subparsers = parser.add_subparsers(dest="command", required=True)
        for command in self._commands:
            command.add_to_parser(subparsers, parent)
        return parser


APP = SubcommandApp(description=__doc__)


def _configure_nothing(parser: argparse.ArgumentParser) -> None:
    del parser


def _configure_score_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--target", type=float, required=True, help="score threshold to reach")


@APP.command("tie", help="probability of finishing exactly on the tie value")
def _cmd_tie(context: CommandContext, args: argparse.Namespace) -> None:
    print(tie_probability(context.schedule, context.probability))


@APP.command("win", help="probability of finishing above the tie value")
def _cmd_win(context: CommandContext, args: argparse.Namespace) -> None:
    print(win_probability(context.schedule, context.probability))


@APP.command("loss", help="probability of finishing below the tie value")
def _cmd_loss(context: CommandContext, args: argparse.Namespace) -> None:
    print(loss_probability(context.schedule, context.probability))


@APP.command(
    "score",
    help="probability of reaching or exceeding a target score",
    configure=_configure_score_parser,
)
def _cmd_score(context: CommandContext, args: argparse.Namespace) -> None:
    print(score_probability(context.schedule, context.probability, args.target))


@APP.command("tie-value", help="score at which the points split evenly")
def _cmd_tie_value(context: CommandContext, args: argparse.Namespace) -> None:
    print(tie_value(context.schedule))


@APP.command("summary", help="win, tie and loss probabilities as JSON")
def _cmd_summary(context: CommandContext, args: argparse.Namespace) -> None:
    summary = outcome_summary(context.schedule, context.probability)
    payload = dataclasses.asdict(summary)
    payload["settled_win"] = summary.settled_win
    payload["settled_loss"] = summary.settled_loss
    print(json.dumps(payload, indent=2))


@APP.command("distribution", help="probability of every distinct point total")
def _cmd_distribution(context: CommandContext, args: argparse.Namespace) -> None:
    frame = score_distribution(context.schedule, context.probability)
    print(frame.write_csv(), end="")


def _build_parser() -> argparse.ArgumentParser:
    return APP.build_parser()


def _resolve_context(args: argparse.Namespace) -> CommandContext:
    schedule: EventsOrSchedule
    if args.schedule_file:
        schedule = load_schedule(args.schedule_file)
    elif args.points is not None:
        schedule = list(args.points)
    else:
        schedule = args.events
    probability = args.probability
    if probability is None:
        probability = get_config().default_win_probability
    return CommandContext(schedule=schedule, probability=probability)


def _dispatch(args: argparse.Namespace) -> None:
    previous_max_events = get_config().max_events
    if args.max_events is not None:
        update_config(max_events=args.max_events)
    try:
        context = _resolve_context(args)
        handler: CommandHandler = args.handler
        handler(context, args)
    except (InvalidArgumentError, FileNotFoundError) as exc:
        raise SystemExit(f"error: {exc}") from exc
    finally:
        update_config(max_events=previous_max_events)


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    if get_config().verbose:
        level = min(level, logging.INFO)
    configure_logging(level)
    _dispatch(args)


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
