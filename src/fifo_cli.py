"""Command line wrapper around IndexedQueue.

Usage:
    fifo-queue --version
    fifo-queue push a push b peek 2 pop length
    fifo-queue --on-empty signal pop

Each command in the script runs against one queue, in order. Commands that
produce a value print it on its own line.
"""

import logging
import sys

import click

from indexed_queue import IndexedQueue, QueueError, __version__
from empty_policy import FatalPolicy, SignalPolicy

logger = logging.getLogger(__name__)

# command name -> (minimum, maximum) number of arguments
COMMANDS = {
    "push": (1, 1),
    "pop": (0, 0),
    "peek": (0, 1),
    "insert": (2, 2),
    "remove": (1, 1),
    "length": (0, 0),
    "dump": (0, 0),
}


def _parse_position(command, token):
    try:
        return int(token)
    except ValueError:
        raise click.ClickException(f"{command}: position must be an integer, got {token!r}") from None


def parse_script(tokens):
    """Split a flat token list into (command, args) pairs."""
    steps = []
    i = 0
    while i < len(tokens):
        command = tokens[i]
        if command not in COMMANDS:
            raise click.ClickException(f"unknown command {command!r}")
        low, high = COMMANDS[command]
        args = list(tokens[i + 1:i + 1 + low])
        if len(args) < low:
            raise click.ClickException(f"{command}: expected {low} argument(s)")
        i += 1 + low
        # peek takes an optional position
        if high > low and i < len(tokens) and tokens[i] not in COMMANDS:
            args.append(tokens[i])
            i += 1
        steps.append((command, args))
    return steps


def run_step(queue, command, args):
    """Apply one command to the queue and return the lines it prints."""
    if command == "push":
        queue.push(args[0])
        return []
    if command == "pop":
        return [queue.pop()]
    if command == "peek":
        n = _parse_position(command, args[0]) if args else 1
        return [queue.peek(n)]
    if command == "insert":
        queue.insert(_parse_position(command, args[0]), args[1])
        return []
    if command == "remove":
        return [queue.remove(_parse_position(command, args[0]))]
    if command == "length":
        return [queue.length()]
    return list(queue)


@click.command(context_settings={
    "help_option_names": ["-h", "--help"],
    "allow_interspersed_args": False,
})
@click.version_option(__version__, "-V", "--version", message="%(version)s")
@click.option(
    "--on-empty",
    type=click.Choice(["fatal", "signal"]),
    default="fatal",
    show_default=True,
    help="What popping an empty queue does: exit immediately, or report an error.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.argument("script", nargs=-1)
def main(script, on_empty, verbose):
    """Run SCRIPT, a sequence of queue commands, against a fresh queue.

    Commands: push V, pop, peek [N], insert N V, remove N, length, dump.
    Positions are 1-based.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    policy = FatalPolicy() if on_empty == "fatal" else SignalPolicy()
    queue = IndexedQueue(on_empty=policy)

    for command, args in parse_script(script):
        logger.debug("%s %s", command, " ".join(args))
        try:
            lines = run_step(queue, command, args)
        except QueueError as e:
            click.echo(f"fifo-queue: {e}", err=True)
            sys.exit(1)
        for line in lines:
            click.echo(line)


if __name__ == "__main__":
    main()
