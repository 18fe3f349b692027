"""What an IndexedQueue does when it is popped while empty.

A policy is any zero-argument callable. The queue calls it first and then
raises EmptyQueueError, so a policy that returns normally turns the empty
pop into an ordinary exception, while FatalPolicy ends the process before
that happens.
"""

import logging
import sys

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "fifo-queue: FIFO is empty!"


class FatalPolicy:
    """Report to stderr and terminate the calling process."""

    def __init__(self, exit_code=1, message=DEFAULT_MESSAGE):
        self.exit_code = exit_code
        self.message = message

    def __call__(self):
        print(self.message, file=sys.stderr)
        logger.debug("empty pop is fatal, exiting with status %s", self.exit_code)
        raise SystemExit(self.exit_code)

    def __repr__(self):
        return f"FatalPolicy(exit_code={self.exit_code!r})"


class SignalPolicy:
    """Do nothing; the caller sees EmptyQueueError."""

    def __call__(self):
        logger.debug("pop from empty queue")

    def __repr__(self):
        return "SignalPolicy()"


class CustomPolicy:
    def __init__(self, handler):
        if not callable(handler):
            raise TypeError("empty handler must be callable")
        self.handler = handler

    def __call__(self):
        self.handler()

    def __repr__(self):
        return f"CustomPolicy({self.handler!r})"


def as_policy(handler):
    """Coerce None, a policy or a plain callable into a policy."""
    if handler is None:
        return FatalPolicy()
    if isinstance(handler, (FatalPolicy, SignalPolicy, CustomPolicy)):
        return handler
    return CustomPolicy(handler)
