import sys
import os
import io
import unittest
from contextlib import redirect_stderr

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from empty_policy import (
    DEFAULT_MESSAGE,
    CustomPolicy,
    FatalPolicy,
    SignalPolicy,
    as_policy,
)


class TestFatalPolicy(unittest.TestCase):
    def test_exits_with_status_one(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
            FatalPolicy()()
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn(DEFAULT_MESSAGE, stderr.getvalue())

    def test_custom_exit_code_and_message(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
            FatalPolicy(exit_code=3, message="drained")()
        self.assertEqual(ctx.exception.code, 3)
        self.assertEqual(stderr.getvalue(), "drained\n")


class TestSignalPolicy(unittest.TestCase):
    def test_returns_normally(self):
        self.assertIsNone(SignalPolicy()())

    def test_logs_at_debug(self):
        with self.assertLogs("empty_policy", level="DEBUG") as logs:
            SignalPolicy()()
        self.assertIn("pop from empty queue", logs.output[0])


class TestCustomPolicy(unittest.TestCase):
    def test_calls_handler(self):
        calls = []
        CustomPolicy(lambda: calls.append(1))()
        self.assertEqual(calls, [1])

    def test_rejects_non_callable(self):
        with self.assertRaises(TypeError):
            CustomPolicy(42)


class TestAsPolicy(unittest.TestCase):
    def test_none_is_fatal(self):
        self.assertIsInstance(as_policy(None), FatalPolicy)

    def test_policies_pass_through(self):
        for policy in (FatalPolicy(), SignalPolicy(), CustomPolicy(print)):
            self.assertIs(as_policy(policy), policy)

    def test_callable_is_wrapped(self):
        def handler():
            pass

        policy = as_policy(handler)
        self.assertIsInstance(policy, CustomPolicy)
        self.assertIs(policy.handler, handler)


if __name__ == "__main__":
    unittest.main()
