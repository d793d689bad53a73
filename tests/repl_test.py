import io
import os
import tempfile
from unittest import TestCase
from unittest.mock import patch

from typecalc.environment import Environment
from typecalc.repl import run_session, main


# mypy: ignore-errors
class TestSession(TestCase):

    def session(self, lines, verbose=False):
        output = []
        run_session(lines, Environment(), output.append, verbose=verbose)
        return output

    def test_results_and_errors(self):
        lines = [
            "declare_var x Int",
            "call add x",
            "",
            "call ghost Int",
            "show ghost",
            "call add Float",
            "show x",
        ]
        expect = [
            "x :: Int",
            "Called function add with return type Int",
            "Error: Undeclared Function",
            "Error: Undeclared Variable",
            "Error: Type Error",
            "x :: Int",
        ]
        self.assertEqual(expect, self.session(lines))

    def test_quit_commands(self):
        for sentinel in ("quit", "exit", "  exit\n"):
            with self.subTest(input=sentinel):
                self.assertEqual(["add :: Int -> Int"], self.session(["show add", sentinel, "show sub"]))

    def test_quit_must_be_the_whole_line(self):
        self.assertEqual(["Error: Type Error"], self.session(["quit now"]))

    def test_verbose_errors(self):
        output = self.session(["call and Int"], verbose=True)
        self.assertEqual(["Error: Type Error (Function \"and\" parameter 1 expected Bool, got Int)"], output)


class TestMain(TestCase):

    @patch("sys.stdout", new_callable=io.StringIO)
    @patch("sys.stdin", io.StringIO("declare_func f Bool Float\ncall f Bool\nexit\nshow f\n"))
    def test_interactive(self, stdout):
        self.assertEqual(0, main([]))
        self.assertEqual(
            "> f :: Bool -> Float\n> Called function f with return type Float\n> ",
            stdout.getvalue(),
        )

    @patch("sys.stdout", new_callable=io.StringIO)
    @patch("sys.stdin", io.StringIO("show div\n"))
    def test_interactive_ends_at_end_of_input(self, stdout):
        self.assertEqual(0, main(["--prompt", "$ "]))
        self.assertEqual("$ div :: Int -> Float\n$ ", stdout.getvalue())

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_script_file(self, stdout):
        with tempfile.NamedTemporaryFile("w", suffix=".tc", delete=False) as f:
            f.write("declare_var b Bool\ncall and b\ncall mul b\n")
        self.addCleanup(os.remove, f.name)

        self.assertEqual(0, main([f.name]))
        self.assertEqual(
            "b :: Bool\nCalled function and with return type Bool\nError: Type Error\n",
            stdout.getvalue(),
        )

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_missing_script_file(self, stderr):
        with self.assertRaises(SystemExit):
            main(["does/not/exist.tc"])
        self.assertIn("cannot read", stderr.getvalue())
