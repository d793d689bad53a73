import argparse
import logging
import sys
from typing import Callable, Iterable, Iterator, TextIO

from typecalc.environment import Environment
from typecalc.errors import CalculatorError
from typecalc.interpreter import process_input

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


def run_session(lines: Iterable[str], env: Environment, write: Callable[[str], None] = print,
                verbose: bool = False) -> None:
    for raw_line in lines:
        line = raw_line.strip()
        if line in QUIT_COMMANDS:
            break

        try:
            output: str = process_input(line, env)
        except CalculatorError as error:
            logger.info("rejected %r: %s", line, error.detail or error)
            message = f"{error} ({error.detail})" if verbose and error.detail else str(error)
            write(f"Error: {message}")
            continue

        if output:
            write(output)


def prompt_lines(prompt: str, stream: TextIO) -> Iterator[str]:
    while True:
        print(prompt, end="", flush=True)
        line = stream.readline()
        if not line:
            return
        yield line


def read_file(filename: str) -> list[str]:
    with open(filename) as f:
        return f.read().splitlines()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive type-checking calculator")
    parser.add_argument("script", nargs="?", help="File of commands to run instead of reading stdin")
    parser.add_argument("--prompt", default="> ", help="Prompt shown before each interactive command")
    parser.add_argument("-v", "--verbose", action="store_true", help="Explain errors and log at debug level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    env = Environment()
    if args.script:
        try:
            lines: Iterable[str] = read_file(args.script)
        except OSError as e:
            parser.error(f"cannot read {args.script}: {e.strerror}")
    else:
        lines = prompt_lines(args.prompt, sys.stdin)

    run_session(lines, env, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
