"""Interactive read-eval-print loop around the expression parser."""
from enum import Enum
import io
import sys
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mini_calculator.common.errors import CalculatorError
from mini_calculator.common.logger import logger
from mini_calculator.common.parser import ExpressionParser


BANNER: str = "\n".join(
    [
        "===============================================",
        " Python Mini Calculator (CLI)",
        " - Enter: <op> <a> <b>  e.g. '+ 2 3' or 'mul 3 4'",
        " - Supported ops: +, -, *, /, ^  (add, sub, mul, div, pow)",
        " - Type 'exit' to quit",
        "===============================================",
    ]
)


class Termination(str, Enum):
    """Why the loop stopped. Both reasons are a successful exit."""

    END_OF_STREAM = "end_of_stream"
    EXIT_COMMAND = "exit_command"


class CalculatorRepl(BaseModel):
    """
    Line-oriented calculator session.

    Lifecycle:
        - Prints the banner once
        - Prompts, reads one line and evaluates it, until told to stop
        - Stops on end-of-stream or on an exit command, printing a farewell either way

    Evaluation errors are reported on the error stream and never end the session.
    """

    # Allow arbitrary types like io.TextIOBase streams
    model_config = ConfigDict(arbitrary_types_allowed=True)

    stdin: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream commands are read from")
    stdout: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream for banner, prompts and results")
    stderr: io.TextIOBase = Field(default_factory=lambda: sys.stderr, description="Stream for evaluation errors")

    prompt: str = Field(default="> ", description="Prompt written before each read")
    error_prefix: str = Field(default="Error: ", description="Prefix for evaluation error lines")
    farewell: str = Field(default="Goodbye!", description="Line printed when the session ends")
    exit_commands: Tuple[str, ...] = Field(
        default=("exit", "quit"), min_length=1, description="Commands ending the session, matched case-insensitively"
    )

    def _read_line(self) -> Optional[str]:
        """
        Prompt and block for one line of input.

        :return: The line without surrounding whitespace, or None at end-of-stream
        :rtype: Optional[str]
        """
        self.stdout.write(self.prompt)
        # The prompt must be visible before blocking on input
        self.stdout.flush()

        line: str = self.stdin.readline()
        # readline() returns "" only at end-of-stream, a blank line is still "\n"
        if not line:
            return None
        return line.strip()

    def _is_exit_command(self, line: str) -> bool:
        return line.casefold() in {command.casefold() for command in self.exit_commands}

    def _dispatch(self, line: str) -> None:
        """
        Evaluate one command and print its result or error.

        :param str line: Trimmed command line
        """
        logger.debug(f"🧮 Evaluating: {line!r}")
        try:
            output: str = ExpressionParser.evaluate(line)
        except CalculatorError as exc:
            logger.debug(f"🧮❌ {type(exc).__name__}: {exc}")
            print(f"{self.error_prefix}{exc}", file=self.stderr)
            return
        print(output, file=self.stdout)

    def run(self) -> Termination:
        """
        Print the banner and run the loop until it terminates.

        :return: Reason the loop ended
        :rtype: Termination
        """
        print(BANNER, file=self.stdout)

        while True:
            line: Optional[str] = self._read_line()

            if line is None:
                # The prompt line is still open
                print(f"\n{self.farewell}", file=self.stdout)
                reason = Termination.END_OF_STREAM
                break

            if self._is_exit_command(line):
                print(self.farewell, file=self.stdout)
                reason = Termination.EXIT_COMMAND
                break

            self._dispatch(line)

        self.stdout.flush()
        logger.debug(f"👋 Session ended: {reason.value}")
        return reason
