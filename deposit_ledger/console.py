"""Console input/output for the interactive menu."""

import sys
from decimal import Decimal
from typing import TextIO

from deposit_ledger.exceptions import InputClosedError


def format_amount(value: Decimal) -> str:
    """Render an amount in plain notation without trailing zeros."""
    if value == 0:
        return "0"
    return f"{value.normalize():f}"


class Console:
    """Line-oriented console bound to stdin, stdout and stderr.

    Input is consumed one whitespace-separated token at a time. Blank lines
    are skipped and extra words on a line are kept for the next read, so
    ``"Anna 2"`` answers both the name and the strategy prompt.

    Streams default to the ``sys`` ones, looked up on every call.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._pending: list[str] = []

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def info(self, message: str) -> None:
        """Write a line to stdout."""
        print(message, file=self.stdout)

    def error(self, message: str) -> None:
        """Write a line to stderr."""
        print(message, file=self.stderr)

    def prompt(self, text: str) -> str:
        """Show ``text`` and return the next input token.

        Raises
        ------
        InputClosedError
            If stdin reaches end of file before a token is available.
        """
        self.stdout.write(text)
        self.stdout.flush()
        return self.read_token()

    def read_token(self) -> str:
        """Return the next whitespace-separated token from stdin."""
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise InputClosedError("Standard input closed")
            self._pending.extend(line.split())
        return self._pending.pop(0)
