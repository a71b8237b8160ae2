from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Protocol, TextIO, Union


class Console(Protocol):
    def read_line(self) -> bytes:
        """Block for one line of input as bytes, without its terminator.

        Raises ``OSError``/``EOFError`` (or ``ValueError`` for undecodable
        text) on failure.
        """
        ...

    def write_char(self, ch: str) -> None:
        ...


class StreamConsole:
    """Console over text streams (stdin/stdout unless given).

    Input is read from the binary buffer underneath ``stdin`` when there is
    one, so the line's bytes reach the program undecoded.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, *, prompt: str = ""):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def read_line(self) -> bytes:
        if self.prompt:
            self.stdout.write(self.prompt)
            self.stdout.flush()
        raw = getattr(self.stdin, "buffer", None)
        if raw is not None:
            line = raw.readline()
        else:
            line = self.stdin.readline().encode("utf-8")
        if not line:
            raise EOFError("end of input")
        return line.rstrip(b'\r\n')

    def write_char(self, ch: str) -> None:
        self.stdout.write(ch)
        self.stdout.flush()


class BufferedConsole:
    """Scripted input lines and captured output, for embedding a run.

    ``str`` lines are UTF-8 encoded; ``bytes`` lines are used as given.
    """

    def __init__(self, lines: Iterable[Union[str, bytes]] = ()):
        self._lines: List[bytes] = [
            line.encode("utf-8") if isinstance(line, str) else bytes(line) for line in lines
        ]
        self._output: List[str] = []

    def read_line(self) -> bytes:
        if not self._lines:
            raise EOFError("no more input lines")
        return self._lines.pop(0).rstrip(b'\r\n')

    def write_char(self, ch: str) -> None:
        self._output.append(ch)

    @property
    def output(self) -> str:
        return ''.join(self._output)
