"""Error type shared by the codec and the transfer layer."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    FILE_TOO_LARGE = "E_FILE_TOO_LARGE"
    INVALID_CONTAINER = "E_INVALID_CONTAINER"
    IO = "E_IO"
    UNDERLYING_FORMAT = "E_UNDERLYING_FORMAT"


MESSAGES = {
    ErrorKind.FILE_TOO_LARGE: "File size is too large, maximum file size is 4 GB",
    ErrorKind.INVALID_CONTAINER: "Invalid wav file",
    ErrorKind.IO: "IO error",
    ErrorKind.UNDERLYING_FORMAT: "Header format error",
}


class Data2SoundError(Exception):
    """Failure of an encode/decode operation, tagged with its kind.

    ``cause`` holds the originating exception for IO and format failures;
    it is also chained as ``__cause__`` by the raising site.
    """

    def __init__(
        self,
        kind: ErrorKind,
        detail: str | None = None,
        cause: BaseException | None = None,
    ):
        self.kind = kind
        self.detail = detail
        self.cause = cause
        super().__init__(self._render())

    def _render(self) -> str:
        msg = MESSAGES[self.kind]
        if self.detail:
            msg = f"{msg}, {self.detail}"
        if self.cause is not None:
            msg = f"{msg}: {self.cause}"
        return msg

    @property
    def code(self) -> str:
        return self.kind.value


def io_error(err: OSError) -> Data2SoundError:
    return Data2SoundError(ErrorKind.IO, cause=err)
