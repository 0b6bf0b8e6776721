from dataclasses import dataclass

from .errors import HeaderFormatError
from .status import StatusCode

MAX_META_LENGTH = 1024

_STATUS_LENGTH = 2
_SPACE_INDEX = 2
_TERMINATOR = "\r\n"


@dataclass(frozen=True)
class Header:
    status: StatusCode
    meta: str = ""

    def __str__(self) -> str:
        return f"{self.status}: {self.meta}"


def parse_header(header: str) -> Header:
    """
    Parses a raw `<STATUS><SPACE><META><CR><LF>` line into a Header.

    Every rule violation raises HeaderFormatError; there is no lenient mode.
    """
    if len(header) <= _SPACE_INDEX or header[_SPACE_INDEX] != " ":
        raise HeaderFormatError(f"Missing space after status, provided header: {header!r}")

    status, meta = header[:_SPACE_INDEX], header[_SPACE_INDEX + 1:]

    if len(status) != _STATUS_LENGTH:
        raise HeaderFormatError(f"The status must be exactly two digits, provided header: {header!r}")

    if not meta.endswith(_TERMINATOR):
        raise HeaderFormatError("Meta information for the header doesn't end in <CR><LF>")

    # Only the terminator goes, trailing spaces belong to the meta.
    meta = meta[:-len(_TERMINATOR)]

    meta_length = len(meta.encode("utf-8"))
    if meta_length > MAX_META_LENGTH:
        raise HeaderFormatError(
            f"The header's meta info was too long, maximum length is {MAX_META_LENGTH} bytes, "
            f"actual length was {meta_length} bytes"
        )

    return Header(status=StatusCode.parse(status), meta=meta)
