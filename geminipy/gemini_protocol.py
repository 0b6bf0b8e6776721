import logging
from dataclasses import dataclass

from .transport import Transport
from .header import Header, parse_header
from .status import StatusCode
from .errors import HeaderFormatError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 1965

_HEADER_TERMINATOR = b"\r\n"


@dataclass
class Response:
    header: Header
    body: bytes | None = None

    @property
    def status(self) -> StatusCode:
        return self.header.status

    @property
    def meta(self) -> str:
        return self.header.meta


def split_response(response: bytes) -> tuple[str, bytes | None]:
    """
    Splits a raw response into its header line (terminator included) and body.

    The header always ends at the first <CR><LF>; a response without one is
    malformed even when it has no body. Zero bytes after the header mean no body.
    """
    terminator_pos = response.find(_HEADER_TERMINATOR)
    if terminator_pos == -1:
        raise HeaderFormatError(
            "There must be at least 1 <CR><LF> at the end of the header, "
            "but such a sequence was not found."
        )

    header_size = terminator_pos + len(_HEADER_TERMINATOR)
    header = response[:header_size].decode("utf-8", errors="replace")
    body = response[header_size:]

    return header, bytes(body) if body else None


class GeminiProtocol:
    _READ_CHUNK_SIZE = 4096

    def __init__(self, transport: Transport):
        self._transport: Transport = transport
        self._buffer: bytearray = bytearray()

    def connect(self, host: str, port: int, server_name: str | None = None, timeout: float | None = None) -> None:
        self._transport.connect(host, port, server_name=server_name, timeout=timeout)

    def disconnect(self) -> None:
        self._transport.close()

    def perform_request(self, url: str) -> Response:
        self._build_request_line(url)
        self._transport.write(bytes(self._buffer))
        self._read_full_response()

        header, body = split_response(self._buffer)
        return Response(header=parse_header(header), body=body)

    def _build_request_line(self, url: str) -> None:
        self._buffer.clear()
        self._buffer += url.encode("utf-8")

        if not self._buffer.endswith(_HEADER_TERMINATOR):
            self._buffer += _HEADER_TERMINATOR

    def _read_full_response(self) -> None:
        self._buffer.clear()

        # The server signals the end of the body by closing the connection.
        while True:
            old_len = len(self._buffer)
            self._buffer.extend(b'\0' * self._READ_CHUNK_SIZE)
            read_view = memoryview(self._buffer)
            bytes_read = self._transport.read_into(read_view[old_len:])
            del read_view
            del self._buffer[old_len + bytes_read:]

            if bytes_read == 0:
                break

        logger.debug("Read %d response bytes", len(self._buffer))
