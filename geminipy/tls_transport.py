import logging
import socket
import ssl

from .errors import (
    TransportError,
    TransportConnectError,
    TlsHandshakeError,
    SocketWriteError,
    SocketReadError,
)
from .transport import Transport

logger = logging.getLogger(__name__)


def resolve_address(host: str, port: int) -> list[tuple[str, int]]:
    """Returns every distinct (address, port) pair the host resolves to, in resolver order."""
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except socket.gaierror as e:
        raise TransportConnectError(f"DNS Failure for host '{host}'", f"{host}:{port}") from e

    addresses: list[tuple[str, int]] = []
    for family, _type, _proto, _canonname, sockaddr in infos:
        host_address = sockaddr[0]
        # Link-local IPv6 candidates only connect with their scope attached.
        if family == socket.AF_INET6 and len(sockaddr) == 4 and sockaddr[3]:
            host_address = f"{host_address}%{sockaddr[3]}"
        address = (host_address, sockaddr[1])
        if address not in addresses:
            addresses.append(address)

    return addresses


class TlsTransport(Transport):
    def __init__(self, context: ssl.SSLContext) -> None:
        self._context = context
        self._sock: ssl.SSLSocket | None = None

    def connect(self, host: str, port: int, server_name: str | None = None, timeout: float | None = None) -> None:
        if self._sock is not None:
            raise TransportError("Transport is already connected.")

        address = f"{host}:{port}"
        logger.debug("Connecting to %s (timeout=%s)", address, timeout)

        try:
            raw_sock = socket.create_connection((host, port), timeout=timeout)
        except socket.gaierror as e:
            raise TransportConnectError(f"DNS Failure for host '{host}'", address) from e
        except (OSError, OverflowError, ValueError) as e:
            raise TransportConnectError(f"Couldn't connect to address {address}: {e}", address) from e

        # The timeout only bounds connection establishment.
        raw_sock.settimeout(None)

        try:
            self._sock = self._context.wrap_socket(raw_sock, server_hostname=server_name or host)
        except OSError as e:
            raw_sock.close()
            raise TlsHandshakeError(f"TLS handshake with {address} failed: {e}", address) from e

    def write(self, data: bytes) -> int:
        if self._sock is None:
            raise TransportError("Cannot write on a disconnected transport.")

        try:
            self._sock.sendall(data)
            return len(data)
        except OSError as e:
            raise SocketWriteError(f"Failed to send request to server: {e}") from e

    def read_into(self, buffer: memoryview) -> int:
        if self._sock is None:
            raise TransportError("Cannot read from a disconnected transport.")

        try:
            return self._sock.recv_into(buffer)
        except ssl.SSLEOFError:
            # Many servers close the connection without a close_notify.
            return 0
        except OSError as e:
            raise SocketReadError(f"Failed to read response from server: {e}") from e

    def close(self) -> None:
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None
