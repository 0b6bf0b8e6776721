import logging
from collections.abc import Callable
from urllib.parse import urlsplit

from .config import ClientConfig
from .errors import (
    AddressResolutionError,
    TlsHandshakeError,
    TransportConnectError,
    UrlMissingHostError,
    UrlParseError,
)
from .gemini_protocol import DEFAULT_PORT, GeminiProtocol, Response
from .tls_transport import TlsTransport, resolve_address
from .transport import Transport

logger = logging.getLogger(__name__)

Resolver = Callable[[str, int], list[tuple[str, int]]]
TransportFactory = Callable[[], Transport]


def parse_url(url: str) -> tuple[str, int]:
    """Returns the (host, port) a request for `url` must connect to."""
    target = url.removesuffix("\r\n")

    try:
        parts = urlsplit(target)
        port = parts.port
    except ValueError as e:
        raise UrlParseError(f"Failed to parse URL '{target}': {e}") from e

    if not parts.scheme:
        raise UrlParseError(f"Failed to parse URL '{target}': relative URL without a scheme")

    if not parts.hostname:
        raise UrlMissingHostError(f"The given URL didn't have a host: {target}")

    return parts.hostname, port if port is not None else DEFAULT_PORT


class GeminiClient:
    """
    Makes gemini requests, opening one connection per request.

    The client only holds immutable configuration, but `request` is not
    synchronized: share an instance across threads only behind a lock.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        resolver: Resolver | None = None,
        transport_factory: TransportFactory | None = None,
    ):
        self._config = config or ClientConfig()
        self._resolver = resolver or resolve_address

        if transport_factory is None:
            context = self._config.trust_policy.create_ssl_context()
            transport_factory = lambda: TlsTransport(context)
        self._transport_factory = transport_factory

    @property
    def config(self) -> ClientConfig:
        return self._config

    def request(self, url: str) -> Response:
        host, port = parse_url(url)
        logger.debug("Requesting %s", url.removesuffix("\r\n"))

        protocol = GeminiProtocol(self._transport_factory())
        try:
            self._connect(protocol, host, port)
            return protocol.perform_request(url)
        finally:
            protocol.disconnect()

    def _connect(self, protocol: GeminiProtocol, host: str, port: int) -> None:
        timeout = self._config.timeout
        if timeout is None:
            protocol.connect(host, port, server_name=host)
            return

        addresses = self._resolver(host, port)
        if not addresses:
            raise AddressResolutionError(f"The URL couldn't be resolved to an address: {host}:{port}")

        last_error: TransportConnectError | None = None
        for address, address_port in addresses:
            try:
                protocol.connect(address, address_port, server_name=host, timeout=timeout)
                return
            except TlsHandshakeError:
                raise
            except TransportConnectError as e:
                logger.debug("Connection to %s failed, trying next address: %s", e.address, e)
                last_error = e

        raise last_error
