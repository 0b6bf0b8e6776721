class GeminiError(Exception):
    """Base exception for the geminipy library."""
    pass

# --- Transport Errors ---

class TransportError(GeminiError):
    """A generic error occurred in the transport layer."""
    pass

class AddressResolutionError(TransportError):
    """The host resolved to zero connectable addresses."""
    pass

class TransportConnectError(TransportError):
    """Could not establish a connection to the server."""

    def __init__(self, message: str, address: str = ""):
        super().__init__(message)
        self.address = address

class TlsHandshakeError(TransportConnectError): pass
class TlsSetupError(TransportError): pass

class StreamIoError(TransportError):
    """Reading from or writing to an established stream failed."""
    operation: str = "io"

class SocketWriteError(StreamIoError):
    operation = "send"

class SocketReadError(StreamIoError):
    operation = "read"

# --- Gemini Client Errors ---

class GeminiClientError(GeminiError):
    """A generic error occurred in the gemini client logic."""
    pass

class UrlParseError(GeminiClientError): pass
class UrlMissingHostError(GeminiClientError): pass
class HeaderFormatError(GeminiClientError): pass

# --- Document Errors ---

class GemtextFormatError(GeminiError):
    """A gemtext document contained a malformed line."""
    pass
