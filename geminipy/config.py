import os
import ssl
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .errors import TlsSetupError

MAX_TIMEOUT = 86400.0


class TrustPolicy(Enum):
    """
    How the server's TLS certificate is treated.

    ACCEPT_ANY is the default because Gemini servers overwhelmingly use
    self-signed certificates and clients are expected to trust on first use.
    It disables certificate and hostname checks entirely; it is an ecosystem
    convention, not a general security recommendation. Use VERIFY to get the
    platform's default certificate validation.
    """
    ACCEPT_ANY = "accept-any"
    VERIFY = "verify"

    def create_ssl_context(self) -> ssl.SSLContext:
        try:
            if self is TrustPolicy.VERIFY:
                return ssl.create_default_context()

            context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
            return context
        except (ssl.SSLError, OSError) as e:
            raise TlsSetupError(f"Failed to create TLS context: {e}") from e


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Only bounds connection establishment, reads block until the server closes.
    timeout: float | None = Field(default=None, gt=0, le=MAX_TIMEOUT, allow_inf_nan=False)
    trust_policy: TrustPolicy = TrustPolicy.ACCEPT_ANY

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Builds a config from GEMINIPY_TIMEOUT and GEMINIPY_TRUST_POLICY."""
        timeout = os.environ.get("GEMINIPY_TIMEOUT")
        trust_policy = os.environ.get("GEMINIPY_TRUST_POLICY", TrustPolicy.ACCEPT_ANY.value)

        return cls(timeout=timeout or None, trust_policy=trust_policy)
