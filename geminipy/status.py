from enum import Enum

from .errors import HeaderFormatError


class StatusCategory(Enum):
    INPUT = "1"
    SUCCESS = "2"
    REDIRECT = "3"
    TEMPORARY_FAILURE = "4"
    PERMANENT_FAILURE = "5"
    CERTIFICATE_FAILURE = "6"


class StatusCode(Enum):
    """The closed set of two digit status codes a server may answer with."""

    INPUT = "10"
    SENSITIVE_INPUT = "11"

    SUCCESS = "20"

    TEMPORARY_REDIRECT = "30"
    PERMANENT_REDIRECT = "31"

    TEMPORARY_FAILURE = "40"
    SERVER_UNAVAILABLE = "41"
    CGI_ERROR = "42"
    PROXY_ERROR = "43"
    SLOW_DOWN = "44"

    PERMANENT_FAILURE = "50"
    NOT_FOUND = "51"
    GONE = "52"
    PROXY_REQUEST_REFUSED = "53"
    BAD_REQUEST = "59"

    CLIENT_CERTIFICATE_REQUIRED = "60"
    CERTIFICATE_NOT_AUTHORIZED = "61"
    CERTIFICATE_NOT_VALID = "62"

    @classmethod
    def parse(cls, text: str) -> "StatusCode":
        if len(text) != 2 or not text.isascii() or not text.isdigit():
            raise HeaderFormatError(f"Header status code ({text}) must be exactly two digits")

        try:
            return cls(text)
        except ValueError:
            raise HeaderFormatError(f"Header status code ({text}) was not recognized") from None

    def to_wire(self) -> str:
        return self.value

    @property
    def category(self) -> StatusCategory:
        return StatusCategory(self.value[0])

    @property
    def is_input(self) -> bool:
        return self.category is StatusCategory.INPUT

    @property
    def is_success(self) -> bool:
        return self.category is StatusCategory.SUCCESS

    @property
    def is_redirect(self) -> bool:
        return self.category is StatusCategory.REDIRECT

    @property
    def is_failure(self) -> bool:
        return self.category in (
            StatusCategory.TEMPORARY_FAILURE,
            StatusCategory.PERMANENT_FAILURE,
            StatusCategory.CERTIFICATE_FAILURE,
        )

    def __str__(self) -> str:
        return self.value


def parse_status(text: str) -> StatusCode:
    return StatusCode.parse(text)
