# Transport failures are not wrapped here: the last httpx.TransportError
# is re-raised to the caller unchanged.


class UserClientError(Exception):
    """Base exception for user client errors"""

    pass


class SerializationError(UserClientError):
    """Raised when a User cannot be encoded to JSON"""

    pass


class UnexpectedStatusError(UserClientError):
    """Raised when the response status differs from the operation's success status"""

    def __init__(self, status_code: int, reason_phrase: str, expected_status: int):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.expected_status = expected_status
        super().__init__(f"unexpected status: {self.status_line}")

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason_phrase}"


class DecodeError(UserClientError):
    """Raised when a response body is not a JSON encoded User"""

    pass
