from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verb. Also sent as a value, e.g. ``StatusCallbackMethod=POST``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value
