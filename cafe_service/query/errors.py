from __future__ import annotations


class CafeQueryError(Exception):
    """Client input error; ``message`` is sent back verbatim as the body."""

    message: str = "bad request"
    status_code: int = 400

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)


class UnknownCityError(CafeQueryError):
    message = "unknown city"


class InvalidCountError(CafeQueryError):
    message = "incorrect count"
