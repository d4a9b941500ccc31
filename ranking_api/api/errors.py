from __future__ import annotations

from typing import Any


class APIError(Exception):
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


def range_too_long(max_length: int) -> APIError:
    return APIError(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=400,
        details={
            "errors": [
                {
                    "loc": ["query", "to"],
                    "msg": f"to - from must not exceed {max_length}",
                }
            ]
        },
    )
