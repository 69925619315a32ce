from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ERROR_CODE_NEGATIVE_COUNT = "NEGATIVE_COUNT"
ERROR_CODE_INVALID_COUNT = "INVALID_COUNT"
ERROR_CODE_EMPTY_REDUCE = "EMPTY_REDUCE"
ERROR_CODE_UNSUPPORTED_COLLECTION = "UNSUPPORTED_COLLECTION"
ERROR_CODE_INVALID_SETTING = "INVALID_SETTING"


@dataclass(slots=True)
class InvalidArgumentError(ValueError):
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


InvalidArgument = InvalidArgumentError


VALID_ERROR_CODES = {
    ERROR_CODE_NEGATIVE_COUNT,
    ERROR_CODE_INVALID_COUNT,
    ERROR_CODE_EMPTY_REDUCE,
    ERROR_CODE_UNSUPPORTED_COLLECTION,
    ERROR_CODE_INVALID_SETTING,
}


def check_count(n: Any, *, operation: str) -> int:
    # bool is an int subclass but never a meaningful count.
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(
            code=ERROR_CODE_INVALID_COUNT,
            message=f"{operation}() count must be an integer, got {type(n).__name__}",
            details={"operation": operation, "count": repr(n)},
        )
    if n < 0:
        raise InvalidArgumentError(
            code=ERROR_CODE_NEGATIVE_COUNT,
            message=f"{operation}() count must be >= 0, got {n}",
            details={"operation": operation, "count": n},
        )
    return n


__all__ = [
    "ERROR_CODE_EMPTY_REDUCE",
    "ERROR_CODE_INVALID_COUNT",
    "ERROR_CODE_INVALID_SETTING",
    "ERROR_CODE_NEGATIVE_COUNT",
    "ERROR_CODE_UNSUPPORTED_COLLECTION",
    "VALID_ERROR_CODES",
    "InvalidArgument",
    "InvalidArgumentError",
    "check_count",
]
