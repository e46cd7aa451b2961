"""Tagged success/failure result returned by the numeric parsers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from transcript_text.errors import ParseFailedError

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class ParseResult(Generic[T]):
    """Outcome of a parse: a value on success, a reason on failure.

    Interface:
      result = convert_string_to_real("1.5")
      if result:
          use(result.value)
      value = result.unwrap()  # raises ParseFailedError on failure
    """

    ok: bool
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ParseResult[T]":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, or raise ParseFailedError with the failure reason."""
        if not self.ok:
            raise ParseFailedError(self.reason)
        return self.value  # type: ignore[return-value]
