from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int


CronErrorKind = Literal["field", "expression", "calendar"]


class CronError(Exception):
    kind: CronErrorKind
    span: Span | None
    input_text: str | None

    def __init__(
        self,
        kind: CronErrorKind,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.span = span
        self.input_text = input_text

    @classmethod
    def field(cls, message: str) -> CronError:
        return cls("field", message)

    @classmethod
    def expression(
        cls,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> CronError:
        return cls("expression", message, span, input_text)

    @classmethod
    def calendar(cls, message: str) -> CronError:
        return cls("calendar", message)

    def display_rich(self) -> str:
        if self.kind == "expression" and self.span and self.input_text:
            out = f"error: {self}\n"
            out += f"  {self.input_text}\n"
            padding = " " * (self.span.start + 2)
            underline = "^" * max(self.span.end - self.span.start, 1)
            return out + padding + underline
        return f"error: {self}"
