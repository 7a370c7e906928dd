"""ISBN value object with check-digit validation."""

from __future__ import annotations

import re
from typing import ClassVar, Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator

_SEPARATORS = re.compile(r"[-\s]")

ISBNFormat = Literal["isbn10", "isbn13"]


def strip_isbn(value: str) -> str:
    """Remove hyphens and spaces, uppercase X."""
    return _SEPARATORS.sub("", str(value)).upper()


def isbn10_check_digit(body: str) -> str:
    """Check character for the first nine digits of an ISBN-10 (weights 10..2, mod 11)."""
    remainder = sum(int(digit) * weight for digit, weight in zip(body, range(10, 1, -1))) % 11
    check = (11 - remainder) % 11
    return "X" if check == 10 else str(check)


def isbn13_check_digit(body: str) -> str:
    """Check digit for the first twelve digits of an ISBN-13 (weights 1,3,1,3..., mod 10)."""
    weighted = sum(int(digit) * (3 if i % 2 else 1) for i, digit in enumerate(body))
    return str(-weighted % 10)


class ISBN(BaseModel):
    """
    A validated ISBN-10 or ISBN-13.

    ``value`` holds only digits (and a trailing X for ISBN-10). Two ISBNs
    for the same book hash alike whichever format they were given in.
    """

    value: str = Field(..., description="Digits only, with X allowed as the ISBN-10 check")
    format: ISBNFormat

    PATTERNS: ClassVar[dict[str, re.Pattern[str]]] = {
        "isbn10": re.compile(r"^\d{9}[\dX]$"),
        "isbn13": re.compile(r"^97[89]\d{10}$"),
    }

    @field_validator("value", mode="before")
    @classmethod
    def _strip(cls, v: str) -> str:
        return strip_isbn(v)

    @model_validator(mode="after")
    def _check(self) -> Self:
        label = "ISBN-10" if self.format == "isbn10" else "ISBN-13"
        if not self.PATTERNS[self.format].match(self.value):
            raise ValueError(f"Invalid {label} format: {self.value}")

        body, check = self.value[:-1], self.value[-1]
        expected = isbn10_check_digit(body) if self.format == "isbn10" else isbn13_check_digit(body)
        if check != expected:
            raise ValueError(f"Invalid {label} checksum: {self.value}")
        return self

    @classmethod
    def parse(cls, value: str) -> ISBN:
        """Parse an ISBN string, picking the format from its length."""
        digits = strip_isbn(value)
        formats: dict[int, ISBNFormat] = {10: "isbn10", 13: "isbn13"}
        if len(digits) not in formats:
            raise ValueError(f"Invalid ISBN length: {len(digits)}")
        return cls(value=digits, format=formats[len(digits)])

    def to_isbn13(self) -> ISBN:
        if self.format == "isbn13":
            return self
        body = "978" + self.value[:9]
        return ISBN(value=body + isbn13_check_digit(body), format="isbn13")

    def to_isbn10(self) -> ISBN | None:
        """The ISBN-10 form, or None for 979-prefixed numbers that have none."""
        if self.format == "isbn10":
            return self
        if not self.value.startswith("978"):
            return None
        body = self.value[3:12]
        return ISBN(value=body + isbn10_check_digit(body), format="isbn10")

    def __str__(self) -> str:
        return self.value

    def __hash__(self) -> int:
        return hash(self.to_isbn13().value)
