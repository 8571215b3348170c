"""Violation value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """A single field-level rule failure."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
