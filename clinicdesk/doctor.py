"""Doctors and the time slots they can be booked for."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_ids = itertools.count(1)


def _next_id() -> int:
    return next(_ids)


@dataclass(frozen=True)
class Availability:
    """A date and a time range during which a doctor can be booked."""

    date: str
    time: str

    def describe(self) -> str:
        return f"Date: {self.date}, Time: {self.time}"


@dataclass
class Doctor:
    """A doctor with a unique id and a list of bookable slots."""

    name: str
    age: int
    specialization: str
    availabilities: list[Availability] = field(default_factory=list)
    id: int = field(default_factory=_next_id)

    def __post_init__(self) -> None:
        if self.age <= 0:
            raise ValueError(f"age must be positive, got {self.age}")
        self.availabilities = [
            slot if isinstance(slot, Availability) else Availability(*slot)
            for slot in self.availabilities
        ]

    def has_slot(self, date: str, time: str) -> bool:
        """Return True if the doctor offers exactly this date and time range."""
        return Availability(date, time) in self.availabilities

    def describe(self) -> str:
        header = (
            f"ID: {self.id} | Name: {self.name} | Age: {self.age}"
            f" | Specialization: {self.specialization}"
        )
        return f"{header}\n{self.describe_availability()}"

    def describe_availability(self) -> str:
        if not self.availabilities:
            return "  No availability."
        return "\n".join(f"  {slot.describe()}" for slot in self.availabilities)