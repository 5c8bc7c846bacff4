"""Booking appointments against doctors' available slots."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from clinicdesk.doctors import DoctorRegistry


class InvalidSlotError(ValueError):
    """Raised when the requested date and time are not offered by the doctor."""


@dataclass(frozen=True)
class Appointment:
    """A patient's booking with a doctor for one slot."""

    doctor_id: int
    patient_name: str
    date: str
    time_slot: str

    def describe(self) -> str:
        return (
            f"Doctor ID: {self.doctor_id}, Patient: {self.patient_name}, "
            f"Date: {self.date}, Time: {self.time_slot}"
        )


class AppointmentBook:
    """All appointments booked so far, in booking order."""

    def __init__(self) -> None:
        self._appointments: list[Appointment] = []

    def book(
        self,
        registry: DoctorRegistry,
        doctor_id: int,
        patient_name: str,
        date: str,
        time_slot: str,
    ) -> Appointment:
        """Book a slot; raise if the doctor is unknown or the slot is not offered."""
        doctor = registry.get(doctor_id)
        if not doctor.has_slot(date, time_slot):
            raise InvalidSlotError(
                f"Dr. {doctor.name} has no slot {time_slot!r} on {date!r}"
            )
        appointment = Appointment(doctor_id, patient_name, date, time_slot)
        self._appointments.append(appointment)
        return appointment

    def __iter__(self) -> Iterator[Appointment]:
        return iter(self._appointments)

    def __len__(self) -> int:
        return len(self._appointments)