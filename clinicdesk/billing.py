"""Billing booked appointments."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from clinicdesk.appointments import Appointment
from clinicdesk.doctors import DoctorRegistry


@dataclass(frozen=True)
class Bill:
    """The charge for one appointment."""

    doctor_id: int
    patient_name: str
    date: str
    time_slot: str
    amount: float

    @property
    def appointment(self) -> Appointment:
        return Appointment(self.doctor_id, self.patient_name, self.date, self.time_slot)

    def describe(self) -> str:
        return (
            f"Doctor ID: {self.doctor_id}, Patient: {self.patient_name}, "
            f"Date: {self.date}, Time: {self.time_slot}, Amount: ${self.amount:g}"
        )


class BillingLedger:
    """All bills issued so far, in issue order."""

    def __init__(self) -> None:
        self._bills: list[Bill] = []

    def is_billed(self, appointment: Appointment) -> bool:
        return any(bill.appointment == appointment for bill in self._bills)

    def unbilled(
        self,
        registry: DoctorRegistry,
        doctor_id: int,
        appointments: Iterable[Appointment],
    ) -> list[Appointment]:
        """Return the doctor's appointments that have no bill yet."""
        registry.get(doctor_id)
        return [
            appt
            for appt in appointments
            if appt.doctor_id == doctor_id and not self.is_billed(appt)
        ]

    def bill(self, appointment: Appointment, amount: float) -> Bill:
        """Issue a bill for an appointment; each appointment is billed once."""
        if self.is_billed(appointment):
            raise ValueError(f"appointment already billed: {appointment.describe()}")
        new_bill = Bill(
            appointment.doctor_id,
            appointment.patient_name,
            appointment.date,
            appointment.time_slot,
            amount,
        )
        self._bills.append(new_bill)
        return new_bill

    def __iter__(self) -> Iterator[Bill]:
        return iter(self._bills)

    def __len__(self) -> int:
        return len(self._bills)