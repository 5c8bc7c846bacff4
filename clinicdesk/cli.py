"""Interactive console for managing doctors, appointments and bills."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from clinicdesk.appointments import AppointmentBook, InvalidSlotError
from clinicdesk.billing import BillingLedger
from clinicdesk.doctor import Availability, Doctor
from clinicdesk.doctors import DoctorNotFoundError, DoctorRegistry

_MENU = (
    "\n--- Hospital Management Menu ---\n"
    "1. Add Doctor\n"
    "2. Display All Doctors\n"
    "3. Search Doctor by Name\n"
    "4. Update Doctor by ID\n"
    "5. Delete Doctor by ID\n"
    "6. Sort Doctors by Name\n"
    "7. Check Doctor Availability\n"
    "8. Book Appointment\n"
    "9. Display Appointments\n"
    "10. Generate Bill (after booking)\n"
    "11. Display All Bills\n"
    "0. Exit\n"
)


class HospitalConsole:
    """A menu-driven session over a doctor registry, appointments and bills."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.doctors = DoctorRegistry()
        self.appointments = AppointmentBook()
        self.bills = BillingLedger()
        self._actions: dict[int, Callable[[], None]] = {
            1: self._add_doctor,
            2: self._display_doctors,
            3: self._search_doctor,
            4: self._update_doctor,
            5: self._delete_doctor,
            6: self._sort_doctors,
            7: self._check_availability,
            8: self._book_appointment,
            9: self._display_appointments,
            10: self._generate_bill,
            11: self._display_bills,
        }

    def run(self) -> None:
        """Show the menu and handle choices until exit or end of input."""
        try:
            while True:
                self._write(_MENU)
                choice = self._ask_int("Enter your choice: ")
                if choice == 0:
                    self._say("Exiting program...")
                    return
                action = self._actions.get(choice) if choice is not None else None
                if action is None:
                    self._say("Invalid choice.")
                else:
                    action()
        except EOFError:
            return

    # Input and output helpers

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _say(self, text: str) -> None:
        self._write(f"{text}\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def _ask_validated(
        self, prompt: str, retry: str, accept: Callable[[int], bool]
    ) -> int:
        value = self._ask_int(prompt)
        while value is None or not accept(value):
            value = self._ask_int(retry)
        return value

    def _ask_doctor(self, prompt: str) -> Doctor | None:
        doctor_id = self._ask_int(prompt)
        try:
            if doctor_id is None:
                raise DoctorNotFoundError(0)
            return self.doctors.get(doctor_id)
        except DoctorNotFoundError:
            self._say("Doctor not found.")
            return None

    def _ask_age(self) -> int:
        return self._ask_validated(
            "Enter doctor age: ", "Invalid age, try again: ", lambda age: age > 0
        )

    def _ask_slots(self) -> list[Availability]:
        count = self._ask_validated(
            "Enter number of availability slots: ",
            "Invalid input. Enter non-negative integer: ",
            lambda n: n >= 0,
        )
        return [
            Availability(
                self._ask("Enter date (e.g., 2025-05-24): "),
                self._ask("Enter time (e.g., 09:00 AM - 11:00 AM): "),
            )
            for _ in range(count)
        ]

    # Menu actions

    def _add_doctor(self) -> None:
        name = self._ask("Enter doctor name: ")
        age = self._ask_age()
        specialization = self._ask("Enter specialization: ")
        slots = self._ask_slots()
        doctor = self.doctors.add(Doctor(name, age, specialization, slots))
        self._say(f"Doctor added successfully. ID: {doctor.id}")

    def _display_doctors(self) -> None:
        if not len(self.doctors):
            self._say("No doctors to display.")
            return
        for number, doctor in enumerate(self.doctors, start=1):
            self._say(f"Doctor {number}:")
            self._say(doctor.describe())

    def _search_doctor(self) -> None:
        if not len(self.doctors):
            self._say("No doctors to search.")
            return
        doctor = self.doctors.find_by_name(self._ask("Enter name to search: "))
        if doctor is None:
            self._say("No doctor found with that name.")
        else:
            self._say("Doctor found:")
            self._say(doctor.describe())

    def _update_doctor(self) -> None:
        if not len(self.doctors):
            self._say("No doctors to update.")
            return
        doctor = self._ask_doctor("Enter doctor ID to update: ")
        if doctor is None:
            return
        self._say("Updating doctor info:")
        doctor.name = self._ask("Enter doctor name: ")
        doctor.age = self._ask_age()
        doctor.specialization = self._ask("Enter specialization: ")
        self._say("Current availability:")
        self._say(doctor.describe_availability())
        answer = self._ask("Do you want to overwrite availability? (y/n): ").strip()
        if answer[:1] in ("y", "Y"):
            doctor.availabilities = self._ask_slots()
            self._say("Availability updated.")
        else:
            self._say("Availability not changed.")
        self._say("Doctor updated.")

    def _delete_doctor(self) -> None:
        if not len(self.doctors):
            self._say("No doctors to delete.")
            return
        doctor_id = self._ask_int("Enter doctor ID to delete: ")
        try:
            if doctor_id is None:
                raise DoctorNotFoundError(0)
            self.doctors.remove(doctor_id)
        except DoctorNotFoundError:
            self._say("Doctor not found.")
        else:
            self._say("Doctor deleted.")

    def _sort_doctors(self) -> None:
        if self.doctors.sort_by_name():
            self._say("Doctors sorted by name.")
        else:
            self._say("Not enough doctors to sort.")

    def _check_availability(self) -> None:
        if not len(self.doctors):
            self._say("No doctors available.")
            return
        doctor = self._ask_doctor("Enter doctor ID to check availability: ")
        if doctor is not None:
            self._say(doctor.describe_availability())

    def _book_appointment(self) -> None:
        doctor = self._ask_doctor("Enter doctor ID to book appointment: ")
        if doctor is None:
            return
        self._say(f"Available slots for Dr. {doctor.name}:")
        self._say(doctor.describe_availability())
        patient_name = self._ask("Enter patient name: ")
        date = self._ask("Enter date (YYYY-MM-DD): ")
        time_slot = self._ask("Enter time slot (e.g., 09:00 AM - 11:00 AM): ")
        try:
            self.appointments.book(self.doctors, doctor.id, patient_name, date, time_slot)
        except InvalidSlotError:
            self._say("Invalid date or time slot. Appointment not booked.")
        else:
            self._say("Appointment booked successfully.")

    def _display_appointments(self) -> None:
        if not len(self.appointments):
            self._say("No appointments booked yet.")
            return
        self._say("All Appointments:")
        for appointment in self.appointments:
            self._say(appointment.describe())

    def _generate_bill(self) -> None:
        doctor = self._ask_doctor("Enter doctor ID for billing: ")
        if doctor is None:
            return
        pending = self.bills.unbilled(self.doctors, doctor.id, self.appointments)
        if not pending:
            self._say("No unbilled appointments found for this doctor.")
            return
        self._say(f"Appointments for Dr. {doctor.name}:")
        for number, appt in enumerate(pending, start=1):
            self._say(
                f"{number}. Patient: {appt.patient_name}, "
                f"Date: {appt.date}, Time: {appt.time_slot}"
            )
        index = self._ask_int("Select appointment number to bill: ")
        if index is None or not 1 <= index <= len(pending):
            self._say("Invalid selection.")
            return
        try:
            amount = float(self._ask("Enter billing amount: ").strip())
        except ValueError:
            self._say("Invalid amount.")
            return
        self.bills.bill(pending[index - 1], amount)
        self._say("Bill generated successfully.")

    def _display_bills(self) -> None:
        if not len(self.bills):
            self._say("No bills generated yet.")
            return
        self._say("All Bills:")
        for bill in self.bills:
            self._say(bill.describe())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="clinicdesk",
        description="Manage doctors, appointments and bills interactively.",
    )
    parser.parse_args(argv)
    HospitalConsole(sys.stdin, sys.stdout).run()
    return 0