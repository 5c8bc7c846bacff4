"""The registry of doctors known to the clinic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from clinicdesk.doctor import Availability, Doctor


class DoctorNotFoundError(LookupError):
    """Raised when no doctor has the requested id."""

    def __init__(self, doctor_id: int) -> None:
        super().__init__(f"Doctor not found: {doctor_id}")
        self.doctor_id = doctor_id


def default_doctors() -> list[Doctor]:
    """Return the doctors a new registry starts with."""
    return [
        Doctor(
            "John Smith",
            45,
            "Cardiologist",
            [
                Availability("2025-05-24", "09:00 AM - 11:00 AM"),
                Availability("2025-05-25", "02:00 PM - 04:00 PM"),
            ],
        ),
        Doctor(
            "Alice Brown",
            50,
            "Dermatologist",
            [Availability("2025-05-26", "10:00 AM - 12:00 PM")],
        ),
        Doctor(
            "Clara White",
            38,
            "Pediatrician",
            [Availability("2025-05-27", "01:00 PM - 03:00 PM")],
        ),
    ]


class DoctorRegistry:
    """An ordered collection of doctors, looked up by id or name."""

    def __init__(self, doctors: Iterable[Doctor] | None = None) -> None:
        self._doctors: list[Doctor] = list(
            default_doctors() if doctors is None else doctors
        )

    def add(self, doctor: Doctor) -> Doctor:
        self._doctors.append(doctor)
        return doctor

    def get(self, doctor_id: int) -> Doctor:
        for doctor in self._doctors:
            if doctor.id == doctor_id:
                return doctor
        raise DoctorNotFoundError(doctor_id)

    def find_by_name(self, name: str) -> Doctor | None:
        """Return the first doctor with exactly this name, or None."""
        return next((d for d in self._doctors if d.name == name), None)

    def remove(self, doctor_id: int) -> Doctor:
        for index, doctor in enumerate(self._doctors):
            if doctor.id == doctor_id:
                return self._doctors.pop(index)
        raise DoctorNotFoundError(doctor_id)

    def sort_by_name(self) -> bool:
        """Sort doctors by name; return False if there were too few to sort."""
        if len(self._doctors) < 2:
            return False
        self._doctors.sort(key=lambda doctor: doctor.name)
        return True

    def __iter__(self) -> Iterator[Doctor]:
        return iter(self._doctors)

    def __len__(self) -> int:
        return len(self._doctors)