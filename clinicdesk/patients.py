"""Patient records and the registry that keeps them."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

_ids = itertools.count(1)


def _next_id() -> int:
    return next(_ids)


@dataclass
class Patient:
    """A patient with a unique id."""

    name: str
    age: int
    gender: str
    disease: str
    id: int = field(default_factory=_next_id)

    def describe(self) -> str:
        return (
            f"ID: {self.id} | NAME: {self.name} | AGE: {self.age}"
            f" | GENDER: {self.gender} | DISEASE: {self.disease}"
        )


class PatientNotFoundError(LookupError):
    """Raised when no patient has the requested id."""

    def __init__(self, patient_id: int) -> None:
        super().__init__(f"No patient found with ID: {patient_id}")
        self.patient_id = patient_id


def _truncating_mean(total: int, count: int) -> int:
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient


class PatientRegistry:
    """An ordered collection of patients, looked up by id or name."""

    def __init__(self) -> None:
        self._patients: list[Patient] = []

    def add(self, patient: Patient) -> Patient:
        self._patients.append(patient)
        return patient

    def get(self, patient_id: int) -> Patient:
        for patient in self._patients:
            if patient.id == patient_id:
                return patient
        raise PatientNotFoundError(patient_id)

    def find_by_name(self, name: str) -> Patient | None:
        """Return the first patient with exactly this name, or None."""
        return next((p for p in self._patients if p.name == name), None)

    def remove(self, patient_id: int) -> Patient:
        for index, patient in enumerate(self._patients):
            if patient.id == patient_id:
                return self._patients.pop(index)
        raise PatientNotFoundError(patient_id)

    def update(
        self, patient_id: int, name: str, age: int, gender: str, disease: str
    ) -> Patient:
        """Replace every detail of a patient except the id."""
        patient = self.get(patient_id)
        patient.name = name
        patient.age = age
        patient.gender = gender
        patient.disease = disease
        return patient

    def export_lines(self) -> Iterator[str]:
        """Yield one line of text per patient, numbered from 1."""
        for number, patient in enumerate(self._patients, start=1):
            yield (
                f"Patient {number}: ID: {patient.id}, Name: {patient.name}, "
                f"Age: {patient.age}, Gender: {patient.gender}, "
                f"Disease: {patient.disease}"
            )

    def export(self, path: str | Path = "patients.txt") -> int:
        """Write all patients to a text file; return the number written."""
        lines = list(self.export_lines())
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in lines)
        return len(lines)

    def statistics(self) -> tuple[int, int] | None:
        """Return (count, average age truncated to an integer), or None if empty."""
        if not self._patients:
            return None
        count = len(self._patients)
        total = sum(patient.age for patient in self._patients)
        return count, _truncating_mean(total, count)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __len__(self) -> int:
        return len(self._patients)