# clinicdesk

A small front-desk console for a clinic. It keeps a list of doctors and the
slots they can be booked for. It books appointments against those slots. It
raises bills for appointments that have not been billed yet. A separate
registry keeps patient records.

## Installing

```
pip install .
```

## Running the console

```
clinicdesk
```

The console reads its choices from standard input and shows a numbered menu:

```
1. Add Doctor
2. Display All Doctors
3. Search Doctor by Name
4. Update Doctor by ID
5. Delete Doctor by ID
6. Sort Doctors by Name
7. Check Doctor Availability
8. Book Appointment
9. Display Appointments
10. Generate Bill (after booking)
11. Display All Bills
0. Exit
```

The session ends when you choose `0` or when input runs out.

Three doctors are loaded at start-up, so there is something to book against:

| Name | Specialization |
| --- | --- |
| John Smith | Cardiologist |
| Alice Brown | Dermatologist |
| Clara White | Pediatrician |

An appointment is accepted only when its date and time slot exactly match one
of the doctor's listed availabilities. For example, `2025-05-24` with
`09:00 AM - 11:00 AM` matches one of John Smith's slots.

When you generate a bill, the console lists the chosen doctor's appointments
that have no bill yet. You pick one and enter an amount.

## Using it as a library

```python
from clinicdesk.doctors import DoctorRegistry, default_doctors
from clinicdesk.appointments import AppointmentBook
from clinicdesk.billing import BillingLedger

registry = DoctorRegistry(default_doctors())
doctor = registry.find_by_name("John Smith")

book = AppointmentBook()
book.book(registry, doctor.id, "Jane Doe", "2025-05-24", "09:00 AM - 11:00 AM")

ledger = BillingLedger()
pending = ledger.unbilled(registry, doctor.id, book)
ledger.bill(pending[0], 150.0)

for bill in ledger:
    print(bill.describe())
```

The modules and what they provide:

- `clinicdesk.doctor`
  - `Doctor` and `Availability`.
  - Each `Doctor` gets its own id.
  - A doctor's age must be positive; otherwise a `ValueError` is raised.
  - `Doctor.has_slot(date, time)` tells whether a slot is offered.
- `clinicdesk.doctors`
  - `DoctorRegistry` provides `add`, `get`, `find_by_name`, `remove` and `sort_by_name`.
  - `DoctorRegistry()` with no argument starts from `default_doctors()`.
  - `get` and `remove` raise `DoctorNotFoundError` for an unknown id.
- `clinicdesk.appointments`
  - `AppointmentBook.book(...)` raises `DoctorNotFoundError` for an unknown doctor.
  - It raises `InvalidSlotError` for a slot the doctor does not offer.
- `clinicdesk.billing`
  - `BillingLedger.bill(appointment, amount)` issues a `Bill`.
  - Billing the same appointment twice raises `ValueError`.
  - `is_billed` and `unbilled` report what is still outstanding.
- `clinicdesk.patients`
  - `PatientRegistry` provides `add`, `get`, `find_by_name`, `update` and `remove`. `get`, `update` and `remove` raise `PatientNotFoundError` for an unknown id.
  - `statistics()` returns the patient count and the average age, truncated to an integer. It returns `None` when there are no patients.
  - `export_lines()` yields one text line per patient.
  - `export(path)` writes those lines to a file; the default path is `patients.txt`. It returns the number of patients written.

## What it does not do

- Everything is kept in memory only. Doctors, appointments and bills are lost when the console exits.
- Patient records can only be saved as plain text through `PatientRegistry.export`.
- The console has no menu entries for patients. Patient records are managed only through `clinicdesk.patients` in Python code.

## Running the tests

```
pip install .[test]
pytest
```