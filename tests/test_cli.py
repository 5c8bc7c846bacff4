import io

import pytest

from clinicdesk.cli import HospitalConsole, main


def run_console(script):
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(script), out)
    console.run()
    return console, out.getvalue()


def doctor_ids(console):
    return [d.id for d in console.doctors]


def test_exit_immediately():
    _, output = run_console("0\n")
    assert output.endswith("Exiting program...\n")
    assert "--- Hospital Management Menu ---" in output


def test_invalid_choice():
    _, output = run_console("42\nabc\n0\n")
    assert output.count("Invalid choice.") == 2


def test_end_of_input_stops():
    _, output = run_console("")
    assert output.endswith("Enter your choice: ")
    assert "Exiting program..." not in output


def test_display_all_doctors():
    _, output = run_console("2\n0\n")
    assert "Doctor 1:" in output
    assert "Doctor 3:" in output
    assert "Name: John Smith" in output
    assert "  Date: 2025-05-27, Time: 01:00 PM - 03:00 PM" in output


def test_add_doctor_retries_age():
    script = "1\nBob Grey\n-3\nx\n40\nSurgeon\n1\n2025-06-01\n10:00 AM - 11:00 AM\n0\n"
    console, output = run_console(script)
    assert output.count("Invalid age, try again: ") == 2
    doctor = console.doctors.find_by_name("Bob Grey")
    assert doctor.age == 40
    assert doctor.has_slot("2025-06-01", "10:00 AM - 11:00 AM")
    assert f"Doctor added successfully. ID: {doctor.id}" in output
    assert len(console.doctors) == 4


def test_search_doctor():
    _, output = run_console("3\nAlice Brown\n3\nNobody\n0\n")
    assert "Doctor found:" in output
    assert "Specialization: Dermatologist" in output
    assert "No doctor found with that name." in output


def test_delete_doctor():
    console = HospitalConsole(io.StringIO(), io.StringIO())
    target = doctor_ids(console)[1]
    out = io.StringIO()
    console._in = io.StringIO(f"5\n{target}\n5\n{target}\n0\n")
    console._out = out
    console.run()
    assert target not in doctor_ids(console)
    assert out.getvalue().count("Doctor deleted.") == 1
    assert "Doctor not found." in out.getvalue()


def test_sort_doctors():
    console, output = run_console("6\n0\n")
    names = [d.name for d in console.doctors]
    assert names == sorted(names)
    assert "Doctors sorted by name." in output


def test_update_doctor_overwrite_availability():
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(), out)
    first = doctor_ids(console)[0]
    console._in = io.StringIO(
        f"4\n{first}\nJohn Smyth\n46\nSurgeon\ny\n1\n2025-07-01\n08:00 AM - 09:00 AM\n0\n"
    )
    console.run()
    doctor = console.doctors.get(first)
    assert doctor.name == "John Smyth"
    assert doctor.specialization == "Surgeon"
    assert doctor.has_slot("2025-07-01", "08:00 AM - 09:00 AM")
    assert not doctor.has_slot("2025-05-24", "09:00 AM - 11:00 AM")
    assert "Availability updated." in out.getvalue()


def test_update_doctor_keep_availability():
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(), out)
    first = doctor_ids(console)[0]
    console._in = io.StringIO(f"4\n{first}\nJohn Smith\n45\nCardiologist\nn\n0\n")
    console.run()
    assert console.doctors.get(first).has_slot("2025-05-24", "09:00 AM - 11:00 AM")
    assert "Availability not changed." in out.getvalue()


def test_check_availability_unknown_doctor():
    _, output = run_console("7\n-1\n0\n")
    assert "Doctor not found." in output


def book_script(doctor_id, date="2025-05-24", time="09:00 AM - 11:00 AM"):
    return f"8\n{doctor_id}\nPat Doe\n{date}\n{time}\n"


def test_book_valid_appointment():
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(), out)
    first = doctor_ids(console)[0]
    console._in = io.StringIO(book_script(first) + "9\n0\n")
    console.run()
    booked = list(console.appointments)
    assert len(booked) == 1
    assert booked[0].patient_name == "Pat Doe"
    assert "Appointment booked successfully." in out.getvalue()
    assert "Available slots for Dr. John Smith:" in out.getvalue()
    assert booked[0].describe() in out.getvalue()


def test_book_invalid_slot():
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(), out)
    first = doctor_ids(console)[0]
    console._in = io.StringIO(book_script(first, date="2030-01-01") + "9\n0\n")
    console.run()
    assert len(console.appointments) == 0
    assert "Invalid date or time slot. Appointment not booked." in out.getvalue()
    assert "No appointments booked yet." in out.getvalue()


def test_generate_bill():
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(), out)
    first = doctor_ids(console)[0]
    console._in = io.StringIO(
        book_script(first) + f"10\n{first}\n1\n150\n10\n{first}\n11\n0\n"
    )
    console.run()
    output = out.getvalue()
    bills = list(console.bills)
    assert len(bills) == 1
    assert bills[0].amount == 150.0
    assert "Bill generated successfully." in output
    assert "No unbilled appointments found for this doctor." in output
    assert "Amount: $150" in output


def test_generate_bill_invalid_selection():
    out = io.StringIO()
    console = HospitalConsole(io.StringIO(), out)
    first = doctor_ids(console)[0]
    console._in = io.StringIO(book_script(first) + f"10\n{first}\n5\n0\n")
    console.run()
    assert len(console.bills) == 0
    assert "Invalid selection." in out.getvalue()


def test_display_bills_empty():
    _, output = run_console("11\n0\n")
    assert "No bills generated yet." in output


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Exiting program..." in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])