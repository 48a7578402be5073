import csv

import pytest

from secret_santa.core.errors import ArgumentError, RecordError
from secret_santa.domain import Pairing, Participant
from secret_santa.records import (
    PAIRING_HEADER,
    read_participants,
    read_prior_pairings,
    write_pairings,
)


def write_text(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_read_participants_valid_file(tmp_path):
    path = write_text(
        tmp_path / "employees.csv",
        "Employee_Name,Employee_EmailID\nJohn Doe,john.doe@acme.com\n\n Jane Smith , jane.smith@acme.com \n",
    )
    participants = read_participants(path)
    assert [(p.display_name, p.identifier) for p in participants] == [
        ("John Doe", "john.doe@acme.com"),
        ("Jane Smith", "jane.smith@acme.com"),
    ]


def test_read_participants_handles_bom_and_quotes(tmp_path):
    path = tmp_path / "employees.csv"
    path.write_bytes('\ufeffEmployee_Name,Employee_EmailID\n"Doe, John",john@acme.com\n'.encode("utf-8"))
    participants = read_participants(path)
    assert participants[0].display_name == "Doe, John"


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("Employee_Name,Employee_EmailID\n", "No valid participants"),
        ("Employee_Name,Employee_EmailID\nJohn Doe\n", "line 2"),
        ("Employee_Name,Employee_EmailID\nJohn,john@acme.com\n,jane@acme.com\n", "line 3"),
        ("Employee_Name,Employee_EmailID\n\"John\nDoe\",john@acme.com\nBad\n", "line 4"),
    ],
)
def test_read_participants_invalid_files(tmp_path, text, message):
    path = write_text(tmp_path / "employees.csv", text)
    with pytest.raises(RecordError, match=message):
        read_participants(path)


def test_read_participants_missing_file(tmp_path):
    with pytest.raises(RecordError, match="not found"):
        read_participants(tmp_path / "nope.csv")
    with pytest.raises(RecordError):
        read_participants(None)


def test_read_prior_pairings_valid_file(tmp_path):
    path = write_text(
        tmp_path / "previous.csv",
        ",".join(PAIRING_HEADER)
        + "\nJohn Doe,john@acme.com,Jane Smith,jane@acme.com\n"
        + "Jane Smith,jane@acme.com,John Doe,john@acme.com\n",
    )
    pairings = read_prior_pairings(path)
    assert len(pairings) == 2
    assert pairings[0].giver.display_name == "John Doe"
    assert pairings[0].receiver.display_name == "Jane Smith"


def test_read_prior_pairings_skips_bad_rows(tmp_path):
    path = write_text(
        tmp_path / "previous.csv",
        ",".join(PAIRING_HEADER)
        + "\nJohn Doe,john@acme.com\n"
        + "John Doe,john@acme.com,John Doe,john@acme.com\n"
        + "John Doe,,Jane Smith,jane@acme.com\n"
        + "Jane Smith,jane@acme.com,John Doe,john@acme.com\n",
    )
    pairings = read_prior_pairings(path)
    assert [str(p) for p in pairings] == ["Jane Smith -> John Doe"]


def test_read_prior_pairings_missing_data_means_no_constraints(tmp_path):
    assert read_prior_pairings(None) == []
    assert read_prior_pairings("") == []
    assert read_prior_pairings(tmp_path / "missing.csv") == []
    assert read_prior_pairings(write_text(tmp_path / "header.csv", ",".join(PAIRING_HEADER))) == []


def test_read_prior_pairings_undecodable_file(tmp_path):
    path = tmp_path / "previous.csv"
    path.write_bytes(b"\xff\xfe\x00garbage\x80\x81")
    assert read_prior_pairings(path) == []


def test_write_pairings_creates_file(tmp_path):
    john = Participant("Doe, John", "john@acme.com")
    jane = Participant('Jane "JJ" Smith', "jane@acme.com")
    path = tmp_path / "out" / "assignments.csv"

    write_pairings([Pairing(john, jane), Pairing(jane, john)], path)

    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == PAIRING_HEADER
    assert rows[1] == ["Doe, John", "john@acme.com", 'Jane "JJ" Smith', "jane@acme.com"]
    assert len(rows) == 3


def test_write_pairings_round_trips_as_prior_round(tmp_path):
    john = Participant("John", "john@acme.com")
    jane = Participant("Jane", "jane@acme.com")
    path = tmp_path / "assignments.csv"
    write_pairings([Pairing(john, jane)], path)
    assert read_prior_pairings(path) == [Pairing(john, jane)]


def test_write_pairings_rejects_bad_arguments(tmp_path):
    with pytest.raises(ArgumentError):
        write_pairings(None, tmp_path / "out.csv")
    with pytest.raises(ArgumentError):
        write_pairings([], "")


def test_write_pairings_wraps_os_errors(tmp_path):
    blocker = write_text(tmp_path / "blocker", "file, not a directory")
    with pytest.raises(RecordError):
        write_pairings([], blocker / "out.csv")
