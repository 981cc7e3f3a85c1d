import json
import time
from pathlib import Path

import pytest

from railbook.booking import BookingService, TrainBookingService, VehicleBookingService
from railbook.entities import Train, User, Vehicle
from railbook.fileio import TrainFileIO, VehicleFileIO


@pytest.fixture
def alice():
    return User(user_id="u1", name="Alice", aadhar_card="A-1")


@pytest.fixture
def bob():
    return User(user_id="u2", name="Bob", aadhar_card="B-2")


@pytest.fixture
def vehicle_service(tmp_path):
    return VehicleBookingService(VehicleFileIO(tmp_path / "booking.json"))


@pytest.fixture
def train_service(tmp_path):
    return TrainBookingService(TrainFileIO(tmp_path / "train.json"))


def test_base_service_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BookingService()


def test_default_stores_use_source_file_names():
    assert VehicleBookingService().store.path == Path("booking.json")
    assert TrainBookingService().store.path == Path("train.json")


def test_vehicle_book_persists_entity(vehicle_service, alice):
    before = int(time.time())
    booked = vehicle_service.book("T1", alice, "Express", "Pune", "Delhi")
    after = int(time.time())
    stored = vehicle_service.store.read()
    assert stored == [booked]
    assert booked.vehicle_id == "T1"
    assert booked.name == "Express"
    assert booked.destination == "Delhi"
    assert booked.seats == [[alice]]
    assert before <= booked.time <= after


def test_vehicle_book_records_id_as_source(vehicle_service, alice):
    booked = vehicle_service.book("T1", alice, "Express", "Pune", "Delhi")
    assert booked.source == "T1"
    assert vehicle_service.store.read()[0].source == "T1"


def test_train_book_keeps_source(train_service, alice):
    booked = train_service.book("T9", alice, "Mail", "Pune", "Delhi")
    assert isinstance(booked, Train)
    assert booked.source == "Pune"
    assert train_service.store.read() == [booked]


def test_book_appends(vehicle_service, alice, bob):
    vehicle_service.book("T1", alice, "Express", "Pune", "Delhi")
    vehicle_service.book("T2", bob, "Mail", "Pune", "Agra")
    ids = [v.vehicle_id for v in vehicle_service.store.read()]
    assert ids == ["T1", "T2"]


def test_cancel_removes_only_matching_user(vehicle_service, alice, bob):
    vehicle_service.book("T1", alice, "Express", "Pune", "Delhi")
    vehicle_service.book("T1", bob, "Express", "Pune", "Delhi")
    vehicle_service.book("T2", alice, "Mail", "Pune", "Agra")
    assert vehicle_service.cancel_booking("T1", "u1") is True
    stored = vehicle_service.store.read()
    assert stored[0].seats == [[]]
    assert stored[1].seats == [[bob]]
    assert stored[2].seats == [[alice]]


def test_cancel_unknown_entity_leaves_file_untouched(vehicle_service, alice):
    vehicle_service.book("T1", alice, "Express", "Pune", "Delhi")
    path = vehicle_service.store.path
    before = path.read_text(encoding="utf-8")
    assert vehicle_service.cancel_booking("T404", "u1") is False
    assert path.read_text(encoding="utf-8") == before


def test_cancel_without_file_does_not_create_it(vehicle_service):
    assert vehicle_service.cancel_booking("T1", "u1") is False
    assert not vehicle_service.store.path.exists()


def test_cancel_known_entity_unknown_user_is_found(vehicle_service, alice):
    vehicle_service.book("T1", alice, "Express", "Pune", "Delhi")
    assert vehicle_service.cancel_booking("T1", "nobody") is True
    assert vehicle_service.store.read()[0].seats == [[alice]]


def test_train_cancel_keeps_file_readable(train_service, alice, bob):
    train_service.book("T9", alice, "Mail", "Pune", "Delhi")
    train_service.book("T9", bob, "Mail", "Pune", "Delhi")
    assert train_service.cancel_booking("T9", "u2") is True
    document = json.loads(train_service.store.path.read_text(encoding="utf-8"))
    assert [record["trainId"] for record in document] == ["T9", "T9"]
    stored = train_service.store.read()
    assert [t.seats for t in stored] == [[[alice]], [[]]]


def test_vehicle_service_kind():
    assert VehicleBookingService.kind == "vehicle"
    assert TrainBookingService.kind == "train"
    assert isinstance(VehicleBookingService().store, VehicleFileIO)
    assert VehicleBookingService.store_type().entity_type is Vehicle