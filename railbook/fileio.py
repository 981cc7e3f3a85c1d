"""JSON file storage for vehicle and train bookings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar, Union

from railbook.entities import Train, User, Vehicle

E = TypeVar("E", Vehicle, Train)

PathLike = Union[str, Path]


def _field(record: Any, key: str, kind: type) -> Any:
    if not isinstance(record, dict):
        raise ValueError(f"expected a JSON object, got {type(record).__name__}")
    if key not in record:
        raise ValueError(f"missing key {key!r}")
    value = record[key]
    if kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ValueError(f"key {key!r} must be of type {kind.__name__}")
    return value


def _user_to_record(user: User) -> dict[str, str]:
    return {"userId": user.user_id, "name": user.name, "aadharCard": user.aadhar_card}


def _user_from_record(record: Any) -> User:
    return User(
        user_id=_field(record, "userId", str),
        name=_field(record, "name", str),
        aadhar_card=_field(record, "aadharCard", str),
    )


class FileIO(Generic[E]):
    """Stores a list of bookable entities as a JSON array in one file.

    Concrete subclasses fix the entity type, the default file name and the
    key under which the entity identifier is stored.
    """

    entity_type: ClassVar[type | None] = None
    default_filename: ClassVar[str] = ""
    id_key: ClassVar[str] = ""
    id_attr: ClassVar[str] = ""

    def __init__(self, path: PathLike | None = None) -> None:
        if self.entity_type is None:
            raise TypeError(f"{type(self).__name__} has no entity type; use a concrete store")
        self.path = Path(path) if path is not None else Path(self.default_filename)

    def _load_document(self) -> Any:
        if not self.path.exists():
            return None
        with self.path.open(encoding="utf-8") as handle:
            return json.load(handle)

    def _write_document(self, document: list[dict[str, Any]]) -> None:
        text = json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False)
        self.path.write_text(text, encoding="utf-8")

    def _to_record(self, entity: E) -> dict[str, Any]:
        return {
            self.id_key: getattr(entity, self.id_attr),
            "name": entity.name,
            "source": entity.source,
            "destination": entity.destination,
            "time": entity.time,
            "seats": [[_user_to_record(user) for user in row] for row in entity.seats],
        }

    def _from_record(self, record: Any) -> E:
        seats = _field(record, "seats", list)
        rows = []
        for row in seats:
            if not isinstance(row, list):
                raise ValueError("each seat row must be a JSON array")
            rows.append([_user_from_record(user) for user in row])
        assert self.entity_type is not None
        return self.entity_type(
            **{self.id_attr: _field(record, self.id_key, str)},
            name=_field(record, "name", str),
            source=_field(record, "source", str),
            destination=_field(record, "destination", str),
            time=_field(record, "time", int),
            seats=rows,
        )

    def save(self, entity: E) -> None:
        """Append ``entity`` to the stored list, creating the file if needed."""
        document = self._load_document()
        if document is None:
            document = []
        if not isinstance(document, list):
            raise ValueError(f"{self.path} does not hold a JSON array")
        document.append(self._to_record(entity))
        self._write_document(document)

    def read(self) -> list[E]:
        """Return every stored entity; an absent file holds none."""
        document = self._load_document()
        if document is None:
            return []
        if not isinstance(document, list):
            raise ValueError(f"{self.path} does not hold a JSON array")
        return [self._from_record(item) for item in document]

    def overwrite(self, entities: list[E]) -> None:
        """Replace the stored list with ``entities``."""
        self._write_document([self._to_record(entity) for entity in entities])


class VehicleFileIO(FileIO[Vehicle]):
    """Vehicle bookings, kept in ``booking.json`` by default."""

    entity_type = Vehicle
    default_filename = "booking.json"
    id_key = "vehicleId"
    id_attr = "vehicle_id"


class TrainFileIO(FileIO[Train]):
    """Train bookings, kept in ``train.json`` by default."""

    entity_type = Train
    default_filename = "train.json"
    id_key = "trainId"
    id_attr = "train_id"