"""Booking and cancellation of seats on vehicles and trains."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Optional, TypeVar

from railbook.entities import Train, User, Vehicle
from railbook.fileio import FileIO, TrainFileIO, VehicleFileIO

E = TypeVar("E", Vehicle, Train)


class BookingService(ABC, Generic[E]):
    """Books passengers onto entities and cancels their seats.

    Concrete services fix the entity kind and the store used by default.
    """

    kind: ClassVar[str] = ""
    store_type: ClassVar[Optional[type[FileIO]]] = None

    def __init__(self, store: Optional[FileIO[E]] = None) -> None:
        if store is None:
            if self.store_type is None:
                raise TypeError(f"{type(self).__name__} has no default store")
            store = self.store_type()
        self.store = store

    @abstractmethod
    def _make_entity(
        self, entity_id: str, user: User, name: str, source: str, destination: str
    ) -> E:
        """Build a freshly booked entity holding ``user`` in its only seat."""

    def _entity_id(self, entity: E) -> str:
        return getattr(entity, self.store.id_attr)

    def book(self, entity_id: str, user: User, name: str, source: str, destination: str) -> E:
        """Record a new booking for ``user`` and return the stored entity."""
        entity = self._make_entity(entity_id, user, name, source, destination)
        self.store.save(entity)
        return entity

    def cancel_booking(self, entity_id: str, user_id: str) -> bool:
        """Remove ``user_id`` from every seat of entities with ``entity_id``.

        Returns whether any entity with that identifier was found; the store
        is rewritten only in that case.
        """
        entities = self.store.read()
        found = False
        for entity in entities:
            if self._entity_id(entity) == entity_id:
                entity.seats = [
                    [user for user in row if user.user_id != user_id] for row in entity.seats
                ]
                found = True
        if found:
            self.store.overwrite(entities)
        return found


class VehicleBookingService(BookingService[Vehicle]):
    """Bookings on vehicles, stored through :class:`VehicleFileIO`."""

    kind = "vehicle"
    store_type = VehicleFileIO

    def _make_entity(
        self, entity_id: str, user: User, name: str, source: str, destination: str
    ) -> Vehicle:
        # Vehicle bookings record the vehicle identifier as the source station.
        return Vehicle(
            vehicle_id=entity_id,
            name=name,
            source=entity_id,
            destination=destination,
            time=int(time.time()),
            seats=[[user]],
        )


class TrainBookingService(BookingService[Train]):
    """Bookings on trains, stored through :class:`TrainFileIO`."""

    kind = "train"
    store_type = TrainFileIO

    def _make_entity(
        self, entity_id: str, user: User, name: str, source: str, destination: str
    ) -> Train:
        return Train(
            train_id=entity_id,
            name=name,
            source=source,
            destination=destination,
            time=int(time.time()),
            seats=[[user]],
        )