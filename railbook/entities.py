"""Booking entities: passengers, vehicles and trains."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class User:
    """A passenger who can hold seats on any number of vehicles."""

    user_id: str = ""
    name: str = ""
    aadhar_card: str = ""
    vehicles: list[Vehicle] = field(default_factory=list)


@dataclass
class Vehicle:
    """A bookable vehicle; ``seats`` is a list of rows of passengers."""

    vehicle_id: str = ""
    name: str = ""
    source: str = ""
    destination: str = ""
    time: int = 0
    seats: list[list[User]] = field(default_factory=list)


@dataclass
class Train:
    """A bookable train; ``seats`` is a list of rows of passengers."""

    train_id: str = ""
    name: str = ""
    source: str = ""
    destination: str = ""
    time: int = 0
    seats: list[list[User]] = field(default_factory=list)


def convert(vehicle: Vehicle) -> Train:
    """Build a train carrying the same details and seat rows as ``vehicle``."""
    return Train(
        train_id=vehicle.vehicle_id,
        name=vehicle.name,
        source=vehicle.source,
        destination=vehicle.destination,
        time=vehicle.time,
        seats=[list(row) for row in vehicle.seats],
    )