# railbook

A small console booking system for trains and vehicles. Bookings are kept
as JSON arrays in plain files: `booking.json` for vehicles and
`train.json` for trains.

## Installation

```
pip install .
```

## Usage

Run the interactive command:

```
railbook
```

By default the booking file is read from and written to the current
directory. Use `--data-dir` to keep it elsewhere:

```
railbook --data-dir /path/to/bookings
```

The command first asks for your user ID, name and Aadhar card number, and
then for an option:

- `1` books a seat. You are asked for the train ID, train name, source
  station and destination station. A new booking holding you in its only
  seat is appended to `booking.json`, with the current time as a Unix
  timestamp, and `Train booked successfully!` is printed. The source
  recorded for such a booking is the train ID you entered, not the source
  station.
- `2` cancels a booking. You are asked for the train ID, and every seat
  held under your user ID on every booking with that ID is released. If
  at least one booking with that ID exists the file is rewritten and
  `Booking cancelled successfully for user: <id>` is printed; otherwise
  `Booking not found for user: <id> in vehicle: <train id>` is printed and
  the file is left alone.

Anything other than `1` or `2` prints `Invalid option`.

## Library use

```python
from railbook.entities import User
from railbook.fileio import TrainFileIO
from railbook.booking import TrainBookingService

service = TrainBookingService(TrainFileIO("train.json"))
user = User(user_id="u1", name="Asha", aadhar_card="placeholder")
train = service.book("T100", user, "Express", "Pune", "Delhi")
cancelled = service.cancel_booking("T100", "u1")  # True
```

- `railbook.entities` holds the `User`, `Vehicle` and `Train` dataclasses.
  `convert(vehicle)` returns a `Train` with the same details and seat rows.
- `railbook.fileio` stores entities as a JSON array. `VehicleFileIO`
  defaults to `booking.json` (identifier key `vehicleId`) and
  `TrainFileIO` to `train.json` (identifier key `trainId`). Each offers
  `save(entity)` to append, `read()` to load every entity (an absent file
  holds none) and `overwrite(entities)` to replace the list. Malformed
  records raise `ValueError`.
- `railbook.booking` provides `VehicleBookingService` and
  `TrainBookingService`. `book(...)` stores and returns the new entity;
  `cancel_booking(entity_id, user_id)` returns whether any entity with
  that identifier was found.

## What it does not do

- Every booking is stored as a separate record; bookings are not checked
  against a list of trains, a timetable or seat capacity.
- Users are not registered or stored on their own; a user exists only in
  the seats of the bookings that hold them.
- Cancelling empties the user's seats but keeps the booking record.
- The command works on vehicle bookings (`booking.json`) only; train
  bookings (`train.json`) are available through the library.

## Tests

```
pip install .[test]
pytest
```