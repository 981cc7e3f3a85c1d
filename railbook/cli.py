"""Interactive command for booking and cancelling seats."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from railbook.booking import VehicleBookingService
from railbook.entities import User
from railbook.fileio import VehicleFileIO


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        print()
        return ""


def _parse_option(line: str) -> int:
    tokens = line.split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def _service(data_dir: Path) -> VehicleBookingService:
    return VehicleBookingService(VehicleFileIO(data_dir / VehicleFileIO.default_filename))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Prompt for a user and an action, then book or cancel a seat."""
    parser = argparse.ArgumentParser(prog="railbook", description="Book or cancel train seats.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding the booking files (default: current directory)",
    )
    args = parser.parse_args(argv)

    user_id = _ask("Enter User ID: ")
    name = _ask("Enter Name: ")
    aadhar_card = _ask("Enter Aadhar Card Number: ")

    print("Enter the option: ")
    print("Enter 1 to book the train")
    print("Enter 2 to cancel the booking")
    option = _parse_option(_ask(""))

    if option == 1:
        train_id = _ask("Enter Train ID: ")
        train_name = _ask("Enter Train Name: ")
        source = _ask("Enter Source Station: ")
        destination = _ask("Enter Destination Station: ")
        user = User(user_id=user_id, name=name, aadhar_card=aadhar_card)
        _service(args.data_dir).book(train_id, user, train_name, source, destination)
        print("Train booked successfully!")
    elif option == 2:
        train_id = _ask("Enter Train ID to cancel booking: ")
        service = _service(args.data_dir)
        if service.cancel_booking(train_id, user_id):
            print(f"Booking cancelled successfully for user: {user_id}")
        else:
            print(f"Booking not found for user: {user_id} in {service.kind}: {train_id}")
    else:
        print("Invalid option")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())