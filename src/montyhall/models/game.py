"""Doors, prizes and the hidden game board."""

import numbers
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from montyhall.exceptions import InvalidDoorError


class Door(IntEnum):
    """One of the three doors, numbered from 1."""

    ONE = 1
    TWO = 2
    THREE = 3


class Prize(str, Enum):
    """What stands behind a door."""

    GOAT = "goat"
    CAR = "car"


DOORS: tuple[Door, ...] = tuple(Door)


def as_door(value: int) -> Door:
    """Convert a door number to a Door.

    Raises:
        InvalidDoorError: If the value is not one of 1, 2 or 3
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDoorError("Door must be an integer", {"door": value})
    try:
        return Door(value)
    except (ValueError, TypeError):
        raise InvalidDoorError("Door must be 1, 2 or 3", {"door": value}) from None


class GameBoard(BaseModel):
    """Hidden assignment of prizes to doors for a single round."""

    model_config = ConfigDict(frozen=True)

    doors: tuple[Prize, Prize, Prize] = Field(
        ...,
        description="Prize behind doors 1, 2 and 3",
    )

    @model_validator(mode="after")
    def _check_single_car(self) -> "GameBoard":
        cars = sum(1 for prize in self.doors if prize == Prize.CAR)
        if cars != 1:
            raise ValueError(f"board must hold exactly one car, found {cars}")
        return self

    def __getitem__(self, door: int) -> Prize:
        return self.doors[as_door(door) - 1]

    @property
    def car_door(self) -> Door:
        """Door hiding the car."""
        return Door(self.doors.index(Prize.CAR) + 1)

    @property
    def goat_doors(self) -> tuple[Door, Door]:
        """Doors hiding a goat, in door order."""
        return tuple(door for door in DOORS if self[door] == Prize.GOAT)

    def __str__(self) -> str:
        return " | ".join(f"{door.value}:{self[door].value}" for door in DOORS)
