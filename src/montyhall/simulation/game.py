"""Single-round primitives: set up the board, pick, reveal, decide, judge."""

import numpy as np

from montyhall.exceptions import InvalidBoardError, InvalidDoorError
from montyhall.models import DOORS, Door, GameBoard, Outcome, Prize, as_door

# Two goats and a car; create_game shuffles this multiset
PRIZES = (Prize.GOAT, Prize.GOAT, Prize.CAR)


def _default_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def create_game(rng: np.random.Generator | None = None) -> GameBoard:
    """Create a new game with two goats and one car behind the doors.

    Each of the three distinct arrangements is equally likely, so every
    door hides the car with probability 1/3.

    Args:
        rng: Random number generator

    Returns:
        Freshly shuffled GameBoard
    """
    rng = _default_rng(rng)
    order = rng.permutation(len(PRIZES))
    return GameBoard(doors=tuple(PRIZES[i] for i in order))


def select_door(rng: np.random.Generator | None = None) -> Door:
    """Pick one of the three doors uniformly at random."""
    rng = _default_rng(rng)
    return Door(int(rng.integers(1, len(DOORS) + 1)))


def open_goat_door(
    game: GameBoard,
    pick: int,
    rng: np.random.Generator | None = None,
) -> Door:
    """Open a door that hides a goat and is not the contestant's pick.

    If the contestant picked the car, the host chooses one of the two goat
    doors at random. Otherwise the only door left that is neither the pick
    nor the car is opened.

    Args:
        game: Board for the current round
        pick: Contestant's initial pick
        rng: Random number generator

    Returns:
        The opened door

    Raises:
        InvalidDoorError: If pick is not a valid door
        InvalidBoardError: If the board does not hold exactly one car
    """
    pick = as_door(pick)
    candidates = [
        door for door in DOORS
        if door != pick and game[door] == Prize.GOAT
    ]

    if game[pick] == Prize.CAR:
        if len(candidates) != 2:
            raise InvalidBoardError("Expected two goat doors", {"board": str(game)})
        rng = _default_rng(rng)
        return candidates[int(rng.integers(len(candidates)))]

    if len(candidates) != 1:
        raise InvalidBoardError("Expected exactly one goat door to open", {"board": str(game)})
    return candidates[0]


def change_door(stay: bool, opened: int, pick: int) -> Door:
    """Return the final pick after choosing to stay or switch.

    Args:
        stay: Keep the initial pick if True, otherwise switch
        opened: Door opened by the host
        pick: Contestant's initial pick

    Returns:
        Final pick

    Raises:
        InvalidDoorError: If a door is invalid, or switching with opened == pick
    """
    opened = as_door(opened)
    pick = as_door(pick)

    if stay:
        return pick

    if opened == pick:
        raise InvalidDoorError(
            "Cannot switch when the opened door is the pick",
            {"opened": int(opened), "pick": int(pick)},
        )
    return next(door for door in DOORS if door not in (opened, pick))


def determine_winner(final_pick: int, game: GameBoard) -> Outcome:
    """WIN if the final pick hides the car, LOSE otherwise."""
    return Outcome.WIN if game[final_pick] == Prize.CAR else Outcome.LOSE
