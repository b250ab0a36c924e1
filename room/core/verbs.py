from __future__ import annotations

from enum import Enum


class Verb(str, Enum):
    CARRY = "carry"
    CLIMB = "climb"
    CLOSE = "close"
    GIVE = "give"
    KILL = "kill"
    LEAN_TOWARD = "lean_toward"
    LOCK = "lock"
    MOVE = "move"
    OPEN = "open"
    PICK_UP = "pick_up"
    PLAY = "play"
    PUT_DOWN = "put_down"
    SLEEP_IN = "sleep_in"
    STAND_ON = "stand_on"
    TALK = "talk"
    WAKE_UP_IN = "wake_up_in"
    WALK_THROUGH = "walk_through"
    UNLOCK = "unlock"
