"""Sensations produced by emotivectors and the enums that describe them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from baltas.emotivector import Emotivector


class SensationValence(Enum):
    """Whether a sensation is a reward or a punishment."""

    PUNISHMENT = "Punishment"
    REWARD = "Reward"
    OTHER = "Other"


class SensationType(Enum):
    """How the sensed result compares with the expected one."""

    WORSE_THAN_EXPECTED = "WorseThanExpected"
    AS_EXPECTED = "AsExpected"
    BETTER_THAN_EXPECTED = "BetterThanExpected"
    OTHER = "Other"


class ActionStage(Enum):
    """The stages an action can be divided into."""

    NONE = "None"
    ANTICIPATION_INTERRUPTIBLE = "Anticipation Interruptible"
    ANTICIPATION_UNINTERRUPTIBLE = "Anticipation Uninterruptible"
    FOLLOW_THROUGH_INTERRUPTIBLE = "Follow Through Interruptible"
    FOLLOW_THROUGH_UNINTERRUPTIBLE = "Follow Through Uninterruptible"
    CANCEL = "Cancel"


@dataclass(eq=False)
class Sensation:
    """A difference between an expected and an actual result.

    Lifetimes are in seconds; importance lies between 0 and 1 and scales
    the salience of the sensation.
    """

    valence: SensationValence = SensationValence.OTHER
    type: SensationType = SensationType.AS_EXPECTED
    initial_salience: float = 0.0
    salience: float = 0.0
    initial_lifetime: float = 5.0
    lifetime: float = -1.0
    importance: float = 1.0
    emotivector: Emotivector | None = field(default=None, repr=False, compare=False)