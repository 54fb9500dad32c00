"""Personalities map sensations and their salience to emotions."""

from __future__ import annotations

from dataclasses import dataclass, field

from baltas.sensation import Sensation, SensationType, SensationValence


@dataclass
class PersonalityTrait:
    """An emotion felt for a sensation of a given valence, type and salience range.

    ``salience_interval`` is an inclusive ``(low, high)`` pair; ``None`` is an
    empty interval that matches nothing.
    """

    emotion_name: str
    valence: SensationValence = SensationValence.OTHER
    type: SensationType = SensationType.OTHER
    salience_interval: tuple[float, float] | None = None

    def contains(self, salience: float) -> bool:
        """Whether ``salience`` falls inside the trait's interval."""
        if self.salience_interval is None:
            return False
        low, high = self.salience_interval
        return low <= salience <= high


@dataclass
class Personality:
    """A list of traits deciding which emotions a sensation can cause."""

    traits: list[PersonalityTrait] = field(default_factory=list)

    def is_trait_active(self, emotion_name: str | None, sensation: Sensation | None) -> bool:
        """Whether the first trait for this emotion and sensation accepts its salience.

        Returns False when no trait matches.
        """
        if not emotion_name or sensation is None:
            return False
        for trait in self.traits:
            if (
                trait.emotion_name == emotion_name
                and trait.valence == sensation.valence
                and trait.type == sensation.type
            ):
                return trait.contains(min(sensation.salience, 1.0))
        return False