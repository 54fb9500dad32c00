"""The BALTAS module: turns emotivector sensations into a desired emotion."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from baltas.emotivector import Emotivector
from baltas.personality import Personality
from baltas.sensation import Sensation

logger = logging.getLogger(__name__)

Emotion = Hashable
PossibleEmotion = tuple[Sensation, Optional[Emotion]]


def _emotion_name(emotion: Any) -> str | None:
    """Name of an emotion given either as a string or as an object with ``name``."""
    if emotion is None:
        return None
    if isinstance(emotion, str):
        return emotion
    return getattr(emotion, "name", None)


def select_most_salient_emotion(possible_emotions: Sequence[PossibleEmotion]) -> Emotion | None:
    """Emotion paired with the most salient sensation; the first one wins ties."""
    if not possible_emotions:
        return None
    _, emotion = max(possible_emotions, key=lambda pair: pair[0].salience)
    return emotion


def select_most_common_emotion(possible_emotions: Sequence[PossibleEmotion]) -> Emotion | None:
    """Emotion that occurs most often; the first one seen wins ties."""
    frequency: dict[Emotion, int] = {}
    for _, emotion in possible_emotions:
        if emotion is not None:
            frequency[emotion] = frequency.get(emotion, 0) + 1
    if not frequency:
        return None
    return max(frequency, key=frequency.__getitem__)


def select_rarity_emotion(possible_emotions: Sequence[PossibleEmotion]) -> Emotion | None:
    """Most frequent emotion; ties are broken by the highest single salience."""
    stats: dict[Emotion, tuple[int, float]] = {}
    for sensation, emotion in possible_emotions:
        if emotion is None:
            continue
        count, best = stats.get(emotion, (0, sensation.salience))
        stats[emotion] = (count + 1, max(best, sensation.salience))
    if not stats:
        return None
    return max(stats, key=stats.__getitem__)


def select_powerful_emotion(possible_emotions: Sequence[PossibleEmotion]) -> Emotion | None:
    """Emotion with the highest salience summed over its repeated occurrences."""
    power: dict[Emotion, float] = {}
    for sensation, emotion in possible_emotions:
        if emotion is not None:
            power[emotion] = power.get(emotion, 0.0) + sensation.salience
    if not power:
        return None
    return max(power, key=power.__getitem__)


@dataclass(eq=False)
class BaltasModule:
    """Belief and anticipation laced tenacious affect system.

    Collects sensations from its emotivectors, lets the personality decide
    which emotions they may cause and picks one as the desired emotion.
    """

    emotivectors: list[Emotivector | None] = field(default_factory=list)
    personality: Personality | None = None
    owner: Any = None
    owner_agent_component: Any = None
    salient_sensations: list[Sensation] = field(default_factory=list)
    desired_emotions: list[Emotion] = field(default_factory=list)

    def initialize(self) -> None:
        """Initialize every emotivector with this module as its owner."""
        for emotivector in self.emotivectors:
            if emotivector is None:
                logger.warning("Emotivector is not defined!")
                continue
            emotivector.initialize(self)

    def execute(self, delta_seconds: float, available_emotions: Iterable[Emotion]) -> Emotion | None:
        """Advance sensations by ``delta_seconds`` and choose the emotion to feel.

        The chosen emotion replaces :attr:`desired_emotions` and is returned;
        None when no emotion applies.
        """
        self.salient_sensations = [s for s in self.salient_sensations if s.lifetime > 0]

        for emotivector in self.emotivectors:
            if emotivector is None:
                logger.warning("Emotivector is not defined!")
                return None
            self.salient_sensations.extend(emotivector.update())

        emotions = list(available_emotions)
        possible: list[PossibleEmotion] = []
        for sensation in self.salient_sensations:
            sensation.lifetime -= delta_seconds
            if sensation.lifetime <= 0:
                continue
            source_importance = sensation.emotivector.importance if sensation.emotivector else 1.0
            sensation.salience = sensation.initial_salience * sensation.importance * source_importance

            if self.personality is not None:
                possible.extend(
                    (sensation, emotion)
                    for emotion in emotions
                    if self.personality.is_trait_active(_emotion_name(emotion), sensation)
                )

        self.desired_emotions.clear()
        chosen = select_powerful_emotion(possible)
        if chosen is not None:
            self.desired_emotions.append(chosen)
        return chosen

    def end_play(self) -> None:
        """Reset every emotivector; stops at the first undefined one."""
        for emotivector in self.emotivectors:
            if emotivector is None:
                logger.warning("Emotivector is not defined!")
                return
            emotivector.reset()