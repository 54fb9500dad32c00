from dataclasses import dataclass

import pytest

from baltas.emotivector import Emotivector
from baltas.module import (
    BaltasModule,
    select_most_common_emotion,
    select_most_salient_emotion,
    select_powerful_emotion,
    select_rarity_emotion,
)
from baltas.personality import Personality, PersonalityTrait
from baltas.predictor import Predictor
from baltas.sensation import Sensation, SensationType, SensationValence


def _exogenous(value, prediction):
    return abs(value - prediction)


def _s(salience):
    return Sensation(salience=salience)


@dataclass(frozen=True)
class NamedEmotion:
    name: str


def _joy_personality():
    return Personality(
        traits=[
            PersonalityTrait(
                "Joy",
                SensationValence.REWARD,
                SensationType.BETTER_THAN_EXPECTED,
                (0.0, 1.0),
            )
        ]
    )


def _module_with_sensation(salience=0.5, lifetime=1.0, importance=1.0):
    vector = Emotivector(exogenous=_exogenous, importance=importance)
    sensation = vector.make_sensation(
        SensationValence.REWARD, SensationType.BETTER_THAN_EXPECTED, salience, lifetime
    )
    vector.salient_sensations.append(sensation)
    module = BaltasModule(emotivectors=[vector], personality=_joy_personality())
    return module, vector, sensation


@pytest.mark.parametrize(
    "select",
    [select_most_salient_emotion, select_most_common_emotion, select_rarity_emotion, select_powerful_emotion],
)
def test_selectors_on_empty_input(select):
    assert select([]) is None


def test_most_salient_picks_highest_salience():
    pairs = [(_s(0.2), "Fear"), (_s(0.9), "Joy"), (_s(0.5), "Rage")]
    assert select_most_salient_emotion(pairs) == "Joy"


def test_most_salient_first_wins_tie():
    pairs = [(_s(0.5), "Fear"), (_s(0.5), "Joy")]
    assert select_most_salient_emotion(pairs) == "Fear"


def test_most_common_counts_occurrences():
    pairs = [(_s(0.9), "Joy"), (_s(0.1), "Fear"), (_s(0.1), "Fear")]
    assert select_most_common_emotion(pairs) == "Fear"


def test_most_common_skips_missing_emotions():
    pairs = [(_s(0.9), None), (_s(0.9), None), (_s(0.1), "Joy")]
    assert select_most_common_emotion(pairs) == "Joy"


def test_rarity_prefers_frequency_then_salience():
    pairs = [(_s(0.9), "Joy"), (_s(0.1), "Fear"), (_s(0.2), "Fear")]
    assert select_rarity_emotion(pairs) == "Fear"
    tied = [(_s(0.3), "Joy"), (_s(0.8), "Fear")]
    assert select_rarity_emotion(tied) == "Fear"


def test_powerful_accumulates_salience():
    pairs = [(_s(0.6), "Joy"), (_s(0.4), "Fear"), (_s(0.4), "Fear")]
    assert select_powerful_emotion(pairs) == "Fear"
    single = [(_s(0.6), "Joy"), (_s(0.4), "Fear")]
    assert select_powerful_emotion(single) == "Joy"


def test_powerful_only_missing_emotions():
    assert select_powerful_emotion([(_s(0.6), None)]) is None


def test_initialize_sets_owner_and_predictors():
    vector = Emotivector(exogenous=_exogenous)
    module = BaltasModule(emotivectors=[None, vector], owner="agent")
    module.initialize()
    assert vector.owner_module is module
    assert vector.owner == "agent"
    assert isinstance(vector.predictor, Predictor)
    assert isinstance(vector.meta_predictor, Predictor)


def test_execute_selects_emotion_from_personality():
    module, vector, sensation = _module_with_sensation()
    chosen = module.execute(0.1, ["Joy", "Fear"])
    assert chosen == "Joy"
    assert module.desired_emotions == ["Joy"]
    assert module.salient_sensations == [sensation]
    assert vector.salient_sensations == []
    assert sensation.lifetime < 1.0
    assert sensation.salience == pytest.approx(0.5)


def test_execute_accepts_named_emotion_objects():
    module, _, _ = _module_with_sensation()
    joy = NamedEmotion("Joy")
    assert module.execute(0.1, [NamedEmotion("Fear"), joy]) == joy


def test_execute_scales_salience_by_emotivector_importance():
    module, _, sensation = _module_with_sensation(salience=0.25, importance=2.0)
    module.execute(0.1, ["Joy"])
    assert sensation.salience == pytest.approx(0.5)


def test_execute_without_personality_chooses_nothing():
    module, _, _ = _module_with_sensation()
    module.personality = None
    module.desired_emotions.append("Old")
    assert module.execute(0.1, ["Joy"]) is None
    assert module.desired_emotions == []


def test_expired_sensations_are_ignored_and_removed():
    module, _, sensation = _module_with_sensation(lifetime=1.0)
    assert module.execute(2.0, ["Joy"]) is None
    assert module.desired_emotions == []
    assert sensation.lifetime <= 0
    module.execute(0.1, ["Joy"])
    assert module.salient_sensations == []


def test_execute_stops_on_undefined_emotivector():
    module, _, _ = _module_with_sensation()
    module.emotivectors.insert(0, None)
    module.desired_emotions.append("Old")
    assert module.execute(0.1, ["Joy"]) is None
    assert module.desired_emotions == ["Old"]


def test_end_play_resets_emotivectors():
    vector = Emotivector(exogenous=_exogenous)
    module = BaltasModule(emotivectors=[vector])
    module.initialize()
    vector.add_value(0.2)
    vector.add_value(0.8)
    module.end_play()
    assert vector.values == []
    assert vector.predictions == []


def test_end_play_stops_at_undefined_emotivector():
    first = Emotivector(exogenous=_exogenous)
    last = Emotivector(exogenous=_exogenous)
    module = BaltasModule(emotivectors=[first, None, last])
    module.initialize()
    first.add_value(0.3)
    last.add_value(0.3)
    module.end_play()
    assert first.values == []
    assert last.values == [0.3]