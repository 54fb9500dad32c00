# baltas

An emotion system for game agents, built on anticipation. An agent tracks
quantities it cares about, such as its health or how often its attacks land.
It predicts where each quantity is heading and reacts when a new value
surprises it.

The package has three layers:

- **Predictors** (`baltas.predictor`, `baltas.averages`, `baltas.derivatives`)
  forecast the next value of a series. They work from the values seen so far
  and the predictions made before.
- **Emotivectors** (`baltas.emotivector`) keep a series of values and
  predictions. A second predictor, the meta predictor, forecasts the prediction
  error. When a new value misses the prediction by more than the expected
  error, the emotivector records a `Sensation` (`baltas.sensation`).
- **The module** (`baltas.module`) collects sensations from its emotivectors
  and ages them. It asks a `Personality` (`baltas.personality`) which emotions
  each sensation may cause, then chooses one emotion to feel.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Predictors

Every predictor subclasses `baltas.predictor.Predictor` and has two methods:

- `predict(values, predictions)`
- `predict_with_desired_value(values, predictions, desired_value)`

A predictor that does not use a desired value falls back to `predict`.

```python
from baltas.averages import ExponentialMovingAveragePredictor, MovingAveragePredictor

values = [0.2, 0.4, 0.6]
print(MovingAveragePredictor().predict(values, []))
print(ExponentialMovingAveragePredictor().predict(values, []))
```

Predictors in `baltas.averages`:

- `MovingAveragePredictor(window_size=5, default_value=0.5)` averages the most
  recent `window_size` values.
- `WeightedMovingAveragePredictor(weights=[0.5, 0.2, 0.1, 0.1, 0.1], default_value=0.5)`
  takes a weighted average. The first weight applies to the newest value. When
  there are fewer values than weights, the weight of the missing positions is
  spread evenly over the values that are there.
- `ExponentialMovingAveragePredictor(default_value=0.5, smoothing=2.0)` is an
  exponential moving average. The last prediction holds the running average.
- `MartinhoSimplePredictor(exogenous, endogenous, default_value=0.5, exogenous_factor=10.0)`
  moves the last prediction towards the new value. The step is
  `exogenous(value, prediction) * exogenous_factor`. With a desired value, the
  step is increased by the square of `endogenous(value, prediction, desired)`.
  You supply both salience functions.

Predictors in `baltas.derivatives`:

- `AdditiveFirstDerivativePredictor` adds two predictions: a base predictor on
  the values, and a first-derivative predictor on the differences between
  consecutive values.
- `FirstDerivativeOnlyPredictor` uses only the prediction of the differences.
  With a single value, it returns that value.
- `AdditiveSecondDerivativePredictor` adds a second-derivative predictor on
  the differences of the differences.

These predictors take `base_predictor`, `first_derivative_predictor` and
`second_derivative_predictor` as fields. Each field is set only on the classes
that use it. A `derivative` field can replace the differencing function. If a
sub-predictor is missing, the predictor logs a warning and returns what it has
computed so far. If the base predictor is missing, it returns `default_value`.

With no values, every predictor returns its `default_value`.

## Emotivectors and sensations

```python
from baltas.emotivector import Emotivector
from baltas.module import BaltasModule
from baltas.personality import Personality, PersonalityTrait
from baltas.sensation import SensationType, SensationValence


def exogenous(value, prediction):
    return abs(value - prediction)


health = Emotivector(exogenous=exogenous, clamp_values=True)
module = BaltasModule(
    emotivectors=[health],
    personality=Personality([
        PersonalityTrait(
            "Fear",
            SensationValence.PUNISHMENT,
            SensationType.WORSE_THAN_EXPECTED,
            (0.0, 1.0),
        ),
    ]),
)
module.initialize()

for value in [1.0, 1.0, 1.0, 0.4]:
    health.add_value(value)

emotion = module.execute(0.016, ["Fear", "Joy"])
```

### The Emotivector class

An `Emotivector` needs an `exogenous(value, prediction)` salience function. If
you set `use_desired_value`, it also needs an
`endogenous(value, prediction, desired)` function. Its methods:

- `initialize(module)` attaches the emotivector to its owner. If no predictors
  are set, it installs defaults:
  - predictor: an `AdditiveSecondDerivativePredictor` built on
    `ExponentialMovingAveragePredictor`;
  - meta predictor: an `ExponentialMovingAveragePredictor` with default value
    0.01.
- `add_value(value)` does the following:
  1. Compares the value with the last prediction.
  2. Records the prediction error and forecasts the next error.
  3. If the error exceeds the forecast tolerance, records a sensation.
  4. Predicts the next value.

  With `clamp_values`, values and predictions are clamped to
  `clamp_interval`. It raises `PredictorsNotDefinedError` when the predictors
  are not set, or when a desired value is used without an endogenous function.
- `update()` runs `on_update()`, then returns the sensations gathered since
  the last call and clears them. Override `on_update()` in a subclass to feed
  in new values before sensations are collected.
- `make_sensation(valence, sensation_type, salience, lifetime=5.0, importance=1.0)`
  builds a `Sensation` tied to the emotivector.
- `reset()` clears values, predictions, errors and pending sensations.

### The Sensation class

A `Sensation` has these fields:

- a `valence` (`SensationValence`);
- a `type` (`SensationType`);
- an initial and a current salience;
- an initial and a current lifetime, in seconds;
- an `importance`.

`baltas.sensation` also defines the `ActionStage` enum.

## Personalities

A `PersonalityTrait` has four fields: an emotion name, a valence, a sensation
type and an inclusive `(low, high)` salience interval. An interval of `None`
matches nothing.

`Personality.is_trait_active(emotion_name, sensation)` finds the first trait
that matches the emotion name, valence and type. It then checks the
sensation's salience, capped at 1, against that trait's interval. It returns
False when no trait matches.

## Choosing an emotion

`BaltasModule.execute(delta_seconds, available_emotions)` runs one tick:

1. Drops expired sensations.
2. Gathers new sensations from each emotivector's `update()`.
3. Reduces each sensation's lifetime by `delta_seconds`.
4. Sets each sensation's salience to its initial salience times its importance
   times the emotivector's importance.
5. Pairs each sensation with the available emotions that the personality
   allows.
6. Picks one emotion with `select_powerful_emotion`.

Emotions can be strings or hashable objects with a `name` attribute. The
chosen emotion replaces `desired_emotions` and is returned. When no emotion
applies, `desired_emotions` is cleared and `execute` returns None.

`BaltasModule.end_play()` resets the emotivectors.

`baltas.module` also provides the selection strategies as plain functions.
Each takes a list of `(sensation, emotion)` pairs:

- `select_most_salient_emotion`: the emotion of the most salient sensation.
- `select_most_common_emotion`: the emotion that occurs most often.
- `select_rarity_emotion`: the most frequent emotion, with ties broken by the
  highest single salience.
- `select_powerful_emotion`: the emotion with the largest summed salience.

## What the package does not do

The package does not observe a game world. It ships no ready-made emotivectors
for health or attack outcomes. It has no perception of combat events and no
salience functions of its own. Values reach an emotivector only through
`add_value`. The exogenous and endogenous salience functions are supplied by
the caller.