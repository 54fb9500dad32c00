"""Predictors built on moving averages."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from baltas.predictor import Predictor


def _last_prediction(values: Sequence[float], predictions: Sequence[float]) -> tuple[float, float]:
    """Return the latest value and the latest prediction, or the value if none."""
    value = values[-1]
    return value, (predictions[-1] if predictions else value)


@dataclass
class MovingAveragePredictor(Predictor):
    """Average of the most recent ``window_size`` values."""

    window_size: int = 5
    default_value: float = 0.5

    def predict(self, values: Sequence[float], predictions: Sequence[float]) -> float:
        if not values:
            return self.default_value
        size = min(self.window_size, len(values))
        if size <= 0:
            return 0.0
        return sum(value / size for value in values[-size:])


@dataclass
class WeightedMovingAveragePredictor(Predictor):
    """Weighted average of the most recent values, newest value first in ``weights``.

    When fewer values than weights are available, the weight of the missing
    positions is spread evenly over the available ones.
    """

    weights: list[float] = field(default_factory=lambda: [0.5, 0.2, 0.1, 0.1, 0.1])
    default_value: float = 0.5

    def predict(self, values: Sequence[float], predictions: Sequence[float]) -> float:
        if not values:
            return self.default_value
        extra = 0.0
        if len(self.weights) > len(values):
            missing = self.weights[len(values):]
            extra = sum(missing) / len(values)
        newest_first = reversed(values)
        return sum(value * (weight + extra) for value, weight in zip(newest_first, self.weights))


@dataclass
class ExponentialMovingAveragePredictor(Predictor):
    """Exponential moving average; the previous prediction holds the running average."""

    default_value: float = 0.5
    smoothing: float = 2.0

    def predict(self, values: Sequence[float], predictions: Sequence[float]) -> float:
        if not values:
            return self.default_value
        value, last = _last_prediction(values, predictions)
        k = self.smoothing / (len(values) + 1)
        return value * k + last * (1 - k)


@dataclass
class MartinhoSimplePredictor(Predictor):
    """Simple approximation that moves the prediction by the exogenous salience.

    ``exogenous(value, prediction)`` and ``endogenous(value, prediction, desired)``
    are the salience measures the predictor is built on.
    """

    exogenous: Callable[[float, float], float]
    endogenous: Callable[[float, float, float], float]
    default_value: float = 0.5
    exogenous_factor: float = 10.0

    def predict(self, values: Sequence[float], predictions: Sequence[float]) -> float:
        if not values:
            return self.default_value
        value, last = _last_prediction(values, predictions)
        a = self.exogenous(value, last) * self.exogenous_factor
        return last * (1.0 - a) + value * a

    def predict_with_desired_value(
        self,
        values: Sequence[float],
        predictions: Sequence[float],
        desired_value: float,
    ) -> float:
        if not values:
            return self.default_value
        value, last = _last_prediction(values, predictions)
        a = self.exogenous(value, last) * self.exogenous_factor
        a += self.endogenous(value, last, desired_value) ** 2 * a
        return last * (1 - a) + value * a