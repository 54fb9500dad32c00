"""Predictors that add predictions of the derivatives of the values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from baltas.predictor import Predictor

logger = logging.getLogger(__name__)

Derivative = Callable[[Sequence[float]], list]


def _differences(values: Sequence[float]) -> list[float]:
    """Differences between consecutive values."""
    return [after - before for before, after in zip(values, values[1:])]


def _run(
    predictor: Predictor,
    values: Sequence[float],
    predictions: Sequence[float],
    desired_value: float | None,
) -> float:
    if desired_value is None:
        return predictor.predict(values, predictions)
    return predictor.predict_with_desired_value(values, predictions, desired_value)


@dataclass
class AdditiveFirstDerivativePredictor(Predictor):
    """Base prediction plus a prediction of the first derivative."""

    default_value: float = 0.5
    base_predictor: Predictor | None = None
    first_derivative_predictor: Predictor | None = None
    derivative: Derivative = _differences

    def _combine(self, values, predictions, desired_value):
        if self.base_predictor is None:
            logger.warning("%s: No Base Predictor is defined.", type(self).__name__)
            return self.default_value
        base = _run(self.base_predictor, values, predictions, desired_value)
        if self.first_derivative_predictor is None:
            logger.warning("%s: No First Derivative Predictor is defined.", type(self).__name__)
            return base
        if len(values) < 2:
            return base
        first = self.derivative(values)
        return base + _run(self.first_derivative_predictor, first, [], desired_value)

    def predict(self, values, predictions):
        return self._combine(values, predictions, None)

    def predict_with_desired_value(self, values, predictions, desired_value):
        return self._combine(values, predictions, desired_value)


@dataclass
class FirstDerivativeOnlyPredictor(Predictor):
    """Prediction of the first derivative alone."""

    default_value: float = 0.5
    first_derivative_predictor: Predictor | None = None
    derivative: Derivative = _differences

    def _combine(self, values, desired_value):
        if self.first_derivative_predictor is None:
            logger.warning("%s: No First Derivative Predictor is defined.", type(self).__name__)
            return self.default_value
        if len(values) < 2:
            return values[0] if len(values) == 1 else self.default_value
        first = self.derivative(values)
        return _run(self.first_derivative_predictor, first, [], desired_value)

    def predict(self, values, predictions):
        return self._combine(values, None)

    def predict_with_desired_value(self, values, predictions, desired_value):
        return self._combine(values, desired_value)


@dataclass
class AdditiveSecondDerivativePredictor(Predictor):
    """Base prediction plus predictions of the first and second derivatives."""

    default_value: float = 0.5
    base_predictor: Predictor | None = None
    first_derivative_predictor: Predictor | None = None
    second_derivative_predictor: Predictor | None = None
    derivative: Derivative = _differences

    def _combine(self, values, predictions, desired_value):
        if self.base_predictor is None:
            logger.warning("%s: No Base Predictor is defined.", type(self).__name__)
            return self.default_value
        base = _run(self.base_predictor, values, predictions, desired_value)
        if self.first_derivative_predictor is None:
            logger.warning("%s: No First Derivative Predictor is defined.", type(self).__name__)
            return base
        if len(values) < 2:
            return base
        first = self.derivative(values)
        total = base + _run(self.first_derivative_predictor, first, [], desired_value)
        if self.second_derivative_predictor is None:
            logger.warning("%s: No Second Derivative Predictor is defined.", type(self).__name__)
            return total
        if len(first) < 2:
            return total
        second = self.derivative(first)
        return total + _run(self.second_derivative_predictor, second, [], desired_value)

    def predict(self, values, predictions):
        return self._combine(values, predictions, None)

    def predict_with_desired_value(self, values, predictions, desired_value):
        return self._combine(values, predictions, desired_value)