"""The interface shared by every value predictor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Predictor(ABC):
    """Computes the next expected value from the values seen so far."""

    @abstractmethod
    def predict(self, values: Sequence[float], predictions: Sequence[float]) -> float:
        """Return a prediction from recorded values and earlier predictions."""

    def predict_with_desired_value(
        self,
        values: Sequence[float],
        predictions: Sequence[float],
        desired_value: float,
    ) -> float:
        """Return a prediction that may be pulled towards a desired value.

        By default the desired value is ignored and this is the same as
        :meth:`predict`.
        """
        return self.predict(values, predictions)