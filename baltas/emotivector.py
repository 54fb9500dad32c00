"""The emotivector: an anticipation mechanism that turns values into sensations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from baltas.averages import ExponentialMovingAveragePredictor
from baltas.derivatives import AdditiveSecondDerivativePredictor
from baltas.predictor import Predictor
from baltas.sensation import Sensation, SensationType, SensationValence


class PredictorsNotDefinedError(RuntimeError):
    """Raised when an emotivector is used without usable predictors."""


def _clamp(value: float, interval: tuple[float, float]) -> float:
    low, high = interval
    return min(max(value, low), high)


@dataclass(eq=False)
class Emotivector:
    """Predicts upcoming values and records salient sensations when they surprise.

    ``exogenous(value, prediction)`` gives the salience of a surprise and
    ``endogenous(value, prediction, desired)`` the extra salience used when a
    desired value is in play.
    """

    exogenous: Callable[[float, float], float]
    endogenous: Callable[[float, float, float], float] | None = None
    predictor: Predictor | None = None
    meta_predictor: Predictor | None = None
    use_desired_value: bool = False
    desired_value: float = 0.5
    importance: float = 1.0
    clamp_values: bool = False
    clamp_interval: tuple[float, float] = (0.0, 1.0)
    values: list[float] = field(default_factory=list)
    predictions: list[float] = field(default_factory=list)
    prediction_errors: list[float] = field(default_factory=list)
    meta_predictions: list[float] = field(default_factory=list)
    salient_sensations: list[Sensation] = field(default_factory=list)
    owner_module: Any = field(default=None, repr=False)
    owner: Any = field(default=None, repr=False)
    owner_agent_component: Any = field(default=None, repr=False)

    def initialize(self, module: Any) -> None:
        """Attach to the owning module and fill in any missing predictors."""
        self.owner_module = module
        self.owner = getattr(module, "owner", None)
        self.owner_agent_component = getattr(module, "owner_agent_component", None)

        if self.predictor is None:
            base = ExponentialMovingAveragePredictor()
            self.predictor = AdditiveSecondDerivativePredictor(
                base_predictor=base,
                first_derivative_predictor=base,
                second_derivative_predictor=base,
            )
        if self.meta_predictor is None:
            self.meta_predictor = ExponentialMovingAveragePredictor(default_value=0.01)

    def reset(self) -> None:
        """Forget every value, prediction and pending sensation."""
        self.values.clear()
        self.predictions.clear()
        self.prediction_errors.clear()
        self.meta_predictions.clear()
        self.salient_sensations.clear()

    def _maybe_clamp(self, value: float) -> float:
        return _clamp(value, self.clamp_interval) if self.clamp_values else value

    def add_value(self, value: float) -> None:
        """Record a value, compare it with the last prediction and predict again.

        A surprising value adds a sensation to :attr:`salient_sensations`.
        """
        if not isinstance(self.predictor, Predictor) or not isinstance(self.meta_predictor, Predictor):
            raise PredictorsNotDefinedError("Predictors are not well defined.")
        if self.use_desired_value and self.endogenous is None:
            raise PredictorsNotDefinedError("A desired value needs an endogenous salience function.")

        if self.values and self.predictions:
            prediction = self.predictions[-1]
            previous = self.values[-1]
            expected_reward = prediction - previous
            sensed_reward = value - previous
            prediction_error = abs(expected_reward - sensed_reward)
            self.prediction_errors.append(prediction_error)

            tolerance = self.meta_predictions[-1] if self.meta_predictions else prediction_error

            if prediction_error > tolerance:
                salience = self.exogenous(value, prediction)
                if self.use_desired_value:
                    salience += self.endogenous(value, prediction, self.desired_value)

                reference = sensed_reward if expected_reward == 0 else expected_reward
                valence = SensationValence.PUNISHMENT if reference < 0 else SensationValence.REWARD
                sensation_type = (
                    SensationType.WORSE_THAN_EXPECTED
                    if sensed_reward < expected_reward
                    else SensationType.BETTER_THAN_EXPECTED
                )
                self.salient_sensations.append(self.make_sensation(valence, sensation_type, salience))

            self.meta_predictions.append(
                self.meta_predictor.predict(self.prediction_errors, self.meta_predictions)
            )

        self.values.append(self._maybe_clamp(value))
        if self.use_desired_value:
            next_prediction = self.predictor.predict_with_desired_value(
                self.values, self.predictions, self.desired_value
            )
        else:
            next_prediction = self.predictor.predict(self.values, self.predictions)
        self.predictions.append(self._maybe_clamp(next_prediction))

    def update(self) -> list[Sensation]:
        """Run :meth:`on_update` and hand over the sensations gathered since last time."""
        self.on_update()
        sensations = list(self.salient_sensations)
        self.salient_sensations.clear()
        return sensations

    def on_update(self) -> None:
        """Hook run before sensations are collected; does nothing by default."""

    def make_sensation(
        self,
        valence: SensationValence,
        sensation_type: SensationType,
        salience: float,
        lifetime: float = 5.0,
        importance: float = 1.0,
    ) -> Sensation:
        """Create a sensation that belongs to this emotivector."""
        return Sensation(
            valence=valence,
            type=sensation_type,
            initial_salience=salience,
            salience=salience,
            initial_lifetime=lifetime,
            lifetime=lifetime,
            importance=importance,
            emotivector=self,
        )