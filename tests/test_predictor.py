import pytest

from baltas.predictor import Predictor


class _LastValue(Predictor):
    def __init__(self):
        self.calls = []

    def predict(self, values, predictions):
        self.calls.append((list(values), list(predictions)))
        return values[-1] if values else 0.0


def test_predictor_is_abstract():
    with pytest.raises(TypeError):
        Predictor()


def test_desired_value_defaults_to_plain_prediction():
    predictor = _LastValue()
    values = [0.25, 0.75]
    result = Predictor.predict_with_desired_value(predictor, values, [0.5], 0.9)
    assert result == 0.75


def test_desired_value_default_forwards_arguments():
    predictor = _LastValue()
    Predictor.predict_with_desired_value(predictor, [0.1, 0.2], [0.3], 0.9)
    assert predictor.calls == [([0.1, 0.2], [0.3])]


def test_subclass_may_override_desired_value():
    class _Desired(_LastValue):
        def predict_with_desired_value(self, values, predictions, desired_value):
            return desired_value

    predictor = _Desired()
    assert predictor.predict_with_desired_value([0.1], [], 0.9) == 0.9
    assert Predictor.predict_with_desired_value(predictor, [0.1], [], 0.9) == 0.1