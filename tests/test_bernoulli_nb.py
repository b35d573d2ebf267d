import numpy as np
import pytest

from mlpp.bernoulli_nb import BernoulliNB

INPUTS = [[1, 2], [1, 2], [3, 4], [3, 4]]
OUTPUTS = [0, 0, 1, 1]


def test_separable_data_is_classified():
    model = BernoulliNB(INPUTS, OUTPUTS)
    assert model.predict([1, 2]) == 0.0
    assert model.predict([3, 4]) == 1.0


def test_training_score_is_perfect_on_separable_data():
    model = BernoulliNB(INPUTS, OUTPUTS)
    assert model.score() == 1.0


def test_predict_many_matches_predict():
    model = BernoulliNB(INPUTS, OUTPUTS)
    rows = [[1, 2], [3, 4], [1, 4]]
    assert np.array_equal(model.predict_many(rows), [model.predict(r) for r in rows])


def test_tie_goes_to_class_one():
    model = BernoulliNB(INPUTS, OUTPUTS)
    assert model.predict([9, 9]) == 1.0


def test_priors_sum_to_one():
    model = BernoulliNB([[1, 2], [3, 4], [3, 4]], [0, 1, 1])
    assert model.prior_0 + model.prior_1 == pytest.approx(1.0)
    assert model.prior_1 > model.prior_0


def test_vocabulary_holds_every_seen_value():
    model = BernoulliNB(INPUTS, OUTPUTS)
    assert model.vocab == [1.0, 2.0, 3.0, 4.0]


def test_non_binary_outputs_raise():
    with pytest.raises(ValueError):
        BernoulliNB(INPUTS, [0, 1, 2, 1])


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        BernoulliNB(INPUTS, [0, 1])


def test_empty_inputs_raise():
    with pytest.raises(ValueError):
        BernoulliNB([], [])