import numpy as np
import pytest

from mlpp.cloglog_reg import CLogLogReg

X = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
Y = [0.0, 0.0, 0.0, 1.0]


def _mse(model):
    return float(np.mean((model.predict_many(X) - np.asarray(Y)) ** 2))


def test_predictions_lie_in_unit_interval():
    model = CLogLogReg(X, Y, rng=1)
    preds = model.predict_many(X)
    assert preds.shape == (4,)
    assert np.all((preds > 0) & (preds < 1))


def test_predict_matches_predict_many():
    model = CLogLogReg(X, Y, rng=2)
    many = model.predict_many(X)
    single = [model.predict(row) for row in X]
    assert np.allclose(many, single)


def test_gradient_descent_reduces_error():
    model = CLogLogReg(X, Y, rng=3)
    before = _mse(model)
    model.gradient_descent(0.5, 200, ui=False)
    assert _mse(model) < before


def test_mbgd_reduces_error():
    model = CLogLogReg(X, Y, rng=4)
    before = _mse(model)
    model.mbgd(0.5, 200, 2, ui=False)
    assert _mse(model) < before


def test_ridge_with_zero_rate_scales_weights():
    model = CLogLogReg(X, Y, reg="Ridge", lam=0.5, rng=5)
    start = model.weights.copy()
    model.gradient_descent(0.0, 1, ui=False)
    assert np.allclose(model.weights, start * 0.5)


def test_weight_clipping_pins_weights_to_bound():
    model = CLogLogReg(X, Y, reg="WeightClipping", lam=0.2, alpha=0.2, rng=6)
    model.gradient_descent(0.1, 3, ui=False)
    np.testing.assert_allclose(model.weights, [0.2, 0.2])


def test_sgd_is_reproducible_with_seed():
    a = CLogLogReg(X, Y, rng=7)
    b = CLogLogReg(X, Y, rng=7)
    a.sgd(0.3, 20, ui=False)
    b.sgd(0.3, 20, ui=False)
    assert np.allclose(a.weights, b.weights)
    assert a.bias == pytest.approx(b.bias)


def test_score_is_a_fraction():
    model = CLogLogReg(X, Y, rng=8)
    model.gradient_descent(0.5, 50, ui=False)
    assert 0.0 <= model.score() <= 1.0


def test_ui_reports_progress(capsys):
    model = CLogLogReg(X, Y, rng=9)
    model.gradient_descent(0.1, 2, ui=True)
    out = capsys.readouterr().out
    assert "Epoch 1" in out
    assert "Epoch 2" in out


@pytest.mark.parametrize("size", [0, 5])
def test_mbgd_rejects_bad_batch_size(size):
    model = CLogLogReg(X, Y, rng=10)
    with pytest.raises(ValueError):
        model.mbgd(0.1, 1, size, ui=False)


def test_unknown_regularization_raises():
    with pytest.raises(ValueError):
        CLogLogReg(X, Y, reg="Bogus")


def test_mismatched_outputs_raise():
    with pytest.raises(ValueError):
        CLogLogReg(X, [0.0, 1.0])