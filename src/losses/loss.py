# Residual aggregating loss functions

import numpy as np


def residuals(params, data, model):
    """observed minus predicted"""
    return data.y - model.predict(params, data.x)


def sum_residuals(params, data, model):
    """
    Plain sum of signed residuals.
    Not bounded below: positive and negative residuals cancel, and moving the
    curve far above the data drives the loss to minus infinity.
    """
    return float(np.sum(residuals(params, data, model)))


def sum_abs_residuals(params, data, model):
    return float(np.sum(np.abs(residuals(params, data, model))))


def sum_squared_residuals(params, data, model):
    return float(np.sum(residuals(params, data, model) ** 2))


LOSSES = {
    'sum': sum_residuals,
    'abs': sum_abs_residuals,
    'squared': sum_squared_residuals,
}


def get_loss(name):
    try:
        return LOSSES[name]
    except KeyError:
        raise KeyError(
            f'unknown loss {name!r}, expected one of {sorted(LOSSES)}'
        ) from None
