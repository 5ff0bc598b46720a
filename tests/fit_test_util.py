import numpy as np

from toy_data import Dataset


def polynomial_data(coeffs, xs):
    """y = sum(coeffs[i] * x ** i), lowest power first"""
    xs = np.asarray(xs, dtype=float)
    return Dataset(xs, np.polyval(coeffs[::-1], xs))


def mirror(data, model, params):
    """Dataset whose residuals against params are the negated residuals of data"""
    predicted = model.predict(params, data.x)
    return Dataset(data.x, 2 * predicted - data.y)
