import numpy as np

from polynomial import AffineModel


def loss_profile(loss, data, model, params, index, values):
    """
    Sweep params[index] over values, holding the other parameters fixed.
    Returns one loss per value.
    """
    params = model.check_params(params).copy()
    assert 0 <= index < len(params)

    out = np.empty(len(values))
    for i, v in enumerate(values):
        params[index] = v
        out[i] = loss(params, data, model)
    return out


def loss_surface(loss, data, slopes, intercepts, model=None):
    """
    Loss of an affine model over a (slope, intercept) grid.
    Returns array of shape (len(intercepts), len(slopes)), matching
    np.meshgrid(slopes, intercepts).
    """
    if model is None:
        model = AffineModel()
    assert model.n_params == 2

    surface = np.empty((len(intercepts), len(slopes)))
    for i, b in enumerate(intercepts):
        for j, m in enumerate(slopes):
            surface[i, j] = loss((m, b), data, model)
    return surface
