import logging

from curve_fitter import LossMinimizer
from polynomial import AffineModel, PolynomialModel

logger = logging.getLogger(__name__)


def model_for_degree(degree):
    """degree None means the affine (slope, intercept) model"""
    if degree is None:
        return AffineModel()
    return PolynomialModel(degree)


class FitSession:
    """
    Holds the clean dataset and the current control values. Every update
    re-fits synchronously and hands (dataset, curve) to the listeners.
    """

    def __init__(self, data, loss='squared', sigma=0.0, seed=None, degree=None,
                 initial_params=None, fitter=None):
        self.data = data
        self.fitter = fitter
        self.controls = {
            'loss': loss,
            'sigma': sigma,
            'seed': seed,
            'degree': degree,
            'initial_params': initial_params,
        }
        self._listeners = []
        self.last = None

    def subscribe(self, listener):
        """listener(dataset, curve) is called after every update"""
        self._listeners.append(listener)
        return listener

    def update(self, **controls):
        unknown = set(controls) - set(self.controls)
        if unknown:
            raise TypeError(f'unknown controls: {sorted(unknown)}')
        # controls are only committed once the fit succeeds
        c = {**self.controls, **controls}

        data = self.data.with_noise(c['sigma'], c['seed'])
        model = model_for_degree(c['degree'])
        initial_params = c['initial_params']
        if initial_params is not None and len(initial_params) != model.n_params:
            # a stale guess from another degree
            initial_params = None
        regression = LossMinimizer(model, c['loss'], initial_params, self.fitter)
        curve = regression.fit(data)
        logger.debug('update %s -> loss %.6g', c, curve.result.loss)

        self.controls = c
        self.last = (data, curve)
        for listener in self._listeners:
            listener(data, curve)
        return curve
