import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import minimize

import fit_config
from losses import get_loss, sum_residuals
from polynomial import FittedCurve, ModelFamily
from regression_model import RegressionModel

logger = logging.getLogger(__name__)


class FitError(Exception):
    """An error that can occur during curve fitting."""


class InvalidInputError(FitError, ValueError):
    pass


class ConvergenceError(FitError):
    def __init__(self, result):
        super().__init__(f'minimizer did not converge: {result.message}')
        self.result = result


class NumericalError(FitError, FloatingPointError):
    pass


@dataclass(frozen=True)
class FitResult:
    params: tuple
    loss: float
    success: bool
    message: str = ''
    n_iter: int = 0
    n_eval: int = 0

    def curve(self, model: ModelFamily) -> FittedCurve:
        return FittedCurve(model, self.params, result=self)

    def raise_for_status(self):
        if not self.success:
            raise ConvergenceError(self)
        return self


class CurveFitter:
    def __init__(self, method=None, options=None, restarts=None):
        """
        method: scipy.optimize.minimize method, Nelder-Mead by default
        options: minimizer options, merged over fit_config.METHOD_OPTIONS[method]
        restarts: runs restarted from a converged optimum
        """
        self.method = method or fit_config.DEFAULT_METHOD
        self._overrides = dict(options or {})
        self.options = fit_config.minimizer_options(self.method, **self._overrides)
        self.restarts = fit_config.DEFAULT_RESTARTS if restarts is None else restarts
        assert self.restarts >= 0

    def fit(self, data, model: ModelFamily, loss, initial_params) -> FitResult:
        """
        Minimize loss(params, data, model) starting from initial_params.
        loss: callable or a name registered in losses.LOSSES
        """
        if len(data) == 0:
            raise InvalidInputError('cannot fit an empty dataset')
        try:
            x0 = model.check_params(initial_params)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e
        if not np.all(np.isfinite(x0)):
            raise InvalidInputError(f'initial params must be finite, got {x0.tolist()}')
        if isinstance(loss, str):
            loss = get_loss(loss)

        def objective(params):
            return loss(params, data, model)

        logger.debug(
            'fitting %r to %d points, loss=%s, x0=%s',
            model, len(data), getattr(loss, '__name__', loss), x0.tolist()
        )
        options = self.options_for(model, loss)
        res = self._minimize(objective, x0, options)
        n_iter, n_eval = getattr(res, 'nit', 0), res.nfev
        for _ in range(self.restarts):
            if not res.success:
                break
            # Nelder-Mead simplices can collapse early; a fresh simplex at the optimum recovers
            restarted = self._minimize(objective, res.x, options)
            n_iter += getattr(restarted, 'nit', 0)
            n_eval += restarted.nfev
            if restarted.fun <= res.fun:
                res = restarted

        if not (np.isfinite(res.fun) and np.all(np.isfinite(res.x))):
            raise NumericalError(
                f'non-finite result for {model!r}: loss={res.fun}, params={res.x.tolist()}'
            )

        result = FitResult(
            params=tuple(float(p) for p in res.x),
            loss=float(res.fun),
            success=bool(res.success),
            message=str(res.message),
            n_iter=int(n_iter),
            n_eval=int(n_eval),
        )
        if not result.success:
            logger.warning('fit of %r did not converge: %s', model, result.message)
        return result

    def options_for(self, model: ModelFamily, loss):
        """
        Minimizer options for one fit. Losses bounded below get an evaluation
        cap scaled by the parameter count; the plain sum keeps the base cap so
        its divergence stays finite. Explicit options always win.
        """
        options = dict(self.options)
        if loss is not sum_residuals:
            for key, value in fit_config.evaluation_budget(self.method, model.n_params).items():
                if key not in self._overrides:
                    options[key] = value
        return options

    def _minimize(self, objective, x0, options):
        return minimize(objective, x0, method=self.method, options=dict(options))


def fit(data, model, loss, initial_params, **kwargs) -> FitResult:
    """fit with a CurveFitter built from kwargs"""
    return CurveFitter(**kwargs).fit(data, model, loss, initial_params)


class LossMinimizer(RegressionModel):
    """Binds a model family, loss and initial guess so data alone can be fitted"""

    def __init__(self, model: ModelFamily, loss='squared', initial_params=None,
                 fitter: CurveFitter = None):
        self.model = model
        self.loss = loss
        if initial_params is None:
            initial_params = np.zeros(model.n_params)
        self.initial_params = initial_params
        self.fitter = fitter or CurveFitter()

    def fit(self, data) -> FittedCurve:
        result = self.fitter.fit(data, self.model, self.loss, self.initial_params)
        return result.curve(self.model)
