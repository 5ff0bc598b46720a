import numpy as np

from regression_model import Function


class ModelFamily:
    """Maps (params, x) to predicted y"""
    n_params = None

    def predict(self, params, x):
        raise NotImplementedError()

    def check_params(self, params):
        params = np.array(params, dtype=float).reshape(-1)
        if len(params) != self.n_params:
            raise ValueError(
                f'{self!r} takes {self.n_params} parameters, got {len(params)}'
            )
        return params

    def __call__(self, params):
        return FittedCurve(self, params)


class PolynomialModel(ModelFamily):
    def __init__(self, degree):
        """
        degree: d >= 0, coefficients are given lowest power first
        """
        if int(degree) != degree or degree < 0:
            raise ValueError(f'degree must be a non-negative integer, got {degree}')
        self.degree = int(degree)
        self.n_params = self.degree + 1

    def predict(self, params, x):
        x = np.asarray(x, dtype=float)
        # Horner
        y = np.zeros_like(x)
        for c in params[::-1]:
            y = y * x + c
        return y

    def __repr__(self):
        return f'PolynomialModel(degree={self.degree})'


class AffineModel(ModelFamily):
    """y = slope * x + intercept, params are (slope, intercept)"""
    n_params = 2

    def predict(self, params, x):
        slope, intercept = params
        return slope * np.asarray(x, dtype=float) + intercept

    def __repr__(self):
        return 'AffineModel()'


class FittedCurve(Function):
    def __init__(self, model: ModelFamily, params, result=None):
        """result: the FitResult these params came from, if any"""
        self.model = model
        self.params = model.check_params(params)
        self.result = result

    def predict(self, x):
        return self.model.predict(self.params, x)

    def __repr__(self):
        return f'FittedCurve({self.model!r}, {self.params.tolist()})'
