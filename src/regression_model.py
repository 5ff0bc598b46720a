import numpy as np


class Function:
    def predict(self, x) -> np.ndarray:
        raise NotImplementedError()

    def residuals(self, data) -> np.ndarray:
        """observed minus predicted, one per point"""
        return np.asarray(data.y, dtype=float) - self.predict(data.x)

    def error(self, data) -> np.ndarray:
        return np.abs(self.residuals(data))


class RegressionModel:
    def fit(self, data) -> Function:
        """Returns Function"""
        raise NotImplementedError()
