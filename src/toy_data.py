import numpy as np


class Dataset:
    """
    Ordered (x, y) pairs. Immutable: the arrays are read-only and every
    transformation returns a new Dataset.
    """

    def __init__(self, x, y):
        x = np.array(x, dtype=float).reshape(-1)
        y = np.array(y, dtype=float).reshape(-1)
        if len(x) != len(y):
            raise ValueError(f'x and y differ in length: {len(x)} != {len(y)}')
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ValueError('dataset contains non-finite values')
        x.setflags(write=False)
        y.setflags(write=False)
        self._x = x
        self._y = y

    @classmethod
    def from_pairs(cls, pairs):
        pairs = list(pairs)
        if not pairs:
            return cls([], [])
        x, y = zip(*pairs)
        return cls(x, y)

    @classmethod
    def from_function(cls, f, xs):
        xs = np.asarray(xs, dtype=float)
        return cls(xs, [f(x) for x in xs])

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    def with_noise(self, sigma, rng=None):
        """
        Add independent N(0, sigma^2) noise to each y.
        rng: numpy Generator, int seed or None
        """
        if sigma < 0:
            raise ValueError(f'sigma must be non-negative, got {sigma}')
        if sigma == 0:
            return Dataset(self._x, self._y)
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)
        return Dataset(self._x, self._y + rng.normal(0, sigma, len(self._y)))

    def pairs(self):
        return list(zip(self._x.tolist(), self._y.tolist()))

    def __len__(self):
        return len(self._x)

    def __iter__(self):
        return iter(self.pairs())

    def __eq__(self, other):
        if not isinstance(other, Dataset):
            return NotImplemented
        return np.array_equal(self._x, other._x) and np.array_equal(self._y, other._y)

    def __hash__(self):
        return hash((self._x.tobytes(), self._y.tobytes()))

    def __repr__(self):
        return f'Dataset(n={len(self)})'


def line_dataset(slope=5, intercept=3, start=0, stop=6, step=0.5):
    """y = slope * x + intercept sampled on [start, stop]"""
    n = int(round((stop - start) / step)) + 1
    xs = start + step * np.arange(n)
    return Dataset(xs, slope * xs + intercept)
