import matplotlib.pyplot as plt
import numpy as np


def plot_fit(data, curve, ax=None, n_points=200):
    """Scatter the data and draw the fitted curve over its x range"""
    if ax is None:
        _, ax = plt.subplots()

    ax.scatter(data.x, data.y, color='tab:blue', label='data')
    if len(data):
        xs = np.linspace(np.min(data.x), np.max(data.x), n_points)
        label = 'fit'
        if curve.result is not None:
            label = f'fit (loss={curve.result.loss:.4g})'
        ax.plot(xs, curve.predict(xs), color='tab:red', label=label)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend()
    return ax


def plot_loss_profile(values, losses, ax=None, xlabel='slope'):
    if ax is None:
        _, ax = plt.subplots()
    ax.plot(values, losses)
    ax.set_xlabel(xlabel)
    ax.set_ylabel('loss')
    return ax
