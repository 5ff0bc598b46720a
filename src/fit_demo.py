"""
Walk through the three losses on the tutorial line y = 5x + 3.

    lsq-tutorial --sigma 2 --seed 0 --degree 2 --plot fits.png
"""
import argparse
import logging

from fit_session import FitSession
from logging_config import FIT_LOGGERS, setup_logging
from losses import LOSSES
from toy_data import line_dataset

logger = logging.getLogger('fit_demo')


def run(sigma=0.0, seed=None, degree=None, plot=None):
    """Fit every registered loss and return {name: FittedCurve}"""
    session = FitSession(line_dataset(), sigma=sigma, seed=seed, degree=degree)
    curves = {}
    for name in LOSSES:
        curve = session.update(loss=name)
        result = curve.result
        logger.info(
            '%-8s params=%s loss=%.6g converged=%s',
            name, [round(p, 4) for p in result.params], result.loss, result.success
        )
        curves[name] = curve

    if plot:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        from fit_plot import plot_fit

        fig, axes = plt.subplots(1, len(curves), figsize=(5 * len(curves), 4))
        data = session.last[0]
        for ax, (name, curve) in zip(axes, curves.items()):
            plot_fit(data, curve, ax=ax)
            ax.set_title(name)
        fig.savefig(plot)
        plt.close(fig)
        logger.info('saved %s', plot)
    return curves


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument('--sigma', type=float, default=0.0, help='noise standard deviation')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--degree', type=int, default=None,
                        help='polynomial degree, affine when omitted')
    parser.add_argument('--plot', default=None, help='save the fits to this image file')
    parser.add_argument('--log-file', default=None)
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    setup_logging(
        logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file,
        names=('fit_demo',) + FIT_LOGGERS,
    )
    run(sigma=args.sigma, seed=args.seed, degree=args.degree, plot=args.plot)


if __name__ == '__main__':
    main()
