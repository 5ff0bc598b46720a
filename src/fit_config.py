"""
Minimizer defaults shared by every fit.

Exports:
    DEFAULT_METHOD (str): scipy.optimize.minimize method name.
    METHOD_OPTIONS (dict): default options per minimizer method.
    EVALS_PER_PARAM (int): evaluation budget per parameter for bounded losses.
    DEFAULT_RESTARTS (int): extra runs started from the previous optimum.
"""

DEFAULT_METHOD = 'Nelder-Mead'

# maxfev bounds how far an unbounded loss (plain sum) can run before overflow
METHOD_OPTIONS = {
    'Nelder-Mead': {
        'xatol': 1e-8,
        'fatol': 1e-10,
        'maxiter': 1000,
        'maxfev': 1000,
    },
}

EVALS_PER_PARAM = 2000

DEFAULT_RESTARTS = 2


def minimizer_options(method=DEFAULT_METHOD, **overrides):
    """defaults for method (none for methods without an entry) updated by overrides"""
    options = dict(METHOD_OPTIONS.get(method, {}))
    options.update(overrides)
    return options


def evaluation_budget(method, n_params):
    """
    Caps for a loss bounded below, growing with the parameter count.
    Empty for methods that take no evaluation cap defaults.
    """
    defaults = METHOD_OPTIONS.get(method, {})
    budget = {}
    for key in ('maxiter', 'maxfev'):
        if key in defaults:
            budget[key] = max(defaults[key], EVALS_PER_PARAM * n_params)
    return budget
