"""
Reduction of bootstrapped sampling distributions to inferential statistics.

The bootstrap loop produces one value of each quantity of interest (skewness
index, period length) per resample. Here those empirical distributions are
turned into a mean, a standard error, a one-sample t-test against zero and a
percentile-style confidence interval. Missing values (NaN) in a distribution
are ignored by every reduction, but the number of iterations (not the number
of valid values) is used for the bootstrap correction and degrees of freedom.
"""
import warnings

import numpy as np
import scipy.stats

from .quantiles import symmetric_quantile


def bootstrap_sem(distr):
    r"""Standard error of the mean estimated from a bootstrap distribution.

    Uses :math:`\sqrt{N/(N-1) \cdot \mathrm{Var}_0(D)}`, with the
    population (ddof=0) variance of the valid values and N the length of the
    distribution. Returns NaN for fewer than two iterations or an all-NaN
    distribution.
    """
    distr = np.asarray(distr, dtype=float)
    num_it = len(distr)
    if num_it < 2 or np.all(np.isnan(distr)):
        return np.nan
    return np.sqrt(num_it/(num_it - 1)*np.nanvar(distr))


def t_test_p_value(mu, sem, dof):
    r"""One minus the Student-t CDF at :math:`|\mu/\mathrm{sem}|`.

    A zero standard error is allowed: the statistic is infinite and the
    p-value 0 (or NaN when the mean is zero as well).
    """
    if dof < 1:
        return np.nan
    with np.errstate(divide='ignore', invalid='ignore'):
        t = np.float64(mu)/np.float64(sem)
    return float(1 - scipy.stats.t.cdf(np.abs(t), dof))


def bootstrap_summary(distr, alpha=0.05):
    """Statistics record for one bootstrapped quantity.

    Parameters
    ----------
    distr : (N,) array_like
        One value per bootstrap iteration, NaN where an iteration failed.
    alpha : float
        The confidence interval covers the central 1 - alpha of the
        distribution. Default 0.05 (95% CI).

    Returns
    -------
    record : dict
        ``mu`` (mean), ``sem`` (standard error of ``mu``), ``distr`` (the
        input as an ndarray), ``p_t`` (p-value of a t-test of ``mu`` against
        zero) and ``CI`` (``[lower, upper]``, or None when there are too few
        valid values to compute it).

    Notes
    -----
    The t-test and confidence interval assume the resamples were drawn at
    the full population size. For sub-sampled bootstraps they are only
    indicative.

    For a nonzero constant distribution ``mu`` equals the constant and
    ``sem`` is zero only up to floating point rounding of the mean (e.g.
    ``sem`` of order 1e-17 for 500 copies of 0.3); ``p_t`` is 0 either way.
    """
    distr = np.asarray(distr, dtype=float)
    num_it = len(distr)
    if np.all(np.isnan(distr)):
        mu = np.nan
    else:
        mu = np.nanmean(distr)
    sem = bootstrap_sem(distr)
    p_t = t_test_p_value(mu, sem, num_it - 1)
    try:
        CI = symmetric_quantile(distr, [alpha/2, 1 - alpha/2])
    except ValueError:
        warnings.warn('no confidence interval(s) calculated.')
        CI = None
    return {'mu': mu, 'sem': sem, 'distr': distr, 'p_t': p_t, 'CI': CI}
