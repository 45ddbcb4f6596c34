import numpy as np


def symmetric_quantile(x, p):
    """Quantiles of a sample by symmetric order-statistic interpolation.

    The one-based rank of probability ``p`` among the ``L`` valid values is
    taken to be :math:`p(L - 1/2) + 1/2`, and the result is linearly
    interpolated between the order statistics on either side of it. This is
    *not* the default convention of :func:`np.quantile`, and the two differ
    noticeably in the tails of small samples.

    Parameters
    ----------
    x : (N,) array_like
        Sample. NaNs are ignored.
    p : float or (M,) array_like
        Probabilities in [0, 1].

    Returns
    -------
    q : float or (M,) np.ndarray
        One quantile per requested probability.

    Raises
    ------
    ValueError
        If fewer than two valid values remain, if a probability is outside
        [0, 1], or if the requested rank falls below the first order
        statistic (e.g. ``p=0.025`` requires at least 21 valid values).
    """
    x = np.asarray(x, dtype=float).ravel()
    x = np.sort(x[~np.isnan(x)])
    L = len(x)
    if L < 2:
        raise ValueError("Need at least two valid values for a quantile, "
                         "got {}.".format(L))
    scalar_p = np.ndim(p) == 0
    p = np.atleast_1d(np.asarray(p, dtype=float))
    if np.any((p < 0) | (p > 1)) or np.any(np.isnan(p)):
        raise ValueError("Probabilities must lie in [0, 1].")
    Y = np.full(p.shape, np.nan)
    for n, pn in enumerate(p):
        idx = pn*(L - 0.5) + 0.5
        lo = int(np.floor(idx))
        remainder = idx - lo
        if lo < 1:
            raise ValueError("Probability {} is below the first order "
                             "statistic of {} values.".format(pn, L))
        # one-based ranks, so x[lo - 1] is the lo'th order statistic
        if lo >= L:
            Y[n] = x[L - 1]
        else:
            Y[n] = (1 - remainder)*x[lo - 1] + remainder*x[lo]
    if scalar_p:
        return float(Y[0])
    return Y
