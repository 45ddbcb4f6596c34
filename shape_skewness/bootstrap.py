"""
Bootstrapped skewness of a population of noisy, roughly periodic shapes.

Individual shapes (e.g. the segments matched by a sliding window motif
search) are often too noisy to measure the asymmetry of one by one. Averaging
a large enough resample of them averages out most of the noise, and repeating
this many times gives an empirical sampling distribution of the skewness
index (and of the period length) of the mean shape.

A typical workflow, given a (num_shapes, num_timepoints) array ``shapes``,

.. code-block:: python

    >>> result = bootstrap_skewness(shapes, num_iterations=1000,
    ...                             random_state=0)
    >>> result['skw']['mu'], result['skw']['CI']
    >>> stats_to_frame(result)

This method assumes a unimodal distribution of skewness.
"""
import warnings

import numpy as np
from scipy.interpolate import CubicSpline

from .extrema import skewness_from_extrema
from .phase import initial_bias
from .stats import bootstrap_summary, symmetric_quantile
from .util import as_shape_matrix, nanmean_shape, round_half_away

# the extractor returns its boundary on a grid this many times finer than the
# input samples
BOUNDARY_SCALE = 100


def _as_random_state(random_state):
    if isinstance(random_state, np.random.RandomState):
        return random_state
    return np.random.RandomState(random_state)


def _report_progress(iteration, num_iterations):
    print('\rIteration {i:d}/{n:d}'.format(i=iteration, n=num_iterations),
          end='' if iteration < num_iterations else '\n')


def resample_mean_shape(shape_mat, sample_size, random_state=None):
    """Mean of ``sample_size`` shapes drawn uniformly with replacement."""
    rs = _as_random_state(random_state)
    num_shapes = shape_mat.shape[0]
    sel = np.floor(rs.rand(sample_size)*num_shapes).astype(int)
    return nanmean_shape(shape_mat[sel, :])


def bootstrap_distributions(shape_mat, num_iterations, bias, sample_size,
                            extractor=skewness_from_extrema,
                            random_state=None, verbose=False, ax=None):
    """The resample, average, measure loop.

    Parameters
    ----------
    shape_mat : (N, T) np.ndarray
        Shape population.
    num_iterations : int
        Number of bootstrap resamples.
    bias : (3,) array_like
        Boundary guess for the first iteration, in original samples.
    sample_size : int
        Number of shapes per resample.
    extractor : callable
        ``extractor(waveform, bias) -> (skewness, boundary, smoothed)``.
    random_state : None, int or np.random.RandomState
        Source of the resampling.
    verbose : bool
        Print an iteration counter.
    ax : matplotlib.axes.Axes, optional
        If given, each iteration's smoothed shape and boundary is drawn here.

    Returns
    -------
    skw : (num_iterations,) np.ndarray
        Skewness index of each resampled mean shape.
    boundaries : (num_iterations, 3) np.ndarray
        Refined (start, mid, end) of each iteration, in extractor units.
    smoothed : np.ndarray or None
        The smoothed shape returned by the last iteration.

    Notes
    -----
    After the first iteration, the boundary guess is frozen to the first
    refined boundary divided by :data:`BOUNDARY_SCALE`, so that every later
    resample is measured on the same period instead of drifting between
    neighbouring cycles.
    """
    rs = _as_random_state(random_state)
    skw = np.full(num_iterations, np.nan)
    boundaries = np.full((num_iterations, 3), np.nan)
    smoothed = None
    if ax is not None:
        from .plot import plot_iteration
    for i in range(num_iterations):
        mean_shape = resample_mean_shape(shape_mat, sample_size, rs)
        if verbose:
            _report_progress(i + 1, num_iterations)
        skw[i], boundaries[i, :], smoothed = extractor(mean_shape, bias)
        # missing-value sentinels may come back as scalars
        smoothed = np.atleast_1d(np.asarray(smoothed, dtype=float))
        if i == 0:
            bias = boundaries[0, :]/BOUNDARY_SCALE
        if ax is not None:
            plot_iteration(ax, smoothed, boundaries[i, :], skw[i], i + 1,
                           num_iterations)
    return skw, boundaries, smoothed


def interpolate_mean_shape(shape_mat, num_points):
    """Population mean shape, spline-interpolated onto ``num_points`` points
    spanning the original time axis.

    Only finite timepoints of the mean are used as spline knots, so columns
    where every shape is missing are filled in by the spline.
    """
    mean_shape = nanmean_shape(shape_mat)
    t = np.arange(len(mean_shape))
    t_int = np.linspace(0, len(mean_shape) - 1, num_points)
    good = np.isfinite(mean_shape)
    if np.sum(good) < 2:
        return np.interp(t_int, t[good], mean_shape[good]) if np.any(good) \
            else np.full(num_points, np.nan)
    return CubicSpline(t[good], mean_shape[good])(t_int)


def median_extrema(boundaries):
    """Median of each of the (start, mid, end) columns, independently."""
    extrema = np.full(3, np.nan)
    for j in range(3):
        try:
            extrema[j] = symmetric_quantile(boundaries[:, j], 0.5)
        except ValueError:
            warnings.warn('no median extrema position calculated.')
    return extrema


def bootstrap_skewness(shape_mat, num_iterations, frac=1, verbose=True,
                       ax=None, extractor=skewness_from_extrema,
                       random_state=None, alpha=0.05):
    """Bootstrap confidence interval of the skewness of noisy shapes.

    Parameters
    ----------
    shape_mat : (N, T) array_like
        N shapes of T timepoints each, NaN for missing samples.
    num_iterations : int
        How many resampled mean shapes to construct.
    frac : float, default: 1
        Fraction of the N shapes drawn for every resample. For correct
        bootstrap statistics this *should be* 1; anything else warns.
    verbose : bool, default: True
        Print an iteration counter.
    ax : matplotlib.axes.Axes, optional
        Axes to plot every resample on (smoothed, with its three extrema). No
        plotting is done if left None.
    extractor : callable
        ``extractor(waveform, bias) -> (skewness, boundary, smoothed)``.
        Defaults to :func:`skewness_from_extrema`.
    random_state : None, int or np.random.RandomState
        Seed for the resampling, for reproducible runs.
    alpha : float, default: 0.05
        1 - confidence level of the reported intervals.

    Returns
    -------
    result : dict
        ``mean_shape``: the population mean shape, interpolated to the
        resolution of the extractor's smoothed shapes.
        ``extrema``: median positions of the three extrema over iterations.
        ``skw`` and ``period``: statistics records for the skewness index and
        the period length (end - start), each with ``mu``, ``sem``,
        ``distr``, ``p_t`` (t-test of zero mean) and ``CI`` (None when it
        could not be calculated).
    """
    shape_mat = as_shape_matrix(shape_mat)
    if isinstance(num_iterations, bool) or \
            int(num_iterations) != num_iterations:
        raise ValueError("num_iterations must be a positive integer, got "
                         "{}.".format(num_iterations))
    num_iterations = int(num_iterations)
    if num_iterations < 1:
        raise ValueError("num_iterations must be a positive integer.")
    if not frac > 0:
        raise ValueError("frac must be positive, got {}.".format(frac))
    if frac != 1:
        warnings.warn('The sample size for the bootstrap statistics is not '
                      'equal to the original sample size. Statistics on the '
                      'mean will not be correct.')
    num_shapes, num_timepoints = shape_mat.shape
    sample_size = round_half_away(frac*num_shapes)
    if sample_size < 1:
        raise ValueError("frac*num_shapes rounds to zero shapes per "
                         "resample.")

    _, bias = initial_bias(shape_mat)
    skw, boundaries, smoothed = bootstrap_distributions(
        shape_mat, num_iterations, bias, sample_size, extractor=extractor,
        random_state=random_state, verbose=verbose, ax=ax,
    )
    periods = boundaries[:, 2] - boundaries[:, 0]

    num_points = num_timepoints if smoothed is None else len(smoothed)
    return {
        'mean_shape': interpolate_mean_shape(shape_mat, num_points),
        'extrema': median_extrema(boundaries),
        'skw': bootstrap_summary(skw, alpha),
        'period': bootstrap_summary(periods, alpha),
    }
