"""Input checking and missing-aware helpers shared across the package."""
import warnings

import numpy as np


def as_shape_matrix(shape_mat):
    """Validate a (num_shapes, num_timepoints) population as a float array.

    Missing samples are expected to be encoded as NaN.
    """
    shape_mat = np.asarray(shape_mat, dtype=float)
    if shape_mat.ndim != 2:
        raise ValueError("shape_mat must be 2-D (num_shapes x num_timepoints),"
                         " got {}-D input.".format(shape_mat.ndim))
    num_shapes, num_timepoints = shape_mat.shape
    if num_shapes < 1 or num_timepoints < 1:
        raise ValueError("shape_mat must contain at least one shape and one "
                         "timepoint.")
    return shape_mat


def nanmean_shape(shape_mat):
    """Column-wise mean of the shapes, ignoring NaNs.

    Timepoints where every shape is missing come back as NaN, without the
    "Mean of empty slice" RuntimeWarning numpy would otherwise emit.
    """
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        return np.nanmean(shape_mat, axis=0)


def nanvar_shape(shape_mat):
    """Column-wise population variance (ddof=0) of the shapes, ignoring
    NaNs."""
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        return np.nanvar(shape_mat, axis=0)


def fill_missing(y):
    """Linearly interpolate over NaNs in a 1-D signal.

    Leading/trailing NaNs take the value of the nearest finite sample. If
    nothing is finite, the input is returned unchanged (all NaN).
    """
    y = np.array(y, dtype=float)
    good = np.isfinite(y)
    if np.all(good) or not np.any(good):
        return y
    x = np.arange(len(y))
    y[~good] = np.interp(x[~good], x[good], y[good])
    return y


def round_half_away(x):
    """Round to the nearest integer, halves away from zero (unlike the
    banker's rounding of the builtin :func:`round`)."""
    return int(np.sign(x)*np.floor(np.abs(x) + 0.5))
