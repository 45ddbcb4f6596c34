"""Locating one period of a population of roughly periodic shapes.

Before any resampling happens, the full population is used to guess the
period length and which stretch of the recording is the best-behaved single
period to measure. The resulting boundary guess seeds the extrema detection
of the first bootstrap iteration.
"""
import numpy as np

from .util import fill_missing, nanmean_shape, nanvar_shape, round_half_away

# extra cost of a window at the very edge of the recording, relative to one
# in the centre
EDGE_PENALTY = 0.1


def nextpow2(n):
    """Smallest k such that 2**k >= n."""
    return int(np.ceil(np.log2(n))) if n > 1 else 0


def estimate_period_length(mean_shape, demean=True):
    """Dominant period (in samples) of a waveform, from its spectrum.

    The waveform is zero-padded to four times the next power of two above its
    length to get sub-bin frequency resolution, and the period is read off the
    largest non-DC bin of the magnitude spectrum.

    Parameters
    ----------
    mean_shape : (T,) array_like
        Typically the column mean of the shape population. NaNs are linearly
        interpolated over.
    demean : bool
        Subtract the mean first. Without this, leakage of the DC term of the
        zero-padded transform into the lowest bins can beat the real
        fundamental for waveforms that are not centered on zero.

    Returns
    -------
    period : int
        ``round(nfft/peak_bin)``, clipped to ``[2, T]``. ``peak_bin`` is the
        zero-based bin, at frequency ``peak_bin/nfft`` cycles per sample.
    """
    y = fill_missing(mean_shape)
    T = len(y)
    if not np.any(np.isfinite(y)):
        raise ValueError("Cannot estimate a period from an all-missing "
                         "waveform.")
    if demean:
        y = y - np.mean(y)
    nfft = 2**nextpow2(T)*4
    spectrum = np.abs(np.fft.fft(y, nfft))
    # skip the DC bin
    peak_bin = np.argmax(spectrum[1:nfft//2 + 1]) + 1
    period = round_half_away(nfft/peak_bin)
    return int(min(max(period, 2), T))


def edge_penalty(num_positions, edge_cost=EDGE_PENALTY):
    """Parabolic weight over window positions, 1 in the centre and
    ``1 + edge_cost`` at both ends."""
    if num_positions < 2:
        return np.ones(num_positions)
    parabola = np.arange(1, num_positions + 1) - num_positions/2 - 0.5
    parabola = parabola/parabola[-1]
    return 1 + parabola**2*edge_cost


def locate_bias(var_shape, period, edge_cost=EDGE_PENALTY):
    """Boundary guess for the least noisy, most central single period.

    Parameters
    ----------
    var_shape : (T,) array_like
        Per-timepoint variance across the shape population. Missing entries
        are treated as the noisiest timepoints observed.
    period : int
        Period length in samples, e.g. from :func:`estimate_period_length`.
    edge_cost : float
        Relative extra cost of the windows at the edges of the recording.

    Returns
    -------
    bias : (3,) np.ndarray
        ``[start, start + period/2 + 0.5, start + period]`` where ``start``
        (zero-based) minimizes the penalized summed variance of the window
        ``[start, start + period)``.
    """
    var_shape = np.array(var_shape, dtype=float)
    missing = np.isnan(var_shape)
    if np.all(missing):
        var_shape[:] = 0
    elif np.any(missing):
        var_shape[missing] = np.nanmax(var_shape)
    period = int(period)
    if period < 1 or period > len(var_shape):
        raise ValueError("period must be between 1 and the number of "
                         "timepoints ({}), got {}.".format(len(var_shape),
                                                          period))
    window_var = np.convolve(var_shape, np.ones(period), 'valid')
    cost = window_var*edge_penalty(len(window_var), edge_cost)
    start = int(np.argmin(cost))
    return np.array([start, start + period/2 + 0.5, start + period],
                    dtype=float)


def initial_bias(shape_mat):
    """Period length and boundary guess for a full shape population.

    Returns
    -------
    period : int
    bias : (3,) np.ndarray
    """
    period = estimate_period_length(nanmean_shape(shape_mat))
    bias = locate_bias(nanvar_shape(shape_mat), period)
    return period, bias
