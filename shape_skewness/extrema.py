r"""Default extrema detection and skewness index for a single mean shape.

Any callable with the signature

    extractor(waveform, boundary_guess) -> (skewness, boundary, smoothed)

can be handed to :func:`shape_skewness.bootstrap_skewness`. The one here
smooths the waveform, resamples it on a fine grid with a cubic spline, and
finds a trough-peak-trough triple around the guessed period. The skewness
index compares the durations of the rising and falling flanks:

.. math::

    \mathrm{skw} = \frac{T_{down} - T_{up}}{T_{down} + T_{up}},

so it is positive for a fast rise and slow decay, negative for a slow rise
and fast decay, and zero for a symmetric cycle.

The returned boundary is in units of the fine grid, which has ``upsample``
points per original sample. With the default ``upsample=100`` this is what
the bootstrap loop expects when it maps a boundary back onto the original
time axis by dividing by 100.
"""
import numpy as np
from scipy.interpolate import CubicSpline
from scipy.signal import savgol_filter

from .util import fill_missing, round_half_away


def _missing(num_fine):
    return np.nan, np.full(3, np.nan), np.full(num_fine, np.nan)


def _savgol_window(period, num_samples, fraction=0.1, min_window=5):
    """Odd Savitzky-Golay window of about ``fraction`` of a period, that still
    fits in the waveform."""
    window = max(round_half_away(fraction*period), min_window)
    if window % 2 == 0:
        window += 1
    if window > num_samples:
        window = num_samples if num_samples % 2 == 1 else num_samples - 1
    return window


def smooth_and_upsample(waveform, period, upsample=100, polyorder=3):
    """Savitzky-Golay smooth a waveform, then spline it onto a fine grid.

    Parameters
    ----------
    waveform : (T,) array_like
        The (mean) shape. NaNs are linearly interpolated over first.
    period : float
        Approximate period in samples, sets the smoothing window.
    upsample : int
        Fine grid points per original sample.
    polyorder : int
        Order of the Savitzky-Golay polynomial. Smoothing is skipped when the
        waveform is too short for a window longer than this.

    Returns
    -------
    t_fine : ((T-1)*upsample + 1,) np.ndarray
        Fine grid positions in original sample units.
    smoothed : ((T-1)*upsample + 1,) np.ndarray
    """
    y = fill_missing(waveform)
    T = len(y)
    window = _savgol_window(period, T)
    if window > polyorder:
        y = savgol_filter(y, window, polyorder)
    t = np.arange(T)
    t_fine = np.linspace(0, T - 1, (T - 1)*upsample + 1)
    return t_fine, CubicSpline(t, y)(t_fine)


def find_extrema(smoothed, start, end):
    """Trough, peak, trough indices of one cycle of a finely sampled shape.

    The peak is the maximum within ``[start, end]``. The troughs are the
    minima within one period (``end - start``) before and after the peak.
    All indices are clipped to the signal.
    """
    last = len(smoothed) - 1
    period = end - start
    start = int(min(max(np.floor(start), 0), last))
    end = int(min(max(np.ceil(end), 0), last))
    if end <= start:
        return None
    peak = start + int(np.argmax(smoothed[start:end + 1]))
    lo = int(max(peak - np.ceil(period), 0))
    hi = int(min(peak + np.ceil(period), last))
    trough_before = lo + int(np.argmin(smoothed[lo:peak + 1]))
    trough_after = peak + int(np.argmin(smoothed[peak:hi + 1]))
    return trough_before, peak, trough_after


def skewness_from_extrema(waveform, bias, upsample=100):
    """Skewness index of a mean shape from its rise and fall durations.

    Parameters
    ----------
    waveform : (T,) array_like
        Mean shape on the original time axis. May contain NaNs.
    bias : (3,) array_like
        Approximate (start, mid, end) of one period, in original samples.
        Only start and end are used, to bound the peak search and set the
        scale of the smoothing and trough search.
    upsample : int
        Points per original sample of the returned smoothed waveform and
        boundary.

    Returns
    -------
    skewness : float
        :math:`(T_{down} - T_{up})/(T_{down} + T_{up})`, NaN on failure.
    boundary : (3,) np.ndarray
        Trough, peak, trough positions on the fine grid (all NaN on failure).
    smoothed : ((T-1)*upsample + 1,) np.ndarray
        The smoothed, upsampled waveform (all NaN on failure).
    """
    waveform = np.asarray(waveform, dtype=float).ravel()
    bias = np.asarray(bias, dtype=float)
    T = len(waveform)
    num_fine = max(T - 1, 0)*upsample + 1
    period = bias[2] - bias[0]
    if np.sum(np.isfinite(waveform)) < 4 or not np.all(np.isfinite(bias)) \
            or period <= 0:
        return _missing(num_fine)
    _, smoothed = smooth_and_upsample(waveform, period, upsample)
    extrema = find_extrema(smoothed, bias[0]*upsample, bias[2]*upsample)
    if extrema is None:
        return _missing(num_fine)
    start, mid, end = extrema
    t_up = mid - start
    t_down = end - mid
    if t_up + t_down <= 0:
        return np.nan, np.array(extrema, dtype=float), smoothed
    skewness = (t_down - t_up)/(t_down + t_up)
    return skewness, np.array(extrema, dtype=float), smoothed
