import numpy as np
import matplotlib.pyplot as plt


def get_lim(x, margin=0.1):
    x = np.asarray(x, dtype=float)
    x = x[np.isfinite(x)]
    if len(x) == 0:
        return [-1, 1]
    min = np.min(x)
    max = np.max(x)
    dx = max - min
    if dx == 0:
        dx = 1
    return [min - margin*dx, max + margin*dx]


def plot_iteration(ax, smoothed, boundary, skewness, iteration,
                   num_iterations):
    """Draw one bootstrap resample: its smoothed mean shape with the three
    detected extrema as vertical lines. Replaces whatever was on ``ax``."""
    ax.cla()
    ax.plot(smoothed)
    for position in boundary:
        if np.isfinite(position):
            ax.axvline(position, color='k', linestyle='--', linewidth=1)
    if len(smoothed) > 1:
        ax.set_xlim([0, len(smoothed) - 1])
    ax.set_title('Iteration {}/{}; Skewness: {:1.3f}'.format(
        iteration, num_iterations, skewness))
    ax.figure.canvas.draw_idle()
    return ax


def plot_summary(result, ax=None):
    """Interpolated population mean shape with the median extrema of a
    :func:`shape_skewness.bootstrap_skewness` run.

    The title reports the mean skewness index and its confidence interval,
    when one could be calculated.
    """
    if ax is None:
        fig, ax = plt.subplots()
    mean_shape = result['mean_shape']
    ax.plot(mean_shape, 'k')
    for position in result['extrema']:
        if np.isfinite(position):
            ax.axvline(position, color='r', linestyle='-.')
    ax.set_ylim(get_lim(mean_shape))
    title = 'Skewness: {:1.3f}'.format(result['skw']['mu'])
    CI = result['skw']['CI']
    if CI is not None:
        title += ' (CI [{:1.3f}, {:1.3f}])'.format(CI[0], CI[1])
    ax.set_title(title)
    return ax
