import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

import shape_skewness as ss
from shape_skewness.plot import get_lim, plot_iteration, plot_summary


def test_plot_every_iteration(noisy_triangles):
    fig, ax = plt.subplots()
    ss.bootstrap_skewness(noisy_triangles, 5, verbose=False, ax=ax,
                          random_state=0)
    assert ax.get_title().startswith('Iteration 5/5; Skewness: ')
    # only the last resample is left on the axes
    assert len(ax.get_lines()) == 1 + 3
    plt.close(fig)


def test_plot_iteration_skips_missing_boundary():
    fig, ax = plt.subplots()
    plot_iteration(ax, np.sin(np.linspace(0, 6, 50)),
                   [np.nan, np.nan, np.nan], np.nan, 1, 10)
    assert len(ax.get_lines()) == 1
    assert ax.get_title() == 'Iteration 1/10; Skewness: nan'
    plt.close(fig)


def test_plot_summary(noisy_triangles):
    result = ss.bootstrap_skewness(noisy_triangles, 25, verbose=False,
                                   random_state=0)
    ax = plot_summary(result)
    assert ax.get_title().startswith('Skewness: ')
    assert 'CI' in ax.get_title()
    plt.close(ax.figure)


def test_get_lim():
    assert np.allclose(get_lim([0, 10]), [-1, 11])
    assert np.allclose(get_lim([np.nan, 2, 2]), [1.9, 2.1])


def test_plot_scalar_missing_sentinels(noisy_triangles):
    def failing_extractor(waveform, bias):
        return np.nan, np.nan, np.nan

    fig, ax = plt.subplots()
    ss.bootstrap_distributions(noisy_triangles, 3, [0, 25, 50], 200,
                               extractor=failing_extractor, ax=ax)
    assert ax.get_title() == 'Iteration 3/3; Skewness: nan'
    assert len(ax.get_lines()) == 1
    plt.close(fig)
