import numpy as np
import pytest
import scipy.stats

from shape_skewness.stats import (bootstrap_sem, bootstrap_summary,
                                  stats_to_frame, t_test_p_value)


def test_constant_distribution():
    record = bootstrap_summary(2.5*np.ones(30))
    assert record['mu'] == 2.5
    assert record['sem'] == 0
    assert np.allclose(record['CI'], [2.5, 2.5])
    # zero standard error, infinite t statistic
    assert record['p_t'] == 0


def test_constant_distribution_up_to_rounding():
    # 0.3 is not exactly representable, so the mean picks up rounding error
    record = bootstrap_summary(np.full(500, 0.3))
    assert np.isclose(record['mu'], 0.3)
    assert np.isclose(record['sem'], 0, atol=1e-12)
    assert np.allclose(record['CI'], [0.3, 0.3])
    assert np.isclose(record['p_t'], 0)


def test_zero_mean_zero_sem():
    record = bootstrap_summary(np.zeros(30))
    assert record['sem'] == 0
    assert np.isnan(record['p_t'])


def test_sem_uses_number_of_iterations():
    assert np.isclose(bootstrap_sem([1, 2, 3, 4]), np.sqrt(4/3*1.25))
    # NaNs drop out of the variance, but not out of N
    assert np.isclose(bootstrap_sem([1, 2, np.nan, 3]), np.sqrt(4/3*2/3))
    assert np.isnan(bootstrap_sem([1.0]))


def test_p_value_matches_student_t():
    rs = np.random.RandomState(1)
    distr = 0.1 + rs.standard_normal(40)
    record = bootstrap_summary(distr)
    t = record['mu']/record['sem']
    assert np.isclose(record['p_t'], scipy.stats.t.sf(np.abs(t), 39))
    assert np.isclose(t_test_p_value(0, 1, 10), 0.5)
    assert np.isnan(t_test_p_value(1, 1, 0))


def test_record_fields():
    distr = np.arange(50, dtype=float)
    record = bootstrap_summary(distr)
    assert set(record) == {'mu', 'sem', 'distr', 'p_t', 'CI'}
    assert np.all(record['distr'] == distr)
    assert record['CI'][0] < record['mu'] < record['CI'][1]


def test_too_few_values_for_ci():
    with pytest.warns(UserWarning, match='no confidence interval'):
        record = bootstrap_summary(np.arange(10, dtype=float))
    assert record['CI'] is None
    assert np.isclose(record['mu'], 4.5)


def test_all_missing():
    with pytest.warns(UserWarning):
        record = bootstrap_summary(np.full(30, np.nan))
    assert np.isnan(record['mu'])
    assert np.isnan(record['sem'])
    assert np.isnan(record['p_t'])
    assert record['CI'] is None


def test_stats_to_frame():
    with pytest.warns(UserWarning):
        result = {'skw': bootstrap_summary(np.linspace(-1, 1, 41)),
                  'period': bootstrap_summary(np.arange(5, dtype=float))}
    df = stats_to_frame(result)
    assert list(df.index) == ['skw', 'period']
    assert list(df.columns) == ['mu', 'sem', 'p_t', 'ci_low', 'ci_high']
    assert np.isclose(df.loc['skw', 'mu'], 0)
    assert np.isnan(df.loc['period', 'ci_low'])
