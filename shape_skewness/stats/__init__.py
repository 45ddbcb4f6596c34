import numpy as np
import pandas as pd

from .quantiles import *
from .distributions import *


def stats_to_frame(result, quantities=('skw', 'period')):
    """Flatten the statistics records of a bootstrap result for reporting.

    Parameters
    ----------
    result : dict
        Output of :func:`shape_skewness.bootstrap_skewness`.
    quantities : sequence of str
        Which statistics records to include, as rows.

    Returns
    -------
    df : pd.DataFrame
        Indexed by quantity, with columns ``mu``, ``sem``, ``p_t``,
        ``ci_low`` and ``ci_high``. The CI columns are NaN when no
        confidence interval could be computed.
    """
    rows = {}
    for name in quantities:
        record = result[name]
        CI = record['CI']
        if CI is None:
            CI = [np.nan, np.nan]
        rows[name] = {'mu': record['mu'], 'sem': record['sem'],
                      'p_t': record['p_t'], 'ci_low': CI[0],
                      'ci_high': CI[1]}
    df = pd.DataFrame.from_dict(rows, orient='index')
    df.index.name = 'quantity'
    return df[['mu', 'sem', 'p_t', 'ci_low', 'ci_high']]
