"""Command line entry point: bootstrap the skewness of shapes in a CSV."""
import argparse

import numpy as np
import pandas as pd

from .bootstrap import bootstrap_skewness
from .stats import stats_to_frame


def load_shapes(path, header=True):
    """Read a shape matrix from CSV, one shape per row.

    Empty cells (and anything pandas parses as NaN) become missing samples.
    """
    df = pd.read_csv(path, header=0 if header else None)
    return df.apply(pd.to_numeric, errors='coerce').to_numpy(dtype=float)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Bootstrap confidence intervals of the skewness index "
                    "and period of a population of shapes.")
    parser.add_argument("shapes", help="CSV file, one shape per row")
    parser.add_argument("--num-iterations", "-n", type=int, default=1000,
                        help="Number of bootstrap resamples")
    parser.add_argument("--frac", type=float, default=1,
                        help="Fraction of shapes drawn per resample")
    parser.add_argument("--alpha", type=float, default=0.05,
                        help="1 - confidence level of the intervals")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible resampling")
    parser.add_argument("--no-header", action="store_true",
                        help="The CSV has no header row")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Do not print the iteration counter")
    args = parser.parse_args(argv)
    if args.num_iterations < 1:
        parser.error("--num-iterations must be positive")
    if not args.frac > 0:
        parser.error("--frac must be positive")

    shapes = load_shapes(args.shapes, header=not args.no_header)
    result = bootstrap_skewness(
        shapes, args.num_iterations, frac=args.frac, verbose=not args.quiet,
        random_state=args.seed, alpha=args.alpha,
    )
    with pd.option_context('display.float_format', '{:.4g}'.format):
        print(stats_to_frame(result))
    print('extrema: ' + np.array2string(result['extrema'], precision=1))
    return result


if __name__ == "__main__":
    main()
