"""
Benchmark script comparing the naive and fast nearest-neighbour algorithms.

The fast algorithm caches partial pair distances (O(n^2) memory); the naive
one recomputes them. Both give identical results.
"""

import sys
import os
# Add parent directory to path for development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
import time
import numpy as np

from tsneighbors import NormMode, min_distances_fast, min_distances_naive

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def benchmark(n: int, d: int, mode: NormMode) -> None:
    X = np.random.randn(n, d)
    # Compile outside the timed region
    min_distances_naive(X[:3], mode)
    min_distances_fast(X[:3], mode)

    start = time.time()
    naive = min_distances_naive(X, mode)
    t_naive = time.time() - start

    start = time.time()
    fast = min_distances_fast(X, mode)
    t_fast = time.time() - start

    logger.info("n=%d d=%d %s naive=%.4fs fast=%.4fs equal=%s",
                n, d, mode, t_naive, t_fast, np.allclose(naive, fast))


def main():
    np.random.seed(0)
    for mode in NormMode:
        logger.info("%s:", mode)
        for n, d in [(500, 2), (1000, 5), (2000, 10)]:
            benchmark(n, d, mode)


if __name__ == "__main__":
    main()
