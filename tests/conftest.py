"""
Pytest configuration and shared fixtures for chainstats tests.
"""

import pytest
import numpy as np

import chainstats  # noqa: F401  (sets JAX environment before jax is imported)


@pytest.fixture
def reference_draws():
    """Ten draws with mean and variance computed with numpy."""
    return [
        2.13829088,
        -1.06214379,
        -0.79265699,
        -0.21300888,
        -1.07155142,
        -0.50425317,
        0.95708854,
        -1.23854172,
        1.37124938,
        1.17658286,
    ]


@pytest.fixture
def even_chains():
    """Two chains of four draws."""
    return [[1.0, 2.0, 3.0, 4.0], [5.0, 6.0, 7.0, 8.0]]


@pytest.fixture
def odd_chains():
    """Two chains of five draws; middle draws are 3.0 and 7.0."""
    return [[1.0, 2.0, 3.0, 4.0, 4.5], [5.0, 6.0, 7.0, 8.0, 8.5]]


@pytest.fixture
def random_history():
    """Sample history (n_samples, n_chains, n_params) with a fixed seed."""
    rng = np.random.default_rng(42)
    return rng.normal(0, 1, (101, 4, 3))


def write_chain_file(path, rows, header=None, trailer=None, delimiter=','):
    """Write rows of numbers to a delimited file, with optional header/trailer lines."""
    lines = []
    if header is not None:
        lines.append(header)
    lines.extend(delimiter.join(repr(float(v)) for v in row) for row in rows)
    if trailer is not None:
        lines.extend(trailer)
    path.write_text("\n".join(lines) + "\n")
    return path
