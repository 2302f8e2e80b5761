"""
chainstats - Numeric building blocks for MCMC convergence diagnostics

Public API:
    Moment Estimators:
        mean - Arithmetic mean of a sequence of draws
        sample_variance - Sample variance with Bessel's correction

    Chain Sets:
        flatten - Concatenate all chains into one array
        split_chains - Split each chain into two halves (split-R-hat / ESS input)
        history_to_chains - Convert a sampler history array into a chain set
        split_history - JAX array form of split_chains for rectangular histories

    Input:
        read_csv - Simplified delimited-text reader (one chain per column)
        load_chains - read_csv driven by a reader configuration dict
        clean_config - Fill reader configuration defaults
        validate_config - Check a reader configuration

    Diagnostics:
        diagnose_chain_set - Report issues, warnings and info for a chain set
        print_diagnostics - Log the output of diagnose_chain_set

    Errors:
        ChainStatsError - Base class (a ValueError)
        EmptyInputError, EmptyChainSetError, NoDrawsError

Example:
    from chainstats import read_csv, split_chains, mean, sample_variance

    chains = read_csv('output.csv', skip_rows=1)
    halves = split_chains(chains)
    chain_means = [mean(h) for h in halves]
    chain_vars = [sample_variance(h) for h in halves]
"""
# CRITICAL: Import jax_config FIRST to set environment variables before JAX loads
from . import jax_config  # noqa: F401

from .errors import (
    ChainStatsError,
    EmptyInputError,
    EmptyChainSetError,
    NoDrawsError,
)
from .stats import mean, sample_variance
from .chains import flatten, split_chains, history_to_chains, split_history
from .config import clean_config, validate_config
from .csv_io import read_csv, load_chains
from .error_handling import diagnose_chain_set, print_diagnostics

__all__ = [
    # Moment estimators
    'mean',
    'sample_variance',
    # Chain sets
    'flatten',
    'split_chains',
    'history_to_chains',
    'split_history',
    # Input
    'read_csv',
    'load_chains',
    'clean_config',
    'validate_config',
    # Diagnostics
    'diagnose_chain_set',
    'print_diagnostics',
    # Errors
    'ChainStatsError',
    'EmptyInputError',
    'EmptyChainSetError',
    'NoDrawsError',
]
