"""
Chain-set transformations for split-chain diagnostics.

- flatten: Concatenate every chain into one sequence of draws
- split_chains: Split each chain into two halves (Stan split-chain convention)
- history_to_chains: Turn a sampler history array into a chain set
- split_history: Array form of split_chains for rectangular histories (JAX)
"""

from typing import List, Optional, Sequence, Union

import jax
import jax.numpy as jnp
import numpy as np

from .errors import EmptyChainSetError, NoDrawsError

import logging
logger = logging.getLogger('chainstats')

Chain = Union[Sequence[float], np.ndarray]


def flatten(chains: Sequence[Chain]) -> np.ndarray:
    """
    Copy a chain set into one long 1D array.

    Draws are ordered by chain, then by position within the chain. An empty
    chain set (or a set of empty chains) gives an empty array.
    """
    parts = [np.asarray(chain, dtype=np.float64).ravel() for chain in chains]
    if not parts:
        return np.empty(0, dtype=np.float64)
    # concatenate always allocates, so the result never aliases the input
    return np.concatenate(parts)


def split_chains(chains: Sequence[Chain]) -> List[np.ndarray]:
    """
    Split each chain into two chains.

    The split point comes from the shortest chain. When that length N is odd
    the middle draw (index (N-1)/2) is dropped from both halves, following the
    Stan reference manual section on effective sample size.

    Chains longer than the shortest one are not trimmed: their second half
    runs to the end of the chain, so unequal input gives unequal halves.

    Args:
        chains: Non-empty sequence of non-empty chains

    Returns:
        List of 2 * len(chains) arrays ordered
        [first(0), second(0), first(1), second(1), ...]

    Raises:
        EmptyChainSetError: If chains is empty
        NoDrawsError: If the shortest chain has no draws
    """
    if len(chains) == 0:
        raise EmptyChainSetError("Can't split empty array of chains")

    lengths = [len(chain) for chain in chains]
    num_draws = min(lengths)
    if num_draws < 1:
        raise NoDrawsError("No samples to split")

    if max(lengths) != num_draws:
        logger.warning(
            f"Splitting chains of unequal length ({num_draws} to {max(lengths)} draws); "
            f"split point taken from the shortest chain"
        )

    if num_draws % 2 == 0:
        half, offset = num_draws // 2, 0
    else:
        half, offset = (num_draws - 1) // 2, 1

    split_draws = []
    for chain in chains:
        arr = np.asarray(chain, dtype=np.float64)
        split_draws.append(arr[:half].copy())
        split_draws.append(arr[half + offset:].copy())
    return split_draws


def history_to_chains(history: np.ndarray, param_index: Optional[int] = None) -> List[np.ndarray]:
    """
    Convert a sampler history array into a chain set.

    Args:
        history: Sample history array (n_samples, n_chains) or
                 (n_samples, n_chains, n_params)
        param_index: Parameter column to extract; required for 3D histories

    Returns:
        List of n_chains float64 arrays, each of length n_samples
    """
    history = np.asarray(history, dtype=np.float64)

    if history.ndim == 3:
        if param_index is None:
            raise ValueError("param_index is required for a (n_samples, n_chains, n_params) history")
        history = history[:, :, param_index]
    elif history.ndim != 2:
        raise ValueError(f"history must be 2D or 3D, got shape {history.shape}")

    return [history[:, c].copy() for c in range(history.shape[1])]


@jax.jit
def _split_history_kernel(history: jnp.ndarray) -> jnp.ndarray:
    n_samples, n_chains = history.shape
    half = n_samples // 2
    offset = n_samples % 2

    first = history[:half]                  # (half, n_chains)
    second = history[half + offset:]        # (half, n_chains)

    # (half, n_chains, 2) -> (half, 2*n_chains) interleaves first/second per chain
    stacked = jnp.stack([first, second], axis=2)
    return stacked.reshape(half, 2 * n_chains)


def split_history(history) -> jnp.ndarray:
    """
    Split every chain of a rectangular history into halves.

    Equivalent to split_chains on history_to_chains(history), but stays in
    array form: column k of the result is element k of the split chain set.

    Args:
        history: Sample history array (n_samples, n_chains)

    Returns:
        Array (half, 2 * n_chains) of split chains

    Raises:
        EmptyChainSetError: If there are no chains
        NoDrawsError: If there are no samples
    """
    # Draws are double precision; JAX defaults to float32 otherwise
    jax.config.update("jax_enable_x64", True)
    history = jnp.asarray(np.asarray(history, dtype=np.float64))
    if history.ndim != 2:
        raise ValueError(f"history must be (n_samples, n_chains), got shape {history.shape}")

    n_samples, n_chains = history.shape
    if n_chains == 0:
        raise EmptyChainSetError("Can't split empty array of chains")
    if n_samples < 1:
        raise NoDrawsError("No samples to split")

    return _split_history_kernel(history)
