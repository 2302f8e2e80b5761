"""
Chain-set diagnostics.

Inspects a chain set for conditions that make the split-chain statistics
fail or behave asymmetrically, and reports them through the logger.
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np

import logging
logger = logging.getLogger('chainstats')


def diagnose_chain_set(chains: Sequence, diagnostics: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Analyzes a chain set to identify common input problems.

    Args:
        chains: Sequence of chains (sequences or 1D arrays of draws)
        diagnostics: Existing diagnostics dict to extend

    Returns:
        diagnostics: Dictionary with issues, warnings, and info, plus the
        chain-set shape (n_chains, min_draws, max_draws) and split_half, the
        length split_chains gives each first half (None if it would raise)
    """
    diagnostics = (diagnostics or {}) | {
        'issues': [],
        'warnings': [],
        'info': [],
        'n_chains': len(chains),
        'min_draws': 0,
        'max_draws': 0,
        'split_half': None,
    }

    if len(chains) == 0:
        diagnostics['issues'].append("Chain set is empty - nothing to split")
        return diagnostics

    lengths = np.array([len(chain) for chain in chains])
    min_len = int(lengths.min())
    max_len = int(lengths.max())
    diagnostics['min_draws'] = min_len
    diagnostics['max_draws'] = max_len
    if min_len > 0:
        diagnostics['split_half'] = min_len // 2

    n_empty = int(np.sum(lengths == 0))
    if n_empty > 0:
        diagnostics['issues'].append(f"{n_empty} chain(s) have no draws")

    n_nonfinite = sum(
        1 for chain in chains
        if len(chain) > 0 and not np.all(np.isfinite(np.asarray(chain, dtype=np.float64)))
    )
    if n_nonfinite > 0:
        diagnostics['issues'].append(
            f"{n_nonfinite} chain(s) contain NaN or Inf draws"
        )

    if min_len != max_len:
        diagnostics['warnings'].append(
            f"Chains have unequal lengths ({min_len} to {max_len} draws); "
            f"second halves of longer chains will not be trimmed"
        )

    if min_len > 0 and min_len % 2 == 1:
        diagnostics['info'].append(
            f"Odd draw count ({min_len}) - middle draw is dropped when splitting"
        )

    diagnostics['info'].append(f"Total draws: {int(lengths.sum())}")

    return diagnostics


def print_diagnostics(diagnostics: Dict[str, Any]) -> None:
    """
    Log the output of diagnose_chain_set.

    A header line summarizes the chain set and what split_chains will make of
    it; issues, warnings and info follow at error, warning and info level.
    """
    n_chains = diagnostics['n_chains']
    min_draws, max_draws = diagnostics['min_draws'], diagnostics['max_draws']
    draws = f"{min_draws}" if min_draws == max_draws else f"{min_draws}-{max_draws}"
    logger.info(f"--- Chain Set ({n_chains} chains, {draws} draws) ---")

    half = diagnostics['split_half']
    if half is None:
        logger.error("  Split: not possible")
    else:
        logger.info(f"  Split: {2 * n_chains} half-chains, first halves of {half} draws")

    for issue in diagnostics['issues']:
        logger.error(f"  [ERROR] {issue}")
    for warning in diagnostics['warnings']:
        logger.warning(f"  [WARN] {warning}")
    for info in diagnostics['info']:
        logger.info(f"  {info}")

    if not diagnostics['issues'] and not diagnostics['warnings']:
        logger.info("  [OK] Ready for split-chain diagnostics")
