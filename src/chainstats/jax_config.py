"""
JAX Configuration - MUST be imported before any JAX imports.

This module sets environment variables read when JAX loads:
- XLA C++ log level

Double precision is switched on with jax.config at call time (see
chains.split_history), since environment variables are ignored once jax
has already been imported.
"""
import os

# Suppress CUDA/XLA C++ warnings (GPU interconnect, NUMA, cuDNN factories)
os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "2")
