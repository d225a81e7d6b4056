"""
Distributions subpackage

Exact discrete distributions and the operations built on them:

- distribution class and core algebra (:mod:`.distribution`);
- cumulative tables and histogram data (:mod:`.statistics`);
- repeated draws, rerolls and Markov steps (:mod:`.combinatorics`);
- reductions over distributions of tuples (:mod:`.sequences`);
- sampling protocol and tuple-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .combinatorics import count_multisets
from .distribution import Distribution
from .sampling import Sample, ValueSample
from .sequences import SequenceOps
from .statistics import (
    cumulative_weighted_values,
    hist_data,
    inverse_cumulative_weighted_values,
)
from .strategies import DefaultSamplingStrategy, SamplingStrategy

__all__ = [
    # distribution
    "Distribution",
    # sequence reducer
    "SequenceOps",
    # combinatorics
    "count_multisets",
    # statistics
    "cumulative_weighted_values",
    "inverse_cumulative_weighted_values",
    "hist_data",
    # sampling
    "Sample",
    "ValueSample",
    # strategies
    "SamplingStrategy",
    "DefaultSamplingStrategy",
]
