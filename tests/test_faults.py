"""Tests for engine/faults.py — linear fault draw."""

from __future__ import annotations

import numpy as np

from evtol_simulator.engine.faults import FaultModel


def test_zero_rate_never_faults():
    model = FaultModel(np.random.default_rng(1))
    assert not any(model.occurred(0.0, 10.0) for _ in range(10_000))


def test_zero_duration_never_faults():
    model = FaultModel(np.random.default_rng(1))
    assert not any(model.occurred(0.5, 0.0) for _ in range(1_000))


def test_product_at_or_above_one_always_faults():
    """Linear model is not clamped: rate × duration ≥ 1 is a certain fault."""
    model = FaultModel(np.random.default_rng(1))
    assert all(model.occurred(0.61, 2.0) for _ in range(1_000))
    assert all(model.occurred(1.0, 1.0) for _ in range(1_000))


def test_frequency_matches_rate_times_duration():
    model = FaultModel(np.random.default_rng(7))
    n = 20_000
    hits = sum(model.occurred(0.25, 0.8) for _ in range(n))  # p = 0.2
    assert abs(hits / n - 0.2) < 0.02


def test_seeded_draws_reproducible():
    a = FaultModel(np.random.default_rng(123))
    b = FaultModel(np.random.default_rng(123))
    seq_a = [a.occurred(0.3, 1.0) for _ in range(200)]
    seq_b = [b.occurred(0.3, 1.0) for _ in range(200)]
    assert seq_a == seq_b


def test_one_draw_per_call_regardless_of_rate():
    """Random stream position does not depend on the rate."""
    a_rng = np.random.default_rng(5)
    b_rng = np.random.default_rng(5)
    FaultModel(a_rng).occurred(0.0, 1.0)
    FaultModel(b_rng).occurred(0.9, 1.0)
    assert a_rng.random() == b_rng.random()
