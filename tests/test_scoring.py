import numpy as np
import pytest

from frontier_explorer.explore import Frontier, FrontierScorer, HazardConfig
from helpers import FixedNoise


def _frontier(size=4, min_distance=2.0, middle=(3.0, 4.0)):
    return Frontier(size=size, min_distance=min_distance, middle=middle)


def _hazard(**kwargs):
    params = dict(
        location=(0.0, 0.0),
        near_threshold=3.0,
        far_threshold=6.0,
        baseline_weight=1.0,
        penalty_weight=3.0,
        noise_std=0.0,
    )
    params.update(kwargs)
    return HazardConfig(**params)


def test_cost_without_hazard_is_potential_minus_gain():
    scorer = FrontierScorer(2.0, 0.5, hazard=HazardConfig(location=None))
    f = _frontier(size=10, min_distance=3.0)

    # 2 * 3 * 0.1 - 0.5 * 10 * 0.1
    assert scorer.score(f, (100.0, 100.0), resolution=0.1) == pytest.approx(0.1)
    assert scorer.update_hysteresis((0.0, 0.0)) == 0.0


def test_cost_with_baseline_hazard_weight():
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard())

    # agent far from hazard keeps the baseline weight
    # 1*2*0.5 - 1*4*0.5 + 1.0*|(3,4)|*0.5 = 1 - 2 + 2.5
    assert scorer.score(_frontier(), (100.0, 0.0), resolution=0.5) == pytest.approx(1.5)
    assert scorer.weight == 1.0
    assert not scorer.latched


def test_noise_only_perturbs_hazard_distance():
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard(), rng=FixedNoise(0.5))

    cost = scorer.score(_frontier(), (100.0, 0.0), resolution=0.5)
    assert cost == pytest.approx(1 - 2 + 1.0 * (5.0 + 0.5) * 0.5)


def test_noise_ignored_when_hazard_disabled():
    rng = FixedNoise(100.0)
    scorer = FrontierScorer(1.0, 1.0, hazard=HazardConfig(location=None), rng=rng)

    assert scorer.score(_frontier(), (0.0, 0.0), resolution=1.0) == pytest.approx(2.0 - 4.0)
    assert rng.calls == 0


def test_hysteresis_latches_penalty_once():
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard())

    assert scorer.update_hysteresis((10.0, 0.0)) == 1.0
    assert not scorer.latched

    # mid zone: latch the penalty
    assert scorer.update_hysteresis((4.0, 0.0)) == 3.0
    assert scorer.latched

    # leaving the mid zone keeps the penalty
    assert scorer.update_hysteresis((10.0, 0.0)) == 3.0

    # near zone switches the penalty off
    assert scorer.update_hysteresis((1.0, 1.0)) == 0.0

    # the latch does not re-arm
    assert scorer.update_hysteresis((4.0, 0.0)) == 0.0
    assert scorer.update_hysteresis((10.0, 0.0)) == 0.0
    assert scorer.latched


def test_near_zone_first_then_mid_zone_latches():
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard())

    assert scorer.update_hysteresis((0.5, 0.0)) == 0.0
    assert not scorer.latched

    assert scorer.update_hysteresis((0.0, 5.0)) == 3.0
    assert scorer.latched


def test_reset_restores_baseline():
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard())
    scorer.update_hysteresis((4.0, 0.0))
    scorer.update_hysteresis((1.0, 0.0))

    scorer.reset()

    assert scorer.weight == 1.0
    assert not scorer.latched
    assert scorer.update_hysteresis((4.0, 0.0)) == 3.0


def test_score_all_shares_weight_and_draws_noise_per_frontier():
    rng = FixedNoise(0.0, 1.0)
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard(), rng=rng)
    a = _frontier()
    b = _frontier()

    scorer.score_all([a, b], (4.0, 0.0), resolution=1.0)

    # both scored with the latched penalty of 3.0
    assert a.cost == pytest.approx(2.0 - 4.0 + 3.0 * 5.0)
    assert b.cost == pytest.approx(2.0 - 4.0 + 3.0 * 6.0)
    assert rng.calls == 2


def test_score_is_pure_given_state_and_zero_noise():
    scorer = FrontierScorer(1.0, 1.0, hazard=_hazard())
    f = _frontier()

    first = scorer.score(f, (4.0, 0.0), resolution=1.0)
    second = scorer.score(f, (4.0, 0.0), resolution=1.0)
    assert first == second


def test_seeded_generators_reproduce_costs():
    hazard = _hazard(noise_std=0.2)
    s1 = FrontierScorer(1.0, 1.0, hazard=hazard, rng=np.random.default_rng(7))
    s2 = FrontierScorer(1.0, 1.0, hazard=hazard, rng=np.random.default_rng(7))

    costs1 = [s1.score(_frontier(), (10.0, 0.0), 1.0) for _ in range(5)]
    costs2 = [s2.score(_frontier(), (10.0, 0.0), 1.0) for _ in range(5)]

    assert costs1 == costs2
    assert len(set(costs1)) > 1
    assert all(np.isfinite(costs1))


def test_instances_do_not_share_hysteresis():
    a = FrontierScorer(1.0, 1.0, hazard=_hazard())
    b = FrontierScorer(1.0, 1.0, hazard=_hazard())

    a.update_hysteresis((4.0, 0.0))

    assert a.latched
    assert not b.latched
    assert b.weight == 1.0


@pytest.mark.parametrize("kwargs", [
    dict(near_threshold=7.0, far_threshold=6.0),
    dict(noise_std=-0.1),
])
def test_invalid_hazard_config(kwargs):
    with pytest.raises(ValueError):
        HazardConfig(**kwargs)
