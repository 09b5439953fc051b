from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from .types import Frontier

logger = logging.getLogger(__name__)


@dataclass
class HazardConfig:
    """
    Zone the explorer should steer frontiers away from.

    Attributes:
        location: world (x, y) of the hazard, or None to disable the hazard term
        near_threshold: agent closer than this (meters) switches the penalty off
        far_threshold: agent closer than this latches the penalty weight once
        baseline_weight: hysteresis weight before any threshold is crossed
        penalty_weight: weight applied once the latch trips
        noise_mean: mean of the Gaussian noise added to the hazard distance
        noise_std: standard deviation of that noise (0 disables it)
    """

    location: Optional[Tuple[float, float]] = (-2.91756, -5.26284)
    near_threshold: float = 3.0
    far_threshold: float = 6.0
    baseline_weight: float = 1.0
    penalty_weight: float = 3.0
    noise_mean: float = 0.0
    noise_std: float = 0.2

    def __post_init__(self) -> None:
        if self.near_threshold > self.far_threshold:
            raise ValueError("near_threshold must not exceed far_threshold.")
        if self.noise_std < 0:
            raise ValueError("noise_std must be non-negative.")
        if self.location is not None:
            self.location = (float(self.location[0]), float(self.location[1]))


class FrontierScorer:
    """
    Assigns exploration cost to frontiers.

    cost = potential_scale * min_distance * resolution
           - gain_scale * size * resolution
           + weight * (|hazard - middle| + noise) * resolution

    Lower cost is preferred. The hazard weight carries hysteresis across
    calls: it drops to zero while the agent is inside the near zone and is
    latched to the penalty weight the first time the agent enters the far
    zone. The latch is only cleared by reset().
    """

    def __init__(
        self,
        potential_scale: float,
        gain_scale: float,
        hazard: Optional[HazardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.potential_scale = potential_scale
        self.gain_scale = gain_scale
        self.hazard = hazard or HazardConfig()
        self.rng = rng or np.random.default_rng()

        self._lock = threading.Lock()
        self.weight = self.hazard.baseline_weight
        self.latched = False

    def reset(self) -> None:
        with self._lock:
            self.weight = self.hazard.baseline_weight
            self.latched = False

    def update_hysteresis(self, position: Tuple[float, float]) -> float:
        """
        Updates the hazard weight from the agent's live position and returns it.
        """
        if self.hazard.location is None:
            return 0.0

        hx, hy = self.hazard.location
        agent_hazard = float(np.hypot(hx - position[0], hy - position[1]))

        if agent_hazard < self.hazard.near_threshold:
            logger.info("Agent within %.2f of hazard at (%.2f, %.2f)", agent_hazard, position[0], position[1])
            self.weight = 0.0
        elif agent_hazard < self.hazard.far_threshold and not self.latched:
            self.weight = self.hazard.penalty_weight
            self.latched = True
            logger.debug("Hazard penalty latched at weight %.2f", self.weight)

        return self.weight

    def _cost(self, frontier: Frontier, weight: float, resolution: float) -> float:
        cost = (
            self.potential_scale * frontier.min_distance * resolution
            - self.gain_scale * frontier.size * resolution
        )
        if self.hazard.location is None:
            return cost

        hx, hy = self.hazard.location
        mx, my = frontier.middle
        frontier_hazard = float(np.hypot(hx - mx, hy - my))

        # Noise perturbs only the hazard distance
        noise = float(self.rng.normal(self.hazard.noise_mean, self.hazard.noise_std))
        frontier_hazard += noise

        return cost + weight * frontier_hazard * resolution

    def score(self, frontier: Frontier, position: Tuple[float, float], resolution: float) -> float:
        with self._lock:
            weight = self.update_hysteresis(position)
            return self._cost(frontier, weight, resolution)

    def score_all(
        self,
        frontiers: Iterable[Frontier],
        position: Tuple[float, float],
        resolution: float,
    ) -> None:
        # One hysteresis update per query; every frontier sees the same weight
        with self._lock:
            weight = self.update_hysteresis(position)
            for frontier in frontiers:
                frontier.cost = self._cost(frontier, weight, resolution)
