import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from frontier_explorer.costmap import CostmapSpec
from frontier_explorer.explore.scoring import HazardConfig

CONFIG_PATH = Path(__file__).parent / "explore.yaml"
PROFILE_ENV_VAR = "EXPLORE_PROFILE"


@dataclass
class ExploreConfig:
    potential_scale: float = 1e-3
    gain_scale: float = 1.0
    min_frontier_size: float = 0.5
    nearest_free_limit: Optional[int] = None
    hazard: HazardConfig = field(default_factory=HazardConfig)


def _load_profile(profile=None, config_path: Optional[Path] = None) -> dict:
    """
    Loads one profile from explore.yaml.
    If profile is provided, tries to load that specific config.
    Otherwise, checks the EXPLORE_PROFILE env var, or falls back to 'default'.
    """
    config_path = Path(config_path) if config_path else CONFIG_PATH

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    # 1. Try argument
    target_config = profile

    # 2. Try env var
    if not target_config:
        target_config = os.environ.get(PROFILE_ENV_VAR)

    # 3. Fallback to default
    if not target_config or target_config not in config:
        target_config = "default"

    return config.get(target_config, {})


def load_costmap_spec(profile=None, config_path: Optional[Path] = None) -> CostmapSpec:
    c = _load_profile(profile, config_path)

    return CostmapSpec(
        resolution=c.get("resolution", 0.05),
        size_x=c.get("size_x", 200),
        size_y=c.get("size_y", 200),
        origin_x=c.get("origin_x", -5.0),
        origin_y=c.get("origin_y", -5.0),
    )


def load_explore_config(profile=None, config_path: Optional[Path] = None) -> ExploreConfig:
    c = _load_profile(profile, config_path)
    h = c.get("hazard") or {}

    defaults = HazardConfig()
    location = h.get("location", defaults.location)

    hazard = HazardConfig(
        location=tuple(location) if location is not None else None,
        near_threshold=h.get("near_threshold", defaults.near_threshold),
        far_threshold=h.get("far_threshold", defaults.far_threshold),
        baseline_weight=h.get("baseline_weight", defaults.baseline_weight),
        penalty_weight=h.get("penalty_weight", defaults.penalty_weight),
        noise_mean=h.get("noise_mean", defaults.noise_mean),
        noise_std=h.get("noise_std", defaults.noise_std),
    )

    return ExploreConfig(
        potential_scale=c.get("potential_scale", 1e-3),
        gain_scale=c.get("gain_scale", 1.0),
        min_frontier_size=c.get("min_frontier_size", 0.5),
        nearest_free_limit=c.get("nearest_free_limit"),
        hazard=hazard,
    )
