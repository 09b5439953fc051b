from .config_loader import ExploreConfig, load_costmap_spec, load_explore_config

__all__ = ["ExploreConfig", "load_costmap_spec", "load_explore_config"]
