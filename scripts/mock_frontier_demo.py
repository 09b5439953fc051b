import argparse

import numpy as np

from frontier_explorer.configs import load_costmap_spec, load_explore_config
from frontier_explorer.costmap import Costmap2D
from frontier_explorer.eval import CsvLogger
from frontier_explorer.explore import ExplorationOrchestrator, FrontierSearch
from frontier_explorer.explore.visualize import plot_frontiers

UNKNOWN, FREE, OCCUPIED = -1, 0, 1


def build_mock_costmap(spec):
    # build a simple synthetic map: explored room with an obstacle band
    g = np.full((spec.size_y, spec.size_x), UNKNOWN, dtype=int)
    g[10:50, 10:40] = FREE
    g[25:27, 15:35] = OCCUPIED
    return Costmap2D.from_trinary(g, spec)


def main():
    parser = argparse.ArgumentParser(description="Run frontier search on a synthetic costmap.")
    parser.add_argument("--profile", default="demo", help="profile name in explore.yaml")
    parser.add_argument("--seed", type=int, default=0, help="seed for the hazard noise")
    parser.add_argument("--plot", default=None, help="optional PNG output path")
    parser.add_argument("--csv", default=None, help="optional CSV log path")
    args = parser.parse_args()

    spec = load_costmap_spec(args.profile)
    config = load_explore_config(args.profile)
    costmap = build_mock_costmap(spec)

    search = FrontierSearch.from_config(costmap, config, rng=np.random.default_rng(args.seed))
    orchestrator = ExplorationOrchestrator(search)

    pose = (2.0, 2.0, 0.0)
    goal, cov, ent, frontiers = orchestrator.update(pose)

    print(
        f"frontiers: {len(frontiers)}  goal: {goal}  "
        f"coverage%: {cov:.2f}  entropy: {ent:.2f}"
    )
    for rank, f in enumerate(frontiers):
        print(f"  #{rank} size={f.size} cost={f.cost:.3f} centroid=({f.centroid[0]:.2f}, {f.centroid[1]:.2f})")

    if args.csv:
        with CsvLogger(args.csv) as logger:
            logger.log_query(pose, goal, frontiers, cov, ent)

    if args.plot:
        plot_frontiers(costmap, frontiers, position=pose[:2], hazard=config.hazard.location, output_path=args.plot)


if __name__ == "__main__":
    main()
