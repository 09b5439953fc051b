import csv
import time
from pathlib import Path


class CsvLogger:
    """One CSV row per frontier query."""

    FIELDNAMES = [
        "t",
        "pose_x",
        "pose_y",
        "pose_theta",
        "goal_x",
        "goal_y",
        "num_frontiers",
        "best_cost",
        "coverage_pct",
        "entropy_proxy",
    ]

    def __init__(self, path: str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self.f = self.path.open("w", newline="")

        self.w = csv.DictWriter(self.f, fieldnames=self.FIELDNAMES)
        self.w.writeheader()

    def log(self, **kwargs):
        row = {"t": time.time(), **kwargs}
        self.w.writerow(row)

    def log_query(self, pose_xytheta, goal_xy, frontiers, coverage_pct, entropy):
        x, y, theta = pose_xytheta
        self.log(
            pose_x=x,
            pose_y=y,
            pose_theta=theta,
            goal_x=goal_xy[0] if goal_xy else None,
            goal_y=goal_xy[1] if goal_xy else None,
            num_frontiers=len(frontiers),
            best_cost=frontiers[0].cost if frontiers else None,
            coverage_pct=coverage_pct,
            entropy_proxy=entropy,
        )

    def close(self):
        self.f.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
