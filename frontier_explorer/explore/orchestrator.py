# explore/orchestrator.py

from frontier_explorer.eval.metrics import coverage_percent, entropy_proxy
from .frontiers import FrontierSearch


class ExplorationOrchestrator:
    """
    Glue between:
      - costmap + pose
      - frontier search / scoring
      - evaluation metrics

    Input: pose_xytheta = (x, y, theta) in world coordinates
    Output:
      - current_goal_xy: (x, y) centroid of the cheapest frontier, or None
      - coverage_pct: float
      - entropy: float
      - frontiers: list of Frontier, cheapest first
    """

    def __init__(self, search: FrontierSearch, navigable_area_m2: float = 0.0):
        self.search = search
        self.navigable_area_m2 = navigable_area_m2
        self.current_goal_xy = None
        self.current_frontier = None

    def update(self, pose_xytheta):
        """
        pose_xytheta: (x, y, theta) in world coordinates (meters, radians)
        """
        x, y, _theta = pose_xytheta

        # --- Frontier search + goal selection ---
        frontiers = self.search.search_from((x, y))

        if frontiers:
            self.current_frontier = frontiers[0]
            self.current_goal_xy = self.current_frontier.centroid
        else:
            self.current_frontier = None
            self.current_goal_xy = None

        # --- Evaluation metrics ---
        costmap = self.search.costmap
        cov = coverage_percent(costmap, self.navigable_area_m2)
        ent = entropy_proxy(costmap)

        return self.current_goal_xy, cov, ent, frontiers
