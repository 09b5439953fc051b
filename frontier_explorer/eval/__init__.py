from .logger import CsvLogger
from .metrics import coverage_percent, entropy_proxy, explored_area_m2

__all__ = ["CsvLogger", "coverage_percent", "entropy_proxy", "explored_area_m2"]
