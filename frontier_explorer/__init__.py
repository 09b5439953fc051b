"""Frontier detection and scoring for autonomous exploration on 2D costmaps."""

__version__ = "0.1.0"
