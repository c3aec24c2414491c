"""Shortest-path planning over implicit graphs with Dijkstra's algorithm."""

__version__ = "0.1.0"
__all__ = ["dijkstra"]