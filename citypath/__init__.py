"""Top-level package for the city path finder.

Cities are points on a flat map joined by roads; the length of a road is
the straight-line distance between its two cities. The package loads
such a map, finds the shortest route between two cities with Dijkstra's
algorithm, and can draw the result.
"""
