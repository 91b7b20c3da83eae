# planar/geometry/constants.py
"""Constants for geometric calculations."""

# Tolerance separating touching from crossing and disjoint configurations
EPSILON = 1e-8
