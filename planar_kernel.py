# planar_kernel.py
"""
Planar geometry kernel - Main package module
"""
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Import main components to expose them at package level
from planar.geometry.constants import EPSILON
from planar.geometry.errors import DegenerateInputError
from planar.geometry.vector import Vector2
from planar.geometry.line import Line, distance
from planar.geometry.circle import Circle
from planar.geometry.intersection import (
    intersect_lines, intersect_circles, intersect_circle_line,
    intersect_line_circle, intersection
)
from planar.geometry.constructions import equidistant_line, equiangle_circle

# Make them available when someone does 'import planar_kernel'
__all__ = [
    'EPSILON',
    'DegenerateInputError',
    'Vector2',
    'Line',
    'Circle',
    'distance',
    'intersect_lines',
    'intersect_circles',
    'intersect_circle_line',
    'intersect_line_circle',
    'intersection',
    'equidistant_line',
    'equiangle_circle',
]
