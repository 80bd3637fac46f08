"""
geobounds - bounding boxes and Morton codes for radius queries.
"""

__version__ = "0.1.0"
