"""AR Product Preview.

Backend service and client core for browsing a 3D product catalog,
keeping favorites, and placing products in augmented reality.
"""

__version__ = "1.0.0"
