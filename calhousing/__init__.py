# calhousing/__init__.py

"""
calhousing: train a California housing price regressor and serve it over HTTP.

The package runs the same way locally and inside the container image.
"""

from . import config, data, models, train
