"""
renewdesk: customer and service contract tracking.
"""

__version__ = "1.0.0"
