"""
Cinema Tickets - ticket purchase validation and orchestration.
"""

__version__ = "1.0.0"
