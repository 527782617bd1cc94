"""
State containers for the deck viewer.
"""

from .navigation_state import NavigationState

__all__ = [
    'NavigationState',
]
