"""
Navigation state for a single deck.
"""

from dataclasses import dataclass


@dataclass
class NavigationState:
    """Active slide and transition lock."""
    
    # Current navigation
    active_index: int = 0
    
    # Transition lock
    transitioning: bool = False
    
    def acquire_lock(self) -> bool:
        """Take the transition lock. Returns False if it is already held."""
        if self.transitioning:
            return False
        self.transitioning = True
        return True
    
    def release_lock(self) -> None:
        """Release the transition lock."""
        self.transitioning = False
    
    def to_dict(self) -> dict:
        """Convert state to dictionary for diagnostics."""
        return {
            "active_index": self.active_index,
            "transitioning": self.transitioning,
        }
