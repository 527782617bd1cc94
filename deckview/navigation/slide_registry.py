"""
Registry of the slides in a deck.
"""

from typing import Optional, Sequence, Tuple

from loguru import logger

from .ports import SlideHandle


class SlideRegistry:
    """Fixed, ordered collection of slide handles plus the active index."""
    
    def __init__(self, slides: Sequence[SlideHandle] = ()):
        self._slides: Tuple[SlideHandle, ...] = tuple(slides)
        self._active_index: Optional[int] = None
        logger.debug(f"Registered {len(self._slides)} slides")
    
    @property
    def total(self) -> int:
        """Number of slides in the deck."""
        return len(self._slides)
    
    @property
    def is_empty(self) -> bool:
        return not self._slides
    
    @property
    def last_index(self) -> int:
        """Index of the final slide, -1 for an empty deck."""
        return len(self._slides) - 1
    
    def is_valid_index(self, index: int) -> bool:
        """Check if an index addresses a slide."""
        return 0 <= index < len(self._slides)
    
    def activate(self, index: int) -> SlideHandle:
        """
        Make one slide the only active slide.
        
        Args:
            index: Slide to activate, must be valid
            
        Returns:
            The newly active slide handle
        """
        if not self.is_valid_index(index):
            raise IndexError(f"Slide index {index} out of range for {len(self._slides)} slides")
        
        if self._active_index is None:
            # Nothing marked by us yet; clear whatever state the document started with
            for position, other in enumerate(self._slides):
                if position != index:
                    other.set_active(False)
        elif self._active_index != index:
            self._slides[self._active_index].set_active(False)

        slide = self._slides[index]
        slide.set_active(True)
        self._active_index = index
        return slide
