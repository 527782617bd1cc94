# Constants.py
# Description: Widget ids, CSS classes and key names shared by the deck viewer
#
#######################################################################################################################
#
# Widget ids
SLIDESHOW_CONTAINER_ID = "slideshow-container"
PREV_BUTTON_ID = "prev-btn"
NEXT_BUTTON_ID = "next-btn"
PROGRESS_DOTS_ID = "progress-dots"
SLIDE_COUNTER_ID = "slide-counter"
NAV_BAR_ID = "nav-bar"

# CSS classes
SLIDE_CLASS = "slide"
PROGRESS_DOT_CLASS = "progress-dot"
ACTIVE_CLASS = "-active"
FULLSCREEN_CLASS = "-fullscreen"

# Location fragment
SLIDE_FRAGMENT_PREFIX = "#slide-"

# Key names as reported by Textual
NEXT_KEYS = ("right", "down", "space", "pagedown")
PREV_KEYS = ("left", "up", "pageup")
FIRST_KEY = "home"
LAST_KEY = "end"
FULLSCREEN_KEYS = ("f", "F")
EXIT_FULLSCREEN_KEY = "escape"

# Timing (seconds)
DEFAULT_SETTLE_DELAY = 0.5
DEFAULT_ACTIVATION_DELAY = 0.1

# Gestures
DEFAULT_SWIPE_MIN_DISTANCE = 50
DEFAULT_DRAG_MIN_DISTANCE = 6

#
# End of Constants.py
#######################################################################################################################
