"""
Tunable constants for layout generation, linking and persistence.

These are module-level defaults. Functions and classes that use them accept
keyword arguments to override each value per call or per instance.
"""

# Default file used by LinkStore when no storage is supplied.
LINK_PATH = "links.txt"

# Lines of this length or shorter are treated as non-data when loading links.
MIN_LINE_LENGTH = 15

# Base radius of a Group without an explicit settings radius.
BASE_DYNAMIC_RADIUS = 10

# Extra distance added to the minimum in Group.new_node_min_auto.
MIN_AUTO_PADDING = 5

# Percent chance that a node receives an extra link in the second pass.
LINK_PROBABILITY = 30

# Fallback size for nodes drawn without their own radius.
DEFAULT_NODE_SIZE = 4

# Default RGBA color for new nodes (opaque black).
DEFAULT_COLOR = (0, 0, 0, 255)

# Fully transparent background of a fresh surface.
TRANSPARENT = (0, 0, 0, 0)

INT16_MIN = -32768
INT16_MAX = 32767
