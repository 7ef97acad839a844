"""
symbols/config.py
Configuration constants for the random symbols renderer
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# =============================================================================
# Picture
# =============================================================================

PICTURE_WIDTH = 900
PICTURE_HEIGHT = 600

# Largest width/height a shape may get; also the margin kept around anchors
MAX_EDGE = 50

# =============================================================================
# Caption
# =============================================================================

CAPTION = "Unknown Miró or Random Symbols?"
CAPTION_FONT_SIZE = 16
CAPTION_OFFSET = 30  # caption centre, pixels above the bottom edge
CAPTION_RGB: Tuple[int, int, int] = (127, 0, 127)

# =============================================================================
# Palette
# =============================================================================

# Permutations of 4 values 3 at a time, with a few manual tweaks.
# Consumed as one flat cyclic stream, so colors may straddle triplets.
COLOR_TRIPLETS: Tuple[int, ...] = (
     64, 128, 192, 255, 192,  64,  64, 128, 255,  64, 192, 128, 255, 128,  64,
    192,  64, 128,  64, 255, 128, 128,  64, 192,  64, 255, 192, 255,  64, 192,
    128,  64, 255, 128, 192,  64, 128, 192, 255, 169, 196, 181, 192,  64, 255,
    192, 128,  64, 255,  64, 128, 192, 128, 255, 214, 198, 222, 255, 128, 192,
    255, 192, 128,
)

CHANNEL_MAX = 255.0

# =============================================================================
# Sampling ranges
# =============================================================================

LINE_WIDTH_RANGE = (2, 5)
SHAPE_EDGE_MIN = 5
ELLIPSE_ANGLE_RANGE = (0, 45)  # degrees
CIRCLE_ALPHA_RANGE = (1, 9)    # tenths

# =============================================================================
# Seeds
# =============================================================================

DEFAULT_SEED = 1
CLOCK_SEED_MODULUS = 1_000_000_000 - 1

# =============================================================================
# Run settings
# =============================================================================

@dataclass(frozen=True)
class RenderConfig:
    """Resolved settings for one render run."""
    output_path: str = "random.png"
    num_objects: int = 30
    reseed: bool = False
    font_path: Optional[str] = None


DEFAULT_CONFIG = RenderConfig()
