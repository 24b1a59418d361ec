from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# Fixed playback tuning; not exposed on the command line.
# The tolerance is compared against raw degree distances (see DESIGN.md).
SIMPLIFY_EPSILON = 5e-5
ANIMATION_INTERVAL = 0.075  # seconds
FIT_PADDING: Tuple[int, int] = (50, 50)  # pixels

# Measurements above this many meters are shown in kilometers
KILOMETRE_THRESHOLD = 10000.0


@dataclass
class VisualizerConfig:
    """Configuration for the path-visualizer CLI."""

    output: Optional[str] = None
    log_level: str = "WARNING"
    no_open: bool = False
    no_animate: bool = False
    metrics: bool = False
    measure: List[Tuple[float, float]] = field(default_factory=list)
