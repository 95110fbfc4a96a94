"""
Per-frame color classification.

The classifier samples a fixed square window at the center of a downscaled
frame and reports whether enough of its pixels belong to the target color.
"""
import logging
from typing import Optional

import cv2
import numpy as np

from color_hunt.vision.colors import ColorCatalog, default_catalog, match_mask
from color_hunt.vision.hsl import rgb_array_to_hsl

logger = logging.getLogger(__name__)

class FrameClassifier:
    """Turns a frame (or a block of RGB samples) into a match / no-match signal."""

    def __init__(self, catalog: Optional[ColorCatalog] = None, match_fraction: float = 0.30,
                 roi_size: int = 50, downscale_width: int = 300):
        """
        Args:
            catalog: Colors that can be targeted
            match_fraction: Fraction of sampled pixels that must match
            roi_size: Edge length of the centered sampling window
            downscale_width: Width the frame is shrunk to before sampling
        """
        if not 0.0 <= match_fraction < 1.0:
            raise ValueError(f"match_fraction must be in [0, 1), got {match_fraction}")
        if roi_size <= 0 or downscale_width <= 0:
            raise ValueError("roi_size and downscale_width must be positive")

        self.catalog = catalog if catalog is not None else default_catalog()
        self.match_fraction = match_fraction
        self.roi_size = roi_size
        self.downscale_width = downscale_width

    def downscale(self, frame: np.ndarray) -> np.ndarray:
        """Shrink a frame to downscale_width, keeping its aspect ratio."""
        h, w = frame.shape[:2]
        if w <= self.downscale_width:
            return frame
        new_h = max(1, round(h * self.downscale_width / w))
        return cv2.resize(frame, (self.downscale_width, new_h), interpolation=cv2.INTER_AREA)

    def roi_bounds(self, width: int, height: int):
        """Return (x, y, w, h) of the centered sampling window for a frame size."""
        size_x = min(self.roi_size, width)
        size_y = min(self.roi_size, height)
        x = width // 2 - size_x // 2
        y = height // 2 - size_y // 2
        return (x, y, size_x, size_y)

    def extract_roi(self, frame: np.ndarray) -> np.ndarray:
        """
        Cut the centered sampling window out of a downscaled frame.

        Args:
            frame: BGR frame of any size

        Returns:
            BGR block of at most roi_size x roi_size pixels
        """
        small = self.downscale(frame)
        x, y, w, h = self.roi_bounds(small.shape[1], small.shape[0])
        return small[y:y + h, x:x + w]

    def count_matches(self, samples: np.ndarray, target_id: str):
        """
        Count RGB samples that belong to the target color.

        Args:
            samples: uint8 array of shape (..., 3) in RGB order
            target_id: Catalog identifier of the target color

        Returns:
            (matching, total) sample counts
        """
        hsl = rgb_array_to_hsl(samples)
        definition = self.catalog.get(target_id)
        if definition is None:
            logger.warning(f"Unknown target color '{target_id}', treating as no match")
            return 0, len(hsl)
        return int(match_mask(hsl, definition).sum()), len(hsl)

    def match_ratio(self, samples: np.ndarray, target_id: str) -> float:
        """Fraction of samples matching the target (0.0 for an empty block)."""
        matching, total = self.count_matches(samples, target_id)
        return matching / total if total else 0.0

    def classify_samples(self, samples: np.ndarray, target_id: str) -> bool:
        """True when more than match_fraction of the samples match the target."""
        matching, total = self.count_matches(samples, target_id)
        return total > 0 and matching > self.match_fraction * total

    def classify_frame(self, frame: np.ndarray, target_id: str) -> bool:
        """Classify the centered window of a BGR camera frame."""
        roi = self.extract_roi(frame)
        is_match = self.classify_samples(roi[..., ::-1], target_id)
        logger.debug(f"Frame classified against '{target_id}': {is_match}")
        return is_match
