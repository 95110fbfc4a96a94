"""
Unit tests for per-frame color classification.
"""
import logging

import numpy as np
import pytest

from color_hunt.vision.classifier import FrameClassifier

RED_RGB = (255, 0, 0)
GRAY_RGB = (128, 128, 128)
RED_BGR = (0, 0, 255)
GRAY_BGR = (128, 128, 128)

def make_block(match_count: int, size: int = 50) -> np.ndarray:
    """An RGB block of size x size samples, the first match_count of them red."""
    flat = np.full((size * size, 3), GRAY_RGB, dtype=np.uint8)
    flat[:match_count] = RED_RGB
    return flat.reshape(size, size, 3)

class TestClassifySamples:
    """Test cases for the pixel-fraction threshold."""

    @pytest.fixture
    def classifier(self):
        return FrameClassifier()

    def test_forty_percent_red_matches(self, classifier):
        """40% red on a gray background clears the 30% threshold."""
        assert classifier.classify_samples(make_block(1000), "red")

    def test_threshold_is_strict(self, classifier):
        """Exactly 30% is not enough; one more pixel is."""
        assert not classifier.classify_samples(make_block(750), "red")
        assert classifier.classify_samples(make_block(751), "red")

    def test_gray_does_not_match(self, classifier):
        assert not classifier.classify_samples(make_block(0), "red")

    def test_other_target(self, classifier):
        """Red samples do not satisfy a blue target."""
        assert not classifier.classify_samples(make_block(2500), "blue")

    def test_match_ratio(self, classifier):
        assert classifier.match_ratio(make_block(1000), "red") == pytest.approx(0.4)

    def test_empty_samples(self, classifier):
        """No samples never matches."""
        empty = np.zeros((0, 3), dtype=np.uint8)
        assert not classifier.classify_samples(empty, "red")
        assert classifier.match_ratio(empty, "red") == 0.0

    def test_unknown_target_fails_closed(self, classifier, caplog):
        """An unknown target never matches and is logged."""
        with caplog.at_level(logging.WARNING):
            assert not classifier.classify_samples(make_block(2500), "turquoise")
        assert "turquoise" in caplog.text

    def test_custom_fraction(self):
        classifier = FrameClassifier(match_fraction=0.5)
        assert not classifier.classify_samples(make_block(1000), "red")

    @pytest.mark.parametrize("kwargs", [
        {"match_fraction": 1.0},
        {"match_fraction": -0.1},
        {"roi_size": 0},
        {"downscale_width": 0},
    ])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ValueError):
            FrameClassifier(**kwargs)

class TestRegionOfInterest:
    """Test cases for downscaling and the centered window."""

    @pytest.fixture
    def classifier(self):
        return FrameClassifier(roi_size=50, downscale_width=300)

    def test_downscale_keeps_aspect_ratio(self, classifier):
        frame = np.zeros((480, 640, 3), dtype=np.uint8)
        assert classifier.downscale(frame).shape == (225, 300, 3)

    def test_small_frames_are_not_upscaled(self, classifier):
        frame = np.zeros((120, 160, 3), dtype=np.uint8)
        assert classifier.downscale(frame) is frame

    def test_roi_bounds_centered(self, classifier):
        assert classifier.roi_bounds(300, 225) == (125, 87, 50, 50)

    def test_roi_clipped_to_tiny_frame(self, classifier):
        """A frame smaller than the window is sampled whole."""
        frame = np.zeros((20, 30, 3), dtype=np.uint8)
        assert classifier.extract_roi(frame).shape == (20, 30, 3)

    def test_extract_roi_shape(self, classifier):
        frame = np.zeros((720, 1280, 3), dtype=np.uint8)
        assert classifier.extract_roi(frame).shape == (50, 50, 3)

class TestClassifyFrame:
    """Test cases for whole BGR camera frames."""

    @pytest.fixture
    def classifier(self):
        return FrameClassifier()

    def test_red_object_in_center(self, classifier):
        """A red patch covering the center of a gray frame matches red."""
        frame = np.full((480, 640, 3), GRAY_BGR, dtype=np.uint8)
        frame[140:340, 220:420] = RED_BGR
        assert classifier.classify_frame(frame, "red")
        assert not classifier.classify_frame(frame, "green")

    def test_red_object_off_center(self, classifier):
        """Color outside the sampling window is ignored."""
        frame = np.full((480, 640, 3), GRAY_BGR, dtype=np.uint8)
        frame[:100, :100] = RED_BGR
        assert not classifier.classify_frame(frame, "red")

    def test_bgr_order_respected(self, classifier):
        """A blue BGR frame is blue, not red."""
        frame = np.full((240, 320, 3), (255, 0, 0), dtype=np.uint8)
        assert classifier.classify_frame(frame, "blue")
        assert not classifier.classify_frame(frame, "red")
