#!/usr/bin/env python3
"""
Offline Color Catalog Evaluation

Checks the color catalog against a folder of labeled photos, laid out as
DATA_DIR/<color_id>/*.jpg. The center window of every photo is scored against
all catalog colors; the prediction is the color with the highest match ratio,
or "none" when no color clears the match fraction.
"""
import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import cv2
from sklearn.metrics import accuracy_score, classification_report
from tqdm import tqdm

from color_hunt.config import GameConfig
from color_hunt.vision.classifier import FrameClassifier
from color_hunt.vision.colors import ColorCatalog, default_catalog

logger = logging.getLogger(__name__)

NO_COLOR = "none"
IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".bmp"}

def predict_color(classifier: FrameClassifier, frame) -> str:
    """Best matching catalog color for the center of a BGR image."""
    rgb = classifier.extract_roi(frame)[..., ::-1]
    best_id, best_ratio = NO_COLOR, classifier.match_fraction
    for definition in classifier.catalog:
        ratio = classifier.match_ratio(rgb, definition.color_id)
        if ratio > best_ratio:
            best_id, best_ratio = definition.color_id, ratio
    return best_id

def collect_images(data_dir: Path, catalog: ColorCatalog) -> List[Tuple[Path, str]]:
    """List (image path, label) pairs, skipping folders that are not catalog colors."""
    samples = []
    for label_dir in sorted(p for p in data_dir.iterdir() if p.is_dir()):
        if label_dir.name not in catalog and label_dir.name != NO_COLOR:
            logger.warning(f"Skipping '{label_dir.name}': not a catalog color")
            continue
        for image_path in sorted(label_dir.iterdir()):
            if image_path.suffix.lower() in IMAGE_SUFFIXES:
                samples.append((image_path, label_dir.name))
    return samples

def evaluate(data_dir: Path, classifier: Optional[FrameClassifier] = None) -> dict:
    """
    Run the catalog over a labeled image folder.

    Returns:
        Dict with accuracy, the sklearn report dict and the raw label lists
    """
    classifier = classifier or FrameClassifier()
    samples = collect_images(Path(data_dir), classifier.catalog)
    if not samples:
        raise ValueError(f"No labeled images found in {data_dir}")
    logger.info(f"📊 Evaluating {len(samples)} images from {data_dir}")

    y_true, y_pred = [], []
    for image_path, label in tqdm(samples, desc="Evaluating"):
        frame = cv2.imread(str(image_path))
        if frame is None:
            logger.warning(f"Could not read {image_path}")
            continue
        y_true.append(label)
        y_pred.append(predict_color(classifier, frame))

    labels = sorted(set(y_true) | set(y_pred))
    return {
        'accuracy': accuracy_score(y_true, y_pred),
        'report': classification_report(y_true, y_pred, labels=labels,
                                        output_dict=True, zero_division=0),
        'y_true': y_true,
        'y_pred': y_pred,
    }

def parse_args(argv=None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Evaluate the color catalog on labeled photos")
    parser.add_argument("--data-dir", required=True, help="Folder with one subfolder per color id")
    parser.add_argument("--match-fraction", type=float, default=defaults.match_fraction,
                        help="Fraction of sampled pixels that must match")
    parser.add_argument("--roi-size", type=int, default=defaults.roi_size,
                        help="Edge length of the sampling square")
    parser.add_argument("--downscale-width", type=int, default=defaults.downscale_width,
                        help="Width images are shrunk to before sampling")
    return parser.parse_args(argv)

def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    classifier = FrameClassifier(default_catalog(), match_fraction=args.match_fraction,
                                 roi_size=args.roi_size, downscale_width=args.downscale_width)
    results = evaluate(Path(args.data_dir), classifier)

    print(classification_report(results['y_true'], results['y_pred'], zero_division=0))
    logger.info(f"✅ Accuracy: {results['accuracy']:.3f}")

if __name__ == "__main__":
    main()
