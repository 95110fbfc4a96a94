#!/usr/bin/env python3
"""
Live Color Hunt

Runs the game on a webcam feed. The center of the image is sampled every frame;
hold an object of the requested color in the square long enough and the
confidence bar fills up.

Controls:
- Q: Quit
- N: Skip the current color
- SPACE: Pause/unpause
"""
import argparse
import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from color_hunt.config import DEFAULT_SETTINGS_PATH, GameConfig
from color_hunt.game import FrameOutput, GameEngine, GameSession
from color_hunt.speech import Pyttsx3Speaker, Speaker
from color_hunt.storage import PlayerStore
from color_hunt.text.feedback import ascii_fold, praise_text, prompt_text
from color_hunt.utils.clock import FrameClock

logger = logging.getLogger(__name__)

WINDOW_NAME = "Color Hunt"

def hex_to_bgr(swatch: str):
    swatch = swatch.lstrip('#')
    r, g, b = (int(swatch[i:i + 2], 16) for i in (0, 2, 4))
    return (b, g, r)

def open_camera(config: GameConfig) -> cv2.VideoCapture:
    """Open the configured camera, raising RuntimeError when it is unavailable."""
    cap = cv2.VideoCapture(config.camera_index)
    if not cap.isOpened():
        raise RuntimeError(f"Could not open camera device {config.camera_index}")

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, config.capture_width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, config.capture_height)
    return cap

class LiveColorHunt:
    """Camera loop, overlay drawing and spoken feedback around a GameEngine."""

    def __init__(self, engine: GameEngine, speaker: Optional[Speaker] = None):
        self.engine = engine
        self.speaker = speaker or Speaker()
        self.clock = FrameClock()
        self.paused = False
        self.message = ""

        self.BAR_COLOR = (0, 200, 255)
        self.TEXT_COLOR = (255, 255, 255)

    def announce_target(self, session: GameSession) -> None:
        label = self.engine.target_label(session)
        self.message = prompt_text(label)
        self.speaker.speak(self.message)

    def handle_output(self, session: GameSession, output: FrameOutput) -> None:
        if output.new_target:
            self.announce_target(session)
        if output.success_fired:
            self.message = praise_text(session.player_name, session.gender,
                                       self.engine.target_label(session))
            self.speaker.speak(self.message)

    def handle_keypress(self, key: int, session: GameSession) -> GameSession:
        if key == ord('n'):
            session = self.engine.skip(session)
            self.announce_target(session)
        elif key == ord(' '):
            self.paused = not self.paused
            logger.info("⏸️ Paused" if self.paused else "▶️ Resumed")
        return session

    def draw_ui(self, frame: np.ndarray, session: GameSession, output: FrameOutput) -> np.ndarray:
        """Draw the sampling square, target swatch, prompt, confidence bar and stats."""
        h, w = frame.shape[:2]
        classifier = self.engine.classifier

        # Sampling window, mapped from the downscaled frame back to full size
        scale = w / min(w, classifier.downscale_width)
        small_w, small_h = round(w / scale), round(h / scale)
        x, y, rw, rh = classifier.roi_bounds(small_w, small_h)
        top_left = (int(x * scale), int(y * scale))
        bottom_right = (int((x + rw) * scale), int((y + rh) * scale))
        box_color = (0, 255, 0) if output.is_detecting else self.TEXT_COLOR
        cv2.rectangle(frame, top_left, bottom_right, box_color, 2)

        definition = self.engine.catalog.get(session.target_id)
        if definition is not None:
            cv2.rectangle(frame, (10, 10), (60, 60), hex_to_bgr(definition.swatch), -1)
            cv2.rectangle(frame, (10, 10), (60, 60), self.TEXT_COLOR, 1)

        cv2.putText(frame, ascii_fold(self.message), (75, 45),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.9, self.TEXT_COLOR, 2)

        bar_w = int((w - 20) * output.confidence)
        cv2.rectangle(frame, (10, h - 40), (w - 10, h - 20), self.TEXT_COLOR, 1)
        if bar_w > 0:
            cv2.rectangle(frame, (10, h - 40), (10 + bar_w, h - 20), self.BAR_COLOR, -1)

        stats = f"Score: {session.score}  FPS: {self.clock.fps:.1f}"
        if self.paused:
            stats += "  [PAUSED]"
        cv2.putText(frame, stats, (10, h - 50), cv2.FONT_HERSHEY_SIMPLEX, 0.6, self.TEXT_COLOR, 1)
        return frame

    def run(self, cap: cv2.VideoCapture, session: GameSession) -> GameSession:
        """Main loop. Returns the final session when the player quits."""
        self.announce_target(session)
        output = FrameOutput(0.0, False, False, session.target_id)
        last_frame = None

        try:
            while cap.isOpened():
                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    logger.info("👋 Exiting...")
                    break
                session = self.handle_keypress(key, session)

                if not self.paused:
                    ret, frame = cap.read()
                    if not ret:
                        logger.error("Failed to grab frame")
                        break
                    now_ms = self.clock.tick()
                    session, output = self.engine.step(frame, session, now_ms)
                    self.handle_output(session, output)
                    last_frame = frame

                if last_frame is not None:
                    cv2.imshow(WINDOW_NAME, self.draw_ui(last_frame.copy(), session, output))
        finally:
            cap.release()
            cv2.destroyAllWindows()
            self.speaker.close()

        return self.engine.stop(session)

def ask_player_name(store: PlayerStore, name: Optional[str] = None) -> str:
    """Use the given name, or ask for one offering the remembered name as default."""
    if name is None:
        remembered = store.load_name()
        hint = f" [{remembered}]" if remembered else ""
        name = input(f"Jak masz na imię?{hint} ").strip() or (remembered or "")
    if name:
        store.save_name(name)
    return name

def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        charge_rate=args.charge_rate,
        decay_rate=args.decay_rate,
        cooldown_ms=args.cooldown_ms,
        match_fraction=args.match_fraction,
        roi_size=args.roi_size,
        downscale_width=args.downscale_width,
        celebration_ms=args.celebration_ms,
        camera_index=args.camera,
        capture_width=args.capture_width,
        capture_height=args.capture_height,
        settings_path=Path(args.settings),
    ).validate()

def parse_args(argv=None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Color Hunt - find the color with your camera")
    parser.add_argument("--camera", type=int, default=defaults.camera_index,
                        help="Camera device ID (default: 0)")
    parser.add_argument("--name", help="Player name (skips the prompt)")
    parser.add_argument("--charge-rate", type=float, default=defaults.charge_rate,
                        help="Confidence gained per matching frame")
    parser.add_argument("--decay-rate", type=float, default=defaults.decay_rate,
                        help="Confidence lost per non-matching frame")
    parser.add_argument("--cooldown-ms", type=float, default=defaults.cooldown_ms,
                        help="Minimum time between two successes")
    parser.add_argument("--match-fraction", type=float, default=defaults.match_fraction,
                        help="Fraction of sampled pixels that must match")
    parser.add_argument("--roi-size", type=int, default=defaults.roi_size,
                        help="Edge length of the sampling square")
    parser.add_argument("--downscale-width", type=int, default=defaults.downscale_width,
                        help="Width frames are shrunk to before sampling")
    parser.add_argument("--celebration-ms", type=float, default=defaults.celebration_ms,
                        help="How long praise stays up before the next color")
    parser.add_argument("--capture-width", type=int, default=defaults.capture_width,
                        help="Requested camera frame width")
    parser.add_argument("--capture-height", type=int, default=defaults.capture_height,
                        help="Requested camera frame height")
    parser.add_argument("--settings", default=str(DEFAULT_SETTINGS_PATH),
                        help="Where the player name is remembered")
    parser.add_argument("--no-speech", action="store_true",
                        help="Log prompts instead of speaking them")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)

def make_speaker(enabled: bool) -> Speaker:
    if not enabled:
        return Speaker()
    try:
        return Pyttsx3Speaker()
    except RuntimeError as e:
        logger.warning(f"Speech unavailable, falling back to log output: {e}")
        return Speaker()

def main(argv=None) -> None:
    """Entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    config = build_config(args)
    engine = GameEngine(config)
    name = ask_player_name(PlayerStore(config.settings_path), args.name)

    cap = open_camera(config)
    width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
    height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
    logger.info(f"📹 Camera: {width}x{height}")

    game = LiveColorHunt(engine, make_speaker(not args.no_speech))
    session = game.run(cap, engine.start(name))
    logger.info(f"🏁 Final score: {session.score}")

if __name__ == "__main__":
    main()
