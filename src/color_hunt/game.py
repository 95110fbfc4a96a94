"""
Game engine: session state, target selection and the per-frame step.

The engine holds only configuration and collaborators. All game state lives in
an immutable GameSession which every operation takes and returns, so the frame
loop, the UI and the tests drive the same pure functions.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

from color_hunt.config import GameConfig
from color_hunt.text.gender import Gender, predict_gender
from color_hunt.vision.classifier import FrameClassifier
from color_hunt.vision.colors import ColorCatalog, default_catalog
from color_hunt.vision.confidence import ConfidenceAccumulator, ConfidenceState

logger = logging.getLogger(__name__)

class TargetSelector:
    """Uniform random choice of the next target color."""

    def __init__(self, color_ids: Sequence[str], rng: Optional[random.Random] = None):
        if not color_ids:
            raise ValueError("TargetSelector needs at least one color id")
        self.color_ids = tuple(color_ids)
        self.rng = rng or random.Random()

    def pick_next(self, exclude: Optional[str] = None) -> str:
        """Pick a color id, avoiding `exclude` whenever another id exists."""
        candidates = [c for c in self.color_ids if c != exclude] or list(self.color_ids)
        return self.rng.choice(candidates)

@dataclass(frozen=True)
class GameSession:
    target_id: Optional[str] = None
    player_name: str = ""
    gender: Gender = Gender.MALE
    last_success_ms: Optional[float] = None
    is_playing: bool = False
    score: int = 0
    confidence: ConfidenceState = field(default_factory=ConfidenceState)
    # Set while the success feedback is on screen
    celebrate_until_ms: Optional[float] = None

    @property
    def is_celebrating(self) -> bool:
        return self.celebrate_until_ms is not None

class FrameOutput(NamedTuple):
    """What the presentation layer gets back for every processed frame."""
    confidence: float
    is_detecting: bool
    success_fired: bool
    target_id: Optional[str]
    new_target: bool = False

class GameEngine:
    """
    Drives a GameSession from camera frames.

    Args:
        config: Tuning and camera settings
        catalog: Colors to play with (default catalog if omitted)
        rng: Random source for target selection
    """

    def __init__(self, config: Optional[GameConfig] = None, catalog: Optional[ColorCatalog] = None,
                 rng: Optional[random.Random] = None):
        self.config = (config or GameConfig()).validate()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.classifier = FrameClassifier(
            self.catalog,
            match_fraction=self.config.match_fraction,
            roi_size=self.config.roi_size,
            downscale_width=self.config.downscale_width,
        )
        self.accumulator = ConfidenceAccumulator(
            charge_rate=self.config.charge_rate,
            decay_rate=self.config.decay_rate,
            cooldown_ms=self.config.cooldown_ms,
        )
        self.selector = TargetSelector(self.catalog.ids, rng)

    def start(self, player_name: str = "", target_id: Optional[str] = None) -> GameSession:
        """
        Begin a new session.

        Args:
            player_name: Name used in praise; its gender picks the verb form
            target_id: First target, random if omitted. Must be in the catalog.
        """
        if target_id is None:
            target_id = self.selector.pick_next()
        else:
            self.catalog.require(target_id)

        name = (player_name or "").strip()
        gender = predict_gender(name)
        logger.info(f"Session started for '{name}' ({gender.value}), first target: {target_id}")
        return GameSession(target_id=target_id, player_name=name, gender=gender, is_playing=True)

    def stop(self, session: GameSession) -> GameSession:
        logger.info(f"Session ended with score {session.score}")
        return replace(session, is_playing=False, confidence=self.accumulator.reset(),
                       celebrate_until_ms=None)

    def skip(self, session: GameSession) -> GameSession:
        """Drop the current target without scoring and pick a different one."""
        target_id = self.selector.pick_next(exclude=session.target_id)
        logger.info(f"Skipped '{session.target_id}', new target: {target_id}")
        return replace(session, target_id=target_id, confidence=self.accumulator.reset(),
                       celebrate_until_ms=None)

    def target_label(self, session: GameSession) -> str:
        definition = self.catalog.get(session.target_id)
        return definition.label if definition else ""

    def step(self, frame: np.ndarray, session: GameSession, now_ms: float) -> Tuple[GameSession, FrameOutput]:
        """
        Process one camera frame.

        Args:
            frame: BGR frame
            session: Current session
            now_ms: Monotonic time in milliseconds

        Returns:
            (new session, FrameOutput)
        """
        if not session.is_playing:
            return session, FrameOutput(0.0, False, False, session.target_id)

        new_target = False
        if session.is_celebrating:
            if now_ms < session.celebrate_until_ms:
                return session, FrameOutput(0.0, False, False, session.target_id)
            target_id = self.selector.pick_next(exclude=session.target_id)
            logger.info(f"Next target: {target_id}")
            session = replace(session, target_id=target_id, celebrate_until_ms=None,
                              confidence=self.accumulator.reset())
            new_target = True

        is_match = self.classifier.classify_frame(frame, session.target_id)
        update = self.accumulator.update(session.confidence, is_match, now_ms, session.last_success_ms)
        logger.debug(f"Target '{session.target_id}': {self.accumulator.phase(update, is_match).value} "
                     f"({update.state.value:.2f})")
        session = replace(session, confidence=update.state)

        if update.success_fired:
            session = replace(
                session,
                score=session.score + 1,
                last_success_ms=now_ms,
                celebrate_until_ms=now_ms + self.config.celebration_ms,
            )
            logger.info(f"🎉 Found '{session.target_id}' (score: {session.score})")

        output = FrameOutput(
            confidence=update.state.value,
            is_detecting=update.is_detecting,
            success_fired=update.success_fired,
            target_id=session.target_id,
            new_target=new_target,
        )
        return session, output
