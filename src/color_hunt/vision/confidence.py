"""
Confidence accumulation with charge/decay hysteresis.

A single scalar in [0, 1] charges while frames match and decays while they do
not. Decay is faster than charge, so flicker drains progress instead of
building it, while a single bad frame only costs a little. Reaching 1.0 fires
a success edge, rate limited by a cooldown.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

# Absorbs float drift from repeated charge/decay steps
_EPSILON = 1e-9

class Phase(Enum):
    IDLE = "idle"
    CHARGING = "charging"
    DECAYING = "decaying"
    TRIGGERED = "triggered"

@dataclass(frozen=True)
class ConfidenceState:
    """
    Accumulator state for one session.

    held is set while confidence sits at 1.0 because the success edge was
    suppressed by the cooldown.
    """
    value: float = 0.0
    held: bool = False

class ConfidenceUpdate(NamedTuple):
    state: ConfidenceState
    is_detecting: bool
    success_fired: bool

class ConfidenceAccumulator:
    """
    Bounded integrator driven by per-frame match signals.

    The accumulator only holds configuration; the state is passed in and a new
    state is returned, so one accumulator can serve any number of sessions.
    """

    def __init__(self, charge_rate: float = 0.04, decay_rate: float = 0.08, cooldown_ms: float = 4000):
        if not 0 < charge_rate < decay_rate <= 1:
            raise ValueError(
                f"Rates must satisfy 0 < charge_rate < decay_rate <= 1 "
                f"(got charge={charge_rate}, decay={decay_rate})"
            )
        if cooldown_ms < 0:
            raise ValueError(f"cooldown_ms must be >= 0, got {cooldown_ms}")
        self.charge_rate = charge_rate
        self.decay_rate = decay_rate
        self.cooldown_ms = cooldown_ms

    def reset(self) -> ConfidenceState:
        return ConfidenceState()

    def cooldown_elapsed(self, now_ms: float, last_success_ms: Optional[float]) -> bool:
        return last_success_ms is None or now_ms - last_success_ms >= self.cooldown_ms

    def update(self, state: ConfidenceState, is_match: bool, now_ms: float,
               last_success_ms: Optional[float] = None) -> ConfidenceUpdate:
        """
        Advance the accumulator by one frame.

        Args:
            state: Current accumulator state
            is_match: Whether this frame matched the target
            now_ms: Current time in milliseconds
            last_success_ms: Time of the previous success, None if there was none

        Returns:
            ConfidenceUpdate with the new state, the detecting flag and whether
            the success edge fired on this frame
        """
        if not is_match:
            value = state.value - self.decay_rate
            value = 0.0 if value < _EPSILON else value
            return ConfidenceUpdate(ConfidenceState(value), value > 0, False)

        value = state.value + self.charge_rate
        value = 1.0 if value > 1.0 - _EPSILON else value
        reached = value >= 1.0 and (state.value < 1.0 or state.held)
        if not reached:
            return ConfidenceUpdate(ConfidenceState(value), value > 0, False)

        if self.cooldown_elapsed(now_ms, last_success_ms):
            logger.debug(f"Confidence reached 1.0 at {now_ms:.0f} ms, success")
            return ConfidenceUpdate(ConfidenceState(), False, True)

        logger.debug(f"Success suppressed by cooldown at {now_ms:.0f} ms")
        return ConfidenceUpdate(ConfidenceState(1.0, held=True), True, False)

    @staticmethod
    def phase(update: ConfidenceUpdate, is_match: bool) -> Phase:
        """Name the derived state after an update, for overlays and logs."""
        if update.success_fired:
            return Phase.TRIGGERED
        if update.state.value <= 0:
            return Phase.IDLE
        return Phase.CHARGING if is_match else Phase.DECAYING
