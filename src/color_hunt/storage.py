"""Remembers the last entered player name between sessions."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

class PlayerStore:
    """A single JSON settings document holding the player name."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_name(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings from {self.path}: {e}")
            return None

        name = data.get('player_name') if isinstance(data, dict) else None
        return name if isinstance(name, str) and name.strip() else None

    def save_name(self, name: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({'player_name': name}, f, ensure_ascii=False, indent=2)
        logger.debug(f"Player name saved to {self.path}")
