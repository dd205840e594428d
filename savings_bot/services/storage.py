"""JSON-file store for the calculator inputs the page restores on reload."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from savings_bot.core.contributors import normalize_names
from savings_bot.schemas.state import SavedState

logger = logging.getLogger(__name__)


class JsonStateStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[SavedState]:
        """
        Read the saved record, or None when there is none (or it is unreadable).
        Legacy first names are rewritten to their slot codes and saved back.
        """
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            state = SavedState.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("ignoring unreadable state file %s: %s", self.path, exc)
            return None

        if state.investor_names.strip():
            normalized = normalize_names(state.investor_names)
            if normalized != state.investor_names:
                state = state.model_copy(update={"investor_names": normalized})
                self.save(state)
                logger.info("normalized saved investor names")
        return state

    def save(self, state: SavedState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(state.model_dump(), indent=2), encoding="utf-8")
