"""
Form State Store - keeps in-progress estimator state between visits.

One JSON file per client id under the session data folder. Values are stored
as-is under fixed keys; there is no schema versioning, so a client whose saved
values no longer parse simply starts over.
"""

import os
import re
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from app.utils.helpers import load_json_file, save_json_file
from services.themes import THEME_STORAGE_KEY, DEFAULT_THEME_ID, is_known_theme

logger = logging.getLogger(__name__)

FORM_STORAGE_KEY = 'estimaitor_form_data'
ESTIMATE_STORAGE_KEY = 'estimaitor_estimate_data'
SIMPLE_STORAGE_KEY = 'estimaitor_simple_form_data'
WIZARD_STORAGE_KEY = 'estimaitor_wizard_state'

STORAGE_KEYS = (
    FORM_STORAGE_KEY,
    ESTIMATE_STORAGE_KEY,
    SIMPLE_STORAGE_KEY,
    WIZARD_STORAGE_KEY,
    THEME_STORAGE_KEY,
)

CLIENT_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{1,64}$')


class FormStateStore:
    """Per-client key/value store backed by JSON files."""

    def __init__(self, folder: str):
        self.folder = folder

    def _path(self, client_id: str) -> str:
        if not isinstance(client_id, str) or not CLIENT_ID_PATTERN.match(client_id):
            raise ValueError(f"Invalid client id: {client_id!r}")
        return os.path.join(self.folder, f"{client_id}.json")

    def load_all(self, client_id: str) -> Dict[str, Any]:
        path = self._path(client_id)
        try:
            state = load_json_file(path, default={})
        except ValueError as e:
            # Corrupt file: treat as empty rather than failing the page
            logger.warning(f"Discarding unreadable form state for {client_id}: {e}")
            return {}
        if not isinstance(state, dict):
            logger.warning(f"Discarding non-object form state for {client_id}")
            return {}
        return state

    def get(self, client_id: str, key: str, default: Any = None) -> Any:
        return self.load_all(client_id).get(key, default)

    def save(self, client_id: str, key: str, value: Any) -> Dict[str, Any]:
        """
        Store one value for a client

        Args:
            client_id: Browser-generated client identifier
            key: One of STORAGE_KEYS
            value: JSON-serialisable value

        Returns:
            The client's full stored state
        """
        if key not in STORAGE_KEYS:
            raise ValueError(f"Unknown storage key: {key}")
        if key == THEME_STORAGE_KEY and not is_known_theme(value):
            raise ValueError(f"Unknown theme: {value}")

        state = self.load_all(client_id)
        state[key] = value
        state['updatedAt'] = datetime.utcnow().isoformat()
        save_json_file(self._path(client_id), state)
        logger.debug(f"Saved {key} for client {client_id}")
        return state

    def remove(self, client_id: str, key: str) -> bool:
        state = self.load_all(client_id)
        if key not in state:
            return False
        del state[key]
        save_json_file(self._path(client_id), state)
        return True

    def clear(self, client_id: str) -> bool:
        path = self._path(client_id)
        if not os.path.exists(path):
            return False
        os.remove(path)
        logger.info(f"Cleared form state for client {client_id}")
        return True

    def save_estimate(self, client_id: str, form_data: Dict[str, Any], estimate_data: Dict[str, Any]):
        """Store the submitted form together with the estimate it produced"""
        self.save(client_id, FORM_STORAGE_KEY, form_data)
        return self.save(client_id, ESTIMATE_STORAGE_KEY, estimate_data)

    def clear_estimate(self, client_id: str):
        self.remove(client_id, FORM_STORAGE_KEY)
        self.remove(client_id, ESTIMATE_STORAGE_KEY)

    def get_theme(self, client_id: Optional[str]) -> str:
        """Saved theme id, or the default when none (or an unknown one) is saved"""
        if not client_id:
            return DEFAULT_THEME_ID
        theme_id = self.get(client_id, THEME_STORAGE_KEY)
        return theme_id if is_known_theme(theme_id) else DEFAULT_THEME_ID

    def save_theme(self, client_id: str, theme_id: str):
        if not is_known_theme(theme_id):
            raise ValueError(f"Unknown theme: {theme_id}")
        self.save(client_id, THEME_STORAGE_KEY, theme_id)
