import os
import json
import logging
from typing import Optional

logger = logging.getLogger(__name__)

IDENTITY_KEY = "instructor_email"


class IdentityStore:
    """
    Client-local key/value file holding the instructor email.

    The value never expires; it is removed only by `clear()`.
    """

    def __init__(self, state_dir: Optional[str] = None, filename: str = "state.json"):
        self.state_dir = state_dir or os.getenv(
            "CASE_BOARD_STATE_DIR", os.path.join(os.getcwd(), ".case_board")
        )
        self.path = os.path.join(self.state_dir, filename)

    def get(self) -> Optional[str]:
        value = self._read().get(IDENTITY_KEY)
        if isinstance(value, str) and value:
            return value
        return None

    def set(self, email: str) -> None:
        data = self._read()
        data[IDENTITY_KEY] = email
        self._write(data)
        logger.info("Stored identity %s", email)

    def clear(self) -> None:
        data = self._read()
        if data.pop(IDENTITY_KEY, None) is not None:
            self._write(data)
            logger.info("Cleared stored identity")

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        os.makedirs(self.state_dir, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
