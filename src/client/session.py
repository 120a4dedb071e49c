"""Client-side session storage

Keeps the session token and user profile in a JSON file between CLI runs.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ClientSession:
    """
    Token and user profile of the logged-in user

    Nothing is read from disk until init() is called.
    """

    def __init__(self, path: str):
        self.path = path
        self.token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None

    def init(self) -> "ClientSession":
        """
        Restore a saved session

        A session is only restored when both the token and the user are
        present; a corrupt file is discarded.
        """
        self.token = None
        self.user = None
        if not os.path.exists(self.path):
            return self

        try:
            with open(self.path, "r") as r_file:
                data = json.load(r_file)
        except (OSError, ValueError) as e:
            logger.warning(f"Discarding unreadable session file {self.path}: {e}")
            self.clear()
            return self

        if isinstance(data, dict) and data.get("token") and data.get("user"):
            self.token = data["token"]
            self.user = data["user"]
        return self

    def save(self, token: str, user: Dict[str, Any]) -> None:
        self.token = token
        self.user = user
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as w_file:
            json.dump({"token": token, "user": user}, w_file)
        os.chmod(self.path, 0o600)

    def clear(self) -> None:
        self.token = None
        self.user = None
        if os.path.exists(self.path):
            os.remove(self.path)

    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)
