from __future__ import annotations
import json
import os
from typing import Dict


class SettingsFile:
    """Read-only JSON settings file (flat keys, see ``SettingsConfig``)."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Dict:
        if not self.path or not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"Settings file {self.path} must contain a JSON object.")
        return payload
