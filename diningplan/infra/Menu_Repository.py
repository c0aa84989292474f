"""Offline menu provider reading raw items from a JSON file.

File layout:
    { "2025-07-08": { "breakfast": [ {raw item}, ... ], "lunch": [...], "dinner": [...] } }
"""
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Union

from diningplan.domain.MealSlot import MealSlot

logger = logging.getLogger(__name__)


class JsonMenuProvider:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Menu file not found: {self.path}. Returning empty menu.")
            return {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in menu file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def fetch_items(self, day: date, slot: MealSlot) -> List[Dict[str, Any]]:
        day_menu = self._load().get(day.isoformat()) or {}
        if not isinstance(day_menu, dict):
            return []
        items = day_menu.get(slot.value) or []
        return items if isinstance(items, list) else []


__all__ = ['JsonMenuProvider']
