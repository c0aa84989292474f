"""Nutrislice menu provider.

Fetches one meal slot of one day from the dining hall's Nutrislice weeks API
and reduces the payload to raw item records:

    { "name", "description", "nutrition": { "calories", "g_protein", "g_carbs", "g_fat" } }

Any transport or payload problem is logged and yields an empty list, which
the planner treats the same as "nothing served".
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import httpx

from diningplan.domain.MealSlot import MealSlot
from diningplan.utilities import config

logger = logging.getLogger(__name__)

NUTRITION_FIELDS = ("calories", "g_protein", "g_carbs", "g_fat")


class MenuPayloadError(ValueError):
    """Raised when a Nutrislice response does not have the expected shape."""


def parse_menu_payload(data: Any, day: date) -> List[Dict[str, Any]]:
    """Extract raw items for ``day`` from a Nutrislice weeks response.

    A missing day or menu yields []. Malformed menu items raise MenuPayloadError.
    """
    if not isinstance(data, dict) or not isinstance(data.get('days'), list):
        return []
    day_str = day.isoformat()
    matching_day = next((d for d in data['days'] if isinstance(d, dict) and d.get('date') == day_str), None)
    if not matching_day or not isinstance(matching_day.get('menu_items'), list):
        return []

    raw_items = []
    for menu_item in matching_day['menu_items']:
        if not isinstance(menu_item, dict):
            continue
        # food is null on section headers; anything else must be an object
        food = menu_item.get('food') or {}
        if not isinstance(food, dict):
            raise MenuPayloadError(f"unexpected food entry: {food!r}")
        nutrition = food.get('rounded_nutrition_info') or {}
        if not isinstance(nutrition, dict):
            raise MenuPayloadError(f"unexpected nutrition info for {food.get('name')!r}: {nutrition!r}")
        raw_items.append({
            'name': food.get('name'),
            'description': food.get('description') or "",
            'nutrition': {k: nutrition.get(k) for k in NUTRITION_FIELDS},
        })
    return raw_items


class NutrisliceMenuProvider:
    """Menu provider backed by the Nutrislice HTTP API.

    Example:
        >>> with NutrisliceMenuProvider() as provider:
        ...     raw = provider.fetch_items(date.today(), MealSlot.LUNCH)
    """

    def __init__(self, base_url: str = config.MENU_API_BASE_URL,
                 client: Optional[httpx.Client] = None,
                 timeout: float = config.MENU_API_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

    def __enter__(self) -> "NutrisliceMenuProvider":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def build_url(self, day: date, slot: MealSlot) -> str:
        return f"{self.base_url}/{slot.value}/{day.year}/{day.month}/{day.day}/"

    def fetch_items(self, day: date, slot: MealSlot) -> List[Dict[str, Any]]:
        url = self.build_url(day, slot)
        headers = {"User-Agent": config.MENU_API_USER_AGENT, "Accept": "application/json"}
        try:
            response = self._client.get(url, headers=headers)
            response.raise_for_status()
            data = response.json()
            items = parse_menu_payload(data, day)
        except httpx.HTTPError as e:
            logger.warning("Menu fetch failed for %s %s: %s", slot, day.isoformat(), e)
            return []
        except ValueError as e:
            # JSONDecodeError and MenuPayloadError
            logger.warning("Menu response for %s %s could not be parsed: %s", slot, day.isoformat(), e)
            return []

        logger.debug("Fetched %d raw %s items for %s", len(items), slot, day.isoformat())
        return items


__all__ = ['MenuPayloadError', 'NutrisliceMenuProvider', 'parse_menu_payload']
