from datetime import date as _date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from diningplan.api.dependencies import get_menu_provider
from diningplan.domain.Category import CHECKLIST_CATEGORIES
from diningplan.domain.MealSlot import MealSlot
from diningplan.logic.menu.normalizer import normalize

router = APIRouter(prefix="/api")


@router.get("/menu/{slot}")
def menu_for_slot(slot: str, date: Optional[_date] = Query(default=None), provider=Depends(get_menu_provider)):
    """Normalized, categorized items served at one meal slot."""
    meal_slot = MealSlot.parse(slot)
    if meal_slot is None:
        raise HTTPException(status_code=404, detail=f"Unknown meal slot: {slot}")
    day = date or _date.today()
    items = normalize(provider.fetch_items(day, meal_slot))
    return {
        "date": day.isoformat(),
        "slot": meal_slot.value,
        "count": len(items),
        "items": [item.to_dict() for item in items],
    }


@router.get("/categories")
def categories():
    return {"categories": [c.value for c in CHECKLIST_CATEGORIES]}
