"""
Input validation schemas using Pydantic for user-supplied goals and dates.
"""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from diningplan.domain.NutritionGoals import NutritionGoals
from diningplan.utilities.config import DEFAULT_CALORIE_GOAL, DEFAULT_PROTEIN_GOAL


class GoalsInput(BaseModel):
    """Schema for user nutrition goals."""
    calories: int = Field(DEFAULT_CALORIE_GOAL, gt=0)
    protein: int = Field(DEFAULT_PROTEIN_GOAL, gt=0)

    @field_validator('calories', 'protein', mode='before')
    @classmethod
    def blank_to_default(cls, v, info):
        """Empty answers fall back to the configured defaults."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_CALORIE_GOAL if info.field_name == 'calories' else DEFAULT_PROTEIN_GOAL
        return v

    def to_goals(self) -> NutritionGoals:
        return NutritionGoals(calories=self.calories, protein=self.protein)


class PlanRequest(GoalsInput):
    """Schema for a plan request: goals plus the target date (defaults to today)."""
    date: Optional[dt.date] = None

    @field_validator('date', mode='before')
    @classmethod
    def blank_date(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def target_date(self) -> dt.date:
        return self.date or dt.date.today()
