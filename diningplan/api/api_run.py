from datetime import date as _date
from typing import Optional
import logging

from fastapi import FastAPI, Depends, HTTPException, Query, Response
from pydantic import ValidationError

from diningplan.api.dependencies import get_menu_provider
from diningplan.api.routes import menu
from diningplan.infra.pdf_utils import generate_pdf_for_day
from diningplan.logic.planning.generator import generate_day_plan, DayPlanResult
from diningplan.utilities.config import DEFAULT_CALORIE_GOAL, DEFAULT_PROTEIN_GOAL
from diningplan.utilities.validators import PlanRequest

# Logging
logger = logging.getLogger("diningplan_app")

# Initialize FastAPI app
app = FastAPI(title="Dining Hall Meal Planner API")
app.include_router(menu.router)


# -------------------- Helpers --------------------
def _build_plan(provider, date: Optional[_date], calories: int, protein: int) -> DayPlanResult:
    try:
        request = PlanRequest(date=date, calories=calories, protein=protein)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))
    day = request.target_date()
    logger.info("Generating plan for %s (goals: %d cal, %dg protein)", day, request.calories, request.protein)
    return generate_day_plan(provider, day, request.to_goals())


# -------------------- API --------------------
@app.get("/api/plan")
def api_plan(date: Optional[_date] = Query(default=None),
             calories: int = Query(default=DEFAULT_CALORIE_GOAL),
             protein: int = Query(default=DEFAULT_PROTEIN_GOAL),
             provider=Depends(get_menu_provider)):
    result = _build_plan(provider, date, calories, protein)
    return result.to_dict()


@app.get("/api/plan/pdf")
def api_plan_pdf(date: Optional[_date] = Query(default=None),
                 calories: int = Query(default=DEFAULT_CALORIE_GOAL),
                 protein: int = Query(default=DEFAULT_PROTEIN_GOAL),
                 provider=Depends(get_menu_provider)):
    result = _build_plan(provider, date, calories, protein)
    pdf = generate_pdf_for_day(result)
    filename = f"meal_plan_{result.date.isoformat()}.pdf"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
