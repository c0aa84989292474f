"""Plain-text rendering of a day plan, for the console."""
from typing import List

WIDTH = 50
CHECK = "✅"
CROSS = "❌"


def format_day_plan(result) -> str:
    """Render a DayPlanResult the way it is printed by the CLI."""
    lines: List[str] = []
    goals = result.goals
    lines.append(f" Meal Plan for {result.date.isoformat()} ".center(WIDTH, "="))
    lines.append(f"Daily Goals: {goals.calories} calories, {goals.protein}g protein")

    if not result.plan:
        lines.append("")
        lines.append("No menu items available for this date.")

    for slot, entries in result.plan.meals.items():
        lines.append("")
        lines.append(f"{slot.label}:")
        for entry in entries:
            qty = f" (x{entry.quantity})" if entry.quantity > 1 else ""
            lines.append(f"  • {entry.item.name} [{entry.item.category}]{qty}")
            lines.append(f"    {entry.calories} cal | {entry.protein}g protein")

    totals = result.totals
    pct = result.percentages()
    lines.append("")
    lines.append("-" * WIDTH)
    lines.append("Nutrition Totals:")
    lines.append(f"  Calories: {totals.calories}/{goals.calories} ({pct['calories']}%)")
    lines.append(f"  Protein:  {totals.protein}g/{goals.protein}g ({pct['protein']}%)")
    lines.append("")
    lines.append("Food Group Checklist:")
    for category, done in result.checklist().items():
        lines.append(f"  {CHECK if done else CROSS} {category}")
    lines.append("-" * WIDTH)
    return "\n".join(lines)


__all__ = ["format_day_plan"]
