"""Console front-end: generate today's (or a given day's) plan and print it."""
import argparse
import logging
import sys
from datetime import date, datetime

from pydantic import ValidationError

from diningplan.infra.Menu_Provider import NutrisliceMenuProvider
from diningplan.infra.Menu_Repository import JsonMenuProvider
from diningplan.logic.planning.generator import generate_day_plan
from diningplan.logic.reporting.summary import format_day_plan
from diningplan.utilities.config import DEFAULT_CALORIE_GOAL, DEFAULT_PROTEIN_GOAL, LOG_LEVEL
from diningplan.utilities.constants import DATE_FORMAT
from diningplan.utilities.validators import PlanRequest

logger = logging.getLogger(__name__)


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diningplan",
        description="Generate a balanced dining hall meal plan from your nutrition goals.",
    )
    parser.add_argument("--date", type=parse_date, help="menu date, YYYY-MM-DD (default: today)")
    parser.add_argument("--calories", type=int, default=None, help=f"daily calorie goal (default: {DEFAULT_CALORIE_GOAL})")
    parser.add_argument("--protein", type=int, default=None, help=f"daily protein goal in grams (default: {DEFAULT_PROTEIN_GOAL})")
    parser.add_argument("--menu-file", help="read menus from a JSON file instead of the Nutrislice API")
    parser.add_argument("--interactive", action="store_true", help="prompt for goals and date")
    return parser


def _ask(prompt: str, default) -> str:
    answer = input(f"{prompt} [{default}]: ").strip()
    return answer or str(default)


def prompt_request(args) -> dict:
    """Ask for the goals and date, offering the command-line values as defaults."""
    return {
        "calories": _ask("Daily calorie goal", args.calories or DEFAULT_CALORIE_GOAL),
        "protein": _ask("Daily protein goal (grams)", args.protein or DEFAULT_PROTEIN_GOAL),
        "date": _ask("Enter date (YYYY-MM-DD)", (args.date or date.today()).strftime(DATE_FORMAT)),
    }


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    raw = prompt_request(args) if args.interactive else {
        "calories": args.calories, "protein": args.protein, "date": args.date,
    }
    try:
        request = PlanRequest(**raw)
    except ValidationError as e:
        parser.error(f"invalid input: {e.errors(include_url=False)[0]['msg']}")

    print(" Dining Hall Meal Generator ".center(50, "="))
    print("Generating healthy, balanced meals based on your nutrition goals\n")

    if args.menu_file:
        result = generate_day_plan(JsonMenuProvider(args.menu_file), request.target_date(), request.to_goals())
    else:
        with NutrisliceMenuProvider() as provider:
            result = generate_day_plan(provider, request.target_date(), request.to_goals())

    print(format_day_plan(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
