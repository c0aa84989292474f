from datetime import date

import pytest

from diningplan import cli
from diningplan.domain.NutritionGoals import NutritionGoals
from diningplan.infra.Menu_Repository import JsonMenuProvider
from diningplan.infra.paths import SAMPLE_MENU_FILE
from diningplan.logic.planning.generator import generate_day_plan
from diningplan.logic.reporting.summary import format_day_plan


def test_format_day_plan():
    result = generate_day_plan(JsonMenuProvider(SAMPLE_MENU_FILE), date(2025, 7, 8), NutritionGoals(2000, 100))
    text = format_day_plan(result)
    assert "Meal Plan for 2025-07-08" in text
    assert "Daily Goals: 2000 calories, 100g protein" in text
    assert "Breakfast:" in text and "Lunch:" in text and "Dinner:" in text
    assert "  • Turkey Sausage Links [Protein] (x3)" in text
    assert "    420 cal | 30g protein" in text
    # quantity suffix only for more than one serving
    assert "  • Scrambled Eggs [Protein]\n" in text
    assert "  Calories: 1925/2000" in text
    assert "  Protein:  141g/100g (" in text
    assert "✅ Dairy" in text


def test_format_empty_plan():
    result = generate_day_plan(JsonMenuProvider(SAMPLE_MENU_FILE), date(2030, 1, 1), NutritionGoals(2000, 100))
    text = format_day_plan(result)
    assert "No menu items available for this date." in text
    assert "❌ Protein" in text
    assert "  Calories: 0/2000 (0.0%)" in text


def test_cli_with_menu_file(capsys):
    code = cli.main(["--menu-file", str(SAMPLE_MENU_FILE), "--date", "2025-07-08", "--calories", "2000"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Dining Hall Meal Generator" in out
    assert "Meal Plan for 2025-07-08" in out
    assert "Cheddar Cheese Cubes [Dairy] (x3)" in out


def test_cli_interactive_uses_answers_and_defaults(capsys, monkeypatch):
    answers = iter(["240", "", "2025-07-08"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    code = cli.main(["--interactive", "--menu-file", str(SAMPLE_MENU_FILE)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Daily Goals: 240 calories, 100g protein" in out
    assert "Fresh Fruit Cup [Fruits]" in out


def test_cli_rejects_bad_goal(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--menu-file", str(SAMPLE_MENU_FILE), "--calories", "-5"])
    assert exc.value.code == 2


def test_cli_parses_date_argument():
    assert cli.parse_date("2025-07-08") == date(2025, 7, 8)
    with pytest.raises(SystemExit) as exc:
        cli.main(["--menu-file", str(SAMPLE_MENU_FILE), "--date", "07/08/2025"])
    assert exc.value.code == 2


def test_cli_interactive_offers_date_argument_as_default(capsys, monkeypatch):
    prompts = []

    def answer(prompt):
        prompts.append(prompt)
        return ""

    monkeypatch.setattr("builtins.input", answer)
    code = cli.main(["--interactive", "--menu-file", str(SAMPLE_MENU_FILE), "--date", "2025-07-08"])
    assert code == 0
    assert prompts[-1] == "Enter date (YYYY-MM-DD) [2025-07-08]: "
    assert "Meal Plan for 2025-07-08" in capsys.readouterr().out
