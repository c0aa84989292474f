"""Keyword based food-group categorization.

Rules are evaluated in order and the first match wins, so a dish such as
"Chicken & Broccoli" is Protein, not Veggies. Names matching no rule are Misc.
"""
import re
from typing import List, Optional, Pattern, Sequence, Tuple

from diningplan.domain.Category import Category

CategoryRule = Tuple[Pattern[str], Category]


def _rule(keywords: Sequence[str], category: Category) -> CategoryRule:
    pattern = re.compile("|".join(re.escape(k) for k in keywords))
    return pattern, category


# Substring matching, same as the dining hall labels are written
# ("Scrambled Eggs", "Turkey Burger", "Blueberry Muffin").
PROTEIN_KEYWORDS = [
    "egg", "sausage", "bacon", "chicken", "ham", "tofu", "pork", "beef", "fish",
    "turkey", "meatball", "burger", "crumbles", "piccata", "meatloaf", "shrimp",
    "pollock", "thigh", "breast", "pepperoni", "chorizo", "steak", "willy",
    "moroccan", "seitan",
]
VEGGIE_KEYWORDS = [
    "potato", "tomato", "broccoli", "spinach", "pepper", "onion", "veggie",
    "vegetable", "salad", "greens", "carrot", "kale", "chard", "pea", "bean",
    "zucchini", "squash", "cucumber", "cauliflower", "mint", "lettuce", "snow pea",
]
FRUIT_KEYWORDS = [
    "apple", "banana", "berry", "orange", "grape", "fruit", "pineapple", "pear",
    "raisin", "melon", "grapefruit", "blueberry", "coconut", "apricot", "cherry",
]
GRAIN_KEYWORDS = [
    "pancake", "waffle", "bread", "oat", "cereal", "muffin", "bagel", "grain",
    "rice", "quinoa", "toast", "croissant", "pasta", "linguini", "shell",
    "noodle", "risotto", "orzo", "barley",
]
DAIRY_KEYWORDS = ["milk", "cheese", "yogurt"]

DEFAULT_RULES: List[CategoryRule] = [
    _rule(PROTEIN_KEYWORDS, Category.PROTEIN),
    _rule(VEGGIE_KEYWORDS, Category.VEGGIES),
    _rule(FRUIT_KEYWORDS, Category.FRUITS),
    _rule(GRAIN_KEYWORDS, Category.GRAINS),
    _rule(DAIRY_KEYWORDS, Category.DAIRY),
]


class Categorizer:
    """Ordered (pattern, category) table; the first matching pattern wins."""

    def __init__(self, rules: Optional[Sequence[CategoryRule]] = None, default: Category = Category.MISC):
        self.rules: List[CategoryRule] = list(DEFAULT_RULES if rules is None else rules)
        self.default = default

    def categorize(self, name: str) -> Category:
        name_down = str(name or "").lower()
        for pattern, category in self.rules:
            if pattern.search(name_down):
                return category
        return self.default


_DEFAULT = Categorizer()


def categorize(name: str) -> Category:
    """Classify an item name with the default keyword table."""
    return _DEFAULT.categorize(name)


__all__ = ["Categorizer", "CategoryRule", "DEFAULT_RULES", "categorize"]
