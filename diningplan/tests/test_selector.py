import unittest
from diningplan.domain.Category import Category
from diningplan.domain.MenuItem import MenuItem
from diningplan.logic.selection.selector import (
    meal_calorie_target, rank_items, round_half_up, select_items,
)
from diningplan.utilities.constants import MAX_ITEM_QUANTITY


def item(name, category, calories, protein=0):
    return MenuItem(name=name, category=category, calories=calories, protein=protein)


class TestTarget(unittest.TestCase):

    def test_even_split(self):
        self.assertEqual(meal_calorie_target(240), 80)
        self.assertEqual(meal_calorie_target(2000), 667)
        self.assertEqual(meal_calorie_target(1000), 333)
        self.assertEqual(meal_calorie_target(0), 0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(-2.5), -3)


class TestRanking(unittest.TestCase):

    def test_needed_categories_first_then_protein_density(self):
        chicken = item("Chicken", Category.PROTEIN, 200, 30)
        salad = item("Salad", Category.VEGGIES, 50, 2)
        rice = item("Rice", Category.GRAINS, 200, 4)
        cookie = item("Cookie", Category.MISC, 100, 10)
        ranked = rank_items([chicken, cookie, rice, salad], {Category.PROTEIN})
        self.assertEqual([i.name for i in ranked], ["Salad", "Rice", "Chicken", "Cookie"])

    def test_ties_keep_input_order(self):
        a = item("A Toast", Category.GRAINS, 100, 5)
        b = item("B Toast", Category.GRAINS, 100, 5)
        c = item("C Toast", Category.GRAINS, 200, 10)
        self.assertEqual([i.name for i in rank_items([a, b, c], set())], ["A Toast", "B Toast", "C Toast"])
        self.assertEqual([i.name for i in rank_items([c, b, a], set())], ["C Toast", "B Toast", "A Toast"])


class TestSelectItems(unittest.TestCase):

    def test_single_item_scenario(self):
        fulfilled = set()
        eggs = item("Eggs", Category.PROTEIN, 80, 7)
        result = select_items([eggs], 240, fulfilled)
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].item, eggs)
        self.assertEqual(result[0].quantity, 1)
        self.assertEqual(fulfilled, {Category.PROTEIN})

    def test_zero_goal_selects_nothing(self):
        fulfilled = set()
        pool = [item("Eggs", Category.PROTEIN, 80, 7), item("Toast", Category.GRAINS, 90, 3)]
        self.assertEqual(select_items(pool, 0, fulfilled), [])
        self.assertEqual(fulfilled, set())

    def test_empty_pool(self):
        self.assertEqual(select_items([], 2000, set()), [])

    def test_quantity_capped_at_max(self):
        fulfilled = set()
        result = select_items([item("Grapes", Category.FRUITS, 10, 0)], 2000, fulfilled)
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].quantity, MAX_ITEM_QUANTITY)

    def test_item_too_large_for_band_is_skipped_even_if_needed(self):
        fulfilled = set()
        pizza = item("Pepperoni Pizza", Category.PROTEIN, 900, 40)
        toast = item("Toast", Category.GRAINS, 100, 3)
        result = select_items([pizza, toast], 1500, fulfilled)
        self.assertEqual([e.item.name for e in result], ["Toast"])
        self.assertEqual(result[0].quantity, 3)
        self.assertEqual(fulfilled, {Category.GRAINS})

    def test_stops_at_lower_band(self):
        # target 500, lower bound 450
        first = item("Steak", Category.PROTEIN, 230, 40)
        second = item("Fries Cup", Category.MISC, 50, 0)
        result = select_items([first, second], 1500, set())
        # 2x steak = 460 >= 450, nothing else considered
        self.assertEqual([(e.item.name, e.quantity) for e in result], [("Steak", 2)])

    def test_band_and_quantity_invariants(self):
        pools = [
            [item("Chicken", Category.PROTEIN, 190, 32), item("Salad", Category.VEGGIES, 45, 2),
             item("Rice", Category.GRAINS, 210, 5), item("Cookie", Category.MISC, 200, 2)],
            [item("Yogurt", Category.DAIRY, 150, 6), item("Bagel", Category.GRAINS, 280, 10),
             item("Banana", Category.FRUITS, 105, 1)],
            [item("Soup", Category.MISC, 120, 4), item("Muffin", Category.GRAINS, 400, 6)],
        ]
        for goal in (900, 1500, 2000, 2600, 3200):
            upper = meal_calorie_target(goal) * 1.1
            for pool in pools:
                result = select_items(pool, goal, set())
                total = sum(e.calories for e in result)
                self.assertLessEqual(total, upper)
                for e in result:
                    self.assertGreaterEqual(e.quantity, 1)
                    self.assertLessEqual(e.quantity, MAX_ITEM_QUANTITY)

    def test_misc_never_fulfilled(self):
        fulfilled = set()
        select_items([item("Cookie", Category.MISC, 100, 1)], 900, fulfilled)
        self.assertEqual(fulfilled, set())

    def test_fulfilled_state_carries_between_meals(self):
        fulfilled = set()
        chicken = item("Chicken", Category.PROTEIN, 200, 40)
        salad = item("Salad", Category.VEGGIES, 100, 1)
        # first meal: chicken is the only needed high-density item
        select_items([chicken], 1800, fulfilled)
        self.assertIn(Category.PROTEIN, fulfilled)
        # second meal: salad is now ranked ahead of the denser chicken
        result = select_items([chicken, salad], 1800, fulfilled)
        self.assertEqual(result[0].item.name, "Salad")
        self.assertEqual(fulfilled, {Category.PROTEIN, Category.VEGGIES})

    def test_does_not_mutate_when_only_fulfilled_categories(self):
        fulfilled = {Category.PROTEIN}
        select_items([item("Chicken", Category.PROTEIN, 200, 40)], 1800, fulfilled)
        self.assertEqual(fulfilled, {Category.PROTEIN})


if __name__ == '__main__':
    unittest.main()
