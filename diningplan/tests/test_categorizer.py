import re
import unittest
from diningplan.domain.Category import Category
from diningplan.logic.categorize.categorizer import Categorizer, categorize


class TestCategorizer(unittest.TestCase):

    def test_single_keyword_names(self):
        self.assertEqual(categorize("Scrambled Eggs"), Category.PROTEIN)
        self.assertEqual(categorize("Garden Salad"), Category.VEGGIES)
        self.assertEqual(categorize("Sliced Apple"), Category.FRUITS)
        self.assertEqual(categorize("Whole Wheat Bread"), Category.GRAINS)
        self.assertEqual(categorize("Vanilla Yogurt"), Category.DAIRY)

    def test_no_match_is_misc(self):
        self.assertEqual(categorize("Coffee"), Category.MISC)
        self.assertEqual(categorize("Chocolate Chip Cookie"), Category.MISC)
        self.assertEqual(categorize(""), Category.MISC)
        self.assertEqual(categorize(None), Category.MISC)
        self.assertEqual(categorize(42), Category.MISC)

    def test_case_insensitive(self):
        self.assertEqual(categorize("BACON STRIPS"), Category.PROTEIN)

    def test_priority_order_on_multi_keyword_names(self):
        # Protein > Veggies > Fruits > Grains > Dairy
        self.assertEqual(categorize("Chicken & Broccoli"), Category.PROTEIN)
        self.assertEqual(categorize("Spinach and Apple Salad"), Category.VEGGIES)
        self.assertEqual(categorize("Blueberry Muffin"), Category.FRUITS)
        self.assertEqual(categorize("Buttermilk Pancakes"), Category.GRAINS)
        self.assertEqual(categorize("Egg and Cheese Bagel"), Category.PROTEIN)

    def test_same_name_same_category(self):
        names = ["Turkey Burger", "Penne Pasta", "Fruit Cup", "Hot Tea"]
        first = [categorize(n) for n in names]
        second = [categorize(n) for n in names]
        self.assertEqual(first, second)

    def test_custom_rule_table(self):
        categorizer = Categorizer(rules=[
            (re.compile("soup"), Category.VEGGIES),
            (re.compile("chicken"), Category.PROTEIN),
        ])
        self.assertEqual(categorizer.categorize("Chicken Noodle Soup"), Category.VEGGIES)
        self.assertEqual(categorizer.categorize("Fried Chicken"), Category.PROTEIN)
        self.assertEqual(categorizer.categorize("Rice"), Category.MISC)


if __name__ == '__main__':
    unittest.main()
