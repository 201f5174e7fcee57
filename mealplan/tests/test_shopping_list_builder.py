import unittest

from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.domain.errors import ValidationError
from mealplan.logic.shopping.list_builder import build_shopping_list, scale_amount, validate_items
from mealplan.tests.support import PASTA, SALAD, ingredient, recipe_dict, recipes_from


class TestShoppingListBuilder(unittest.TestCase):

    def as_tuples(self, items):
        return [(i.name, i.amount, i.unit, i.checked) for i in items]

    def test_scale_identity_for_one_person_one_serving(self):
        self.assertEqual(scale_amount(125, 1, 1), 125)

    def test_scale_guards_zero_servings(self):
        self.assertEqual(scale_amount(100, 2, 0), 200)

    def test_scenario_household_of_four(self):
        items = build_shopping_list(recipes_from([PASTA, SALAD]), people_count=4)
        self.assertEqual(self.as_tuples(items), [("tomato", 400, "g", False), ("lettuce", 400, "g", False)])

    def test_identical_name_and_unit_merge_by_sum(self):
        recipes = recipes_from([
            recipe_dict(1, "A", 2, [ingredient("onion", 2, "pcs")]),
            recipe_dict(2, "B", 4, [ingredient("onion", 4, "pcs")]),
        ])
        items = build_shopping_list(recipes, people_count=2)
        # 2*2/2 + 4*2/4
        self.assertEqual(self.as_tuples(items), [("onion", 4, "pcs", False)])

    def test_different_unit_or_case_is_not_merged(self):
        recipes = recipes_from([
            recipe_dict(1, "A", 1, [ingredient("milk", 1, "l"), ingredient("milk", 200, "ml")]),
            recipe_dict(2, "B", 1, [ingredient("Milk", 1, "l")]),
        ])
        items = build_shopping_list(recipes)
        self.assertEqual([i.key() for i in items], [("milk", "l"), ("milk", "ml"), ("Milk", "l")])

    def test_first_seen_order_is_stable(self):
        recipes = recipes_from([
            recipe_dict(1, "A", 1, [ingredient("b", 1, "g"), ingredient("a", 1, "g")]),
            recipe_dict(2, "B", 1, [ingredient("c", 1, "g"), ingredient("b", 1, "g")]),
        ])
        self.assertEqual([i.name for i in build_shopping_list(recipes)], ["b", "a", "c"])

    def test_missing_servings_and_people_default_to_one(self):
        recipes = recipes_from([recipe_dict(1, "A", None, [ingredient("rice", 300, "g")])])
        items = build_shopping_list(recipes, people_count=0)
        self.assertEqual(items[0].amount, 300)

    def test_recipe_without_ingredients_contributes_nothing(self):
        recipes = recipes_from([{"id": 5, "name": "Empty", "servings": 1}, SALAD])
        self.assertEqual([i.name for i in build_shopping_list(recipes)], ["lettuce"])

    def test_validate_items_rejects_duplicates(self):
        items = [ShoppingListItem("egg", 2, "pcs"), ShoppingListItem("egg", 3, "pcs")]
        with self.assertRaises(ValidationError):
            validate_items(items)
        ok = [ShoppingListItem("egg", 2, "pcs"), ShoppingListItem("egg", 100, "g")]
        self.assertEqual(validate_items(ok), ok)


if __name__ == '__main__':
    unittest.main()
