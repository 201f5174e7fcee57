import unittest

from mealplan.domain.Preferences import Preferences
from mealplan.domain.errors import EmptyCatalogError, NoMatchError
from mealplan.logic.planning.preference_filter import filter_recipes, matches_keyword
from mealplan.tests.support import ingredient, recipe_dict, recipes_from


class TestPreferenceFilter(unittest.TestCase):

    def setUp(self):
        self.catalog = recipes_from([
            recipe_dict(1, "Peanut Noodles", 2, [ingredient("rice noodles", 250, "g"), ingredient("peanut butter", 4, "tbsp")]),
            recipe_dict(2, "Grilled Eggplant", 2, [ingredient("eggplant", 2, "pcs")]),
            recipe_dict(3, "Beef Tacos", 4, [ingredient("Ground Beef", 500, "g"), ingredient("tortillas", 8, "pcs")]),
            recipe_dict(4, "Green Salad", 2, [ingredient("lettuce", 200, "g")]),
        ])

    def names(self, recipes):
        return [r.name for r in recipes]

    def test_no_preferences_passes_everything(self):
        result = filter_recipes(self.catalog, None)
        self.assertEqual(self.names(result), self.names(self.catalog))
        self.assertIsNot(result, self.catalog)

    def test_empty_catalog_raises_before_filtering(self):
        with self.assertRaises(EmptyCatalogError) as ctx:
            filter_recipes([], Preferences(allergies=["nut"]))
        self.assertEqual(ctx.exception.message, "No recipes available")
        with self.assertRaises(EmptyCatalogError):
            filter_recipes([], None)

    def test_allergy_matches_substring_not_whole_word(self):
        # "nut" is only a substring of "peanut butter"; the recipe is still excluded
        result = filter_recipes(self.catalog, Preferences(allergies=["nut"]))
        self.assertNotIn("Peanut Noodles", self.names(result))

    def test_restriction_egg_excludes_eggplant(self):
        result = filter_recipes(self.catalog, Preferences(dietary_restrictions=["egg"]))
        self.assertEqual(self.names(result), ["Peanut Noodles", "Beef Tacos", "Green Salad"])

    def test_matching_is_case_insensitive(self):
        result = filter_recipes(self.catalog, Preferences(dietary_restrictions=["BEEF"]))
        self.assertNotIn("Beef Tacos", self.names(result))
        self.assertTrue(matches_keyword("PEANUT oil", ["Peanut"]))

    def test_recipe_without_ingredient_list_excluded_only_with_preferences(self):
        catalog = self.catalog + recipes_from([{"id": 9, "name": "Mystery", "servings": 1}])
        self.assertIn("Mystery", self.names(filter_recipes(catalog, None)))
        self.assertNotIn("Mystery", self.names(filter_recipes(catalog, Preferences())))

    def test_no_match_raises(self):
        prefs = Preferences(dietary_restrictions=["e"], allergies=["u"])
        with self.assertRaises(NoMatchError) as ctx:
            filter_recipes(self.catalog, prefs)
        self.assertEqual(ctx.exception.message, "No recipes match your dietary preferences.")

    def test_result_is_subset_without_forbidden_ingredients(self):
        keyword_sets = [[], ["nut"], ["egg", "lettuce"], ["beef"], ["noodle", "tortilla"]]
        for keywords in keyword_sets:
            prefs = Preferences(allergies=keywords)
            result = filter_recipes(self.catalog, prefs)
            for recipe in result:
                self.assertIn(recipe, self.catalog)
                for ing in recipe.ingredients:
                    self.assertFalse(matches_keyword(ing.name, keywords), (keywords, ing.name))

    def test_blank_keywords_are_ignored(self):
        self.assertFalse(matches_keyword("tomato", ["", None]))


if __name__ == '__main__':
    unittest.main()
