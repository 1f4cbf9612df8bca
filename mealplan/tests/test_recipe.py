import unittest
from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.Recipe import Recipe


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.data = {
            "id": 7,
            "title": "Omelette",
            "dietary_restrictions": "Vegetarian",
            "section": "Breakfast",
            "ingredients": [{"name": "egg", "quantity": "2"}],
            "prep_time": "10 minutes",
        }

    def test_from_dict(self):
        recipe = Recipe.from_dict(self.data)
        self.assertEqual(recipe.title, "Omelette")
        self.assertEqual(recipe.ingredients, [Ingredient("egg", "2")])
        self.assertEqual(recipe.extra, {"prep_time": "10 minutes"})

    def test_to_dict_keeps_extra_keys(self):
        self.assertEqual(Recipe.from_dict(self.data).to_dict(), self.data)

    def test_to_dict_keeps_catalog_key_order(self):
        data = {
            "title": "Toast",
            "prep_time": "5 minutes",
            "id": 8,
            "ingredients": [{"name": "bread", "quantity": "2 slices"}],
            "section": "Breakfast",
            "dietary_restrictions": "Vegan",
        }
        recipe = Recipe.from_dict(data)
        self.assertEqual(list(recipe.to_dict().keys()), list(data.keys()))
        self.assertEqual(list(recipe.snapshot().to_dict().keys()), list(data.keys()))

    def test_from_dict_rejects_non_object(self):
        with self.assertRaises(ValueError):
            Recipe.from_dict(["not", "a", "recipe"])

    def test_normalize_id(self):
        self.assertEqual(Recipe.normalize_id(1), "1")
        self.assertEqual(Recipe.normalize_id("1"), "1")
        self.assertEqual(Recipe.normalize_id(" 01 "), "1")
        self.assertEqual(Recipe.normalize_id(1.0), "1")
        self.assertEqual(Recipe.normalize_id("abc"), "abc")
        self.assertIsNone(Recipe.normalize_id(None))
        self.assertIsNone(Recipe.normalize_id(True))
        self.assertIsNone(Recipe.normalize_id(""))

    def test_matches_id_across_types(self):
        recipe = Recipe.from_dict(self.data)
        self.assertTrue(recipe.matches_id("7"))
        self.assertTrue(recipe.matches_id(7))
        self.assertFalse(recipe.matches_id("8"))
        self.assertFalse(recipe.matches_id(None))

    def test_snapshot_is_independent(self):
        recipe = Recipe.from_dict(self.data)
        copy = recipe.snapshot()
        copy.ingredients[0].quantity = "3"
        copy.extra["prep_time"] = "1 hour"
        self.assertEqual(recipe.ingredients[0].quantity, "2")
        self.assertEqual(recipe.extra["prep_time"], "10 minutes")


if __name__ == '__main__':
    unittest.main()
