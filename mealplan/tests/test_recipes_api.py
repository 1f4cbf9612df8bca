import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from mealplan.api.api_run import create_app
from mealplan.tests.sample_catalog import SAMPLE_RECIPES, write_catalog


class TestRecipesAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.client = TestClient(create_app(write_catalog(Path(self._tmp.name))))

    def tearDown(self):
        self._tmp.cleanup()

    def test_list_recipes(self):
        resp = self.client.get('/recipes')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['count'], len(SAMPLE_RECIPES))
        self.assertEqual(data['data'], SAMPLE_RECIPES)

    def test_recipe_by_id(self):
        resp = self.client.get('/recipes', params={'id': '3'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['data']['title'], 'Tomato Soup')
        self.assertEqual(data['data']['prep_time'], '30 minutes')
        self.assertNotIn('count', data)

    def test_recipe_not_found(self):
        resp = self.client.get('/recipes?id=999')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {'success': False, 'error': 'Recipe not found'})

    def test_recipe_keys_keep_catalog_order(self):
        data = self.client.get('/recipes?id=3').json()['data']
        self.assertEqual(list(data.keys()), list(SAMPLE_RECIPES[2].keys()))

    def test_search(self):
        resp = self.client.get('/search', params={'q': 'egg'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual([r['title'] for r in data['data']], ['Omelette', 'Pancakes', 'Tomato Soup'])
        self.assertEqual(data['count'], 3)

    def test_search_by_meal_type(self):
        data = self.client.get('/search?meal_type=Lunch').json()
        self.assertEqual([r['title'] for r in data['data']], ['Tomato Soup', 'Beef Stew'])

    def test_search_without_params(self):
        data = self.client.get('/search').json()
        self.assertEqual(data['count'], len(SAMPLE_RECIPES))

    def test_api_prefix(self):
        resp = self.client.get('/api/recipes?id=1')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['data']['title'], 'Omelette')

    def test_cors_headers(self):
        resp = self.client.get('/recipes')
        self.assertEqual(resp.headers['access-control-allow-origin'], '*')
        self.assertEqual(resp.headers['access-control-allow-credentials'], 'true')
        self.assertIn('PUT', resp.headers['access-control-allow-methods'])

    def test_options_preflight(self):
        for path in ('/recipes', '/search', '/meal-plans', '/anything'):
            resp = self.client.options(path)
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.content, b'')
            self.assertEqual(resp.headers['access-control-allow-origin'], '*')

    def test_unsupported_method(self):
        resp = self.client.post('/recipes')
        self.assertEqual(resp.status_code, 405)
        self.assertEqual(resp.json(), {'success': False, 'error': 'Method not allowed'})

    def test_unknown_path(self):
        resp = self.client.get('/nope')
        self.assertEqual(resp.status_code, 404)
        self.assertFalse(resp.json()['success'])


class TestBrokenCatalog(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_catalog_is_500(self):
        client = TestClient(create_app(self.tmp / 'missing.json'))
        resp = client.get('/recipes')
        self.assertEqual(resp.status_code, 500)
        data = resp.json()
        self.assertFalse(data['success'])
        self.assertIn('not found', data['error'])

    def test_malformed_catalog_is_500(self):
        path = self.tmp / 'recipes.json'
        path.write_text('[{"id": 1,', encoding='utf-8')
        client = TestClient(create_app(path))
        resp = client.get('/search?q=egg')
        self.assertEqual(resp.status_code, 500)
        self.assertIn('Invalid JSON', resp.json()['error'])

    def test_plan_listing_does_not_need_catalog(self):
        client = TestClient(create_app(self.tmp / 'missing.json'))
        self.assertEqual(client.post('/meal-plans').status_code, 201)
        self.assertEqual(client.get('/meal-plans').json()['count'], 1)


if __name__ == '__main__':
    unittest.main()
