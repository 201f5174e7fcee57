"""Shared builders for the test suite: temporary catalogs, storages and clients."""
import json
import random
from pathlib import Path

from fastapi.testclient import TestClient

from mealplan.api.api_run import create_app
from mealplan.domain.Recipe import Recipe
from mealplan.infra.Storage import Storage


def ingredient(name, amount, unit, seasonal=False):
    return {"name": name, "amount": amount, "unit": unit, "seasonal": seasonal}


def recipe_dict(recipe_id, name, servings, ingredients, tags=None, preparation_time=20):
    return {
        "id": recipe_id,
        "name": name,
        "ingredients": ingredients,
        "instructions": f"Prepare {name}.",
        "preparationTime": preparation_time,
        "servings": servings,
        "tags": tags or [],
    }


PASTA = recipe_dict(1, "Pasta", 2, [ingredient("tomato", 200, "g")])
SALAD = recipe_dict(2, "Salad", 1, [ingredient("lettuce", 100, "g")])


def sample_catalog(count=10):
    """`count` distinct recipes, each with one unique ingredient and one shared one."""
    return [
        recipe_dict(i, f"Recipe {i}", 2, [ingredient(f"item {i}", 10 * i, "g"), ingredient("salt", 1, "tsp")])
        for i in range(1, count + 1)
    ]


def recipes_from(dicts):
    return [Recipe.from_dict(d) for d in dicts]


def make_storage(directory, recipes) -> Storage:
    directory = Path(directory)
    catalog = directory / "recipes.json"
    with open(catalog, "w", encoding="utf-8") as f:
        json.dump(recipes, f)
    return Storage(store_file=directory / "store.json", recipes_file=catalog)


def make_client(storage: Storage, seed: int = 7) -> TestClient:
    return TestClient(create_app(storage, rng=random.Random(seed)))


def register(client: TestClient, username="alice", password="secret"):
    resp = client.post("/api/register", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()
