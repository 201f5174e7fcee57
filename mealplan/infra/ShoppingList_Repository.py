from datetime import date
from typing import List, Optional

from mealplan.domain.ShoppingList import ShoppingList, ShoppingListItem
from mealplan.infra.Json_Store import JsonStore


class ShoppingListRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    def get_shopping_list(self, user_id: int, week_start: date) -> Optional[ShoppingList]:
        """The list for (user, week); when several exist the newest one wins."""
        key = week_start.isoformat()
        rows = [r for r in self.store.read()["shopping_lists"]
                if r["userId"] == user_id and r["weekStart"] == key]
        if not rows:
            return None
        return ShoppingList.from_dict(max(rows, key=lambda r: r["id"]))

    def get_by_id(self, list_id: int) -> Optional[ShoppingList]:
        row = next((r for r in self.store.read()["shopping_lists"] if r["id"] == list_id), None)
        return ShoppingList.from_dict(row) if row else None

    def create_shopping_list(self, user_id: int, week_start: date, items: List[ShoppingListItem]) -> ShoppingList:
        with self.store.transaction() as doc:
            shopping_list = ShoppingList(user_id, week_start, items, id=JsonStore.next_id(doc, "shopping_lists"))
            doc["shopping_lists"].append(shopping_list.to_dict())
        return shopping_list

    def replace_items(self, list_id: int, items: List[ShoppingListItem]) -> Optional[ShoppingList]:
        """Replace the whole item sequence of a list; owner and week are never changed here."""
        with self.store.transaction() as doc:
            row = next((r for r in doc["shopping_lists"] if r["id"] == list_id), None)
            if row is None:
                return None
            row["items"] = [item.to_dict() for item in items]
            return ShoppingList.from_dict(row)

    def delete_shopping_lists(self, user_id: int, week_start: date) -> int:
        key = week_start.isoformat()
        with self.store.transaction() as doc:
            kept = [r for r in doc["shopping_lists"]
                    if not (r["userId"] == user_id and r["weekStart"] == key)]
            removed = len(doc["shopping_lists"]) - len(kept)
            doc["shopping_lists"] = kept
        return removed
