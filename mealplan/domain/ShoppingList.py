"""ShoppingList aggregate: items to purchase for one user and week."""
from datetime import date
from typing import List, Optional


class ShoppingListItem:
    def __init__(self, name: str = "", amount: float = 0, unit: str = "", checked: bool = False):
        self.name = name
        self.amount = amount
        self.unit = unit
        self.checked = checked

    def key(self):
        '''Identity of an item inside one list: exact (name, unit).'''
        return (self.name, self.unit)

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name} - {self.amount} {self.unit}".rstrip()

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return ShoppingListItem(
            name=d.get('name', ''),
            amount=d.get('amount', 0),
            unit=d.get('unit', '') or '',
            checked=bool(d.get('checked', False)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "checked": self.checked,
        }


class ShoppingList:
    def __init__(self, user_id: int, week_start: date, items: Optional[List[ShoppingListItem]] = None, id: int = 0):
        self.id = id
        self.user_id = user_id
        self.week_start = week_start
        self.items = items[:] if items else []

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List {self.week_start.isoformat()}:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return ShoppingList(
            id=d.get('id', 0),
            user_id=d['userId'],
            week_start=date.fromisoformat(d['weekStart']),
            items=[ShoppingListItem.from_dict(i) for i in d.get('items') or []],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "weekStart": self.week_start.isoformat(),
            "items": [item.to_dict() for item in self.items],
        }
