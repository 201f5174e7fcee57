"""Ingredient domain entity: name, amount, unit, seasonal flag."""


class Ingredient:
    def __init__(self, name: str = "", amount: float = 0, unit: str = "", seasonal: bool = False):
        self.name = name
        self.amount = amount
        self.unit = unit
        self.seasonal = seasonal

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.amount} {self.unit}".rstrip()]
        if self.seasonal:
            parts.append("seasonal")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.amount, self.unit, self.seasonal) == \
            (other.name, other.amount, other.unit, other.seasonal)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        amount = d.get("amount", 0)
        try:
            amount = float(amount) if not isinstance(amount, (int, float)) else amount
        except (TypeError, ValueError):
            amount = 0
        return Ingredient(
            name=d.get("name", "") or "",
            amount=amount,
            unit=d.get("unit", "") or "",
            seasonal=bool(d.get("seasonal", False)),
        )

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "seasonal": self.seasonal,
        }
