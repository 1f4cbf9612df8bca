"""Ingredient domain entity: name and free-form quantity as listed in a recipe."""
from typing import Any


class Ingredient:
    def __init__(self, name: str = "", quantity: Any = ""):
        self.name = name
        self.quantity = quantity

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.name == other.name and self.quantity == other.quantity

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        name = d.get("name")
        return Ingredient(name="" if name is None else str(name), quantity=d.get("quantity", ""))

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity}
