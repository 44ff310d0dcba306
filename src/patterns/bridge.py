"""
Padrão Bridge: bebidas refinadas delegam o ingrediente a uma hierarquia própria
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO, Type


class Ingredient(ABC):
    """Implementor do padrão Bridge"""

    @abstractmethod
    def add(self, out: Optional[TextIO] = None) -> None:
        pass


class Milk(Ingredient):
    def add(self, out: Optional[TextIO] = None) -> None:
        print("Adding milk.", file=out)


class Sugar(Ingredient):
    def add(self, out: Optional[TextIO] = None) -> None:
        print("Adding sugar.", file=out)


class RefinedBeverage(ABC):
    """Abstraction do padrão Bridge, ligada a um único ingrediente"""

    def __init__(self, ingredient: Ingredient):
        self._ingredient = ingredient

    @property
    def ingredient(self) -> Ingredient:
        return self._ingredient

    @abstractmethod
    def prepare(self, out: Optional[TextIO] = None) -> None:
        pass


class RefinedCoffee(RefinedBeverage):
    def prepare(self, out: Optional[TextIO] = None) -> None:
        print("Preparing a refined coffee.", file=out)
        self._ingredient.add(out)


class RefinedTea(RefinedBeverage):
    def prepare(self, out: Optional[TextIO] = None) -> None:
        print("Preparing a refined tea.", file=out)
        self._ingredient.add(out)


INGREDIENTS: Dict[str, Type[Ingredient]] = {
    "milk": Milk,
    "sugar": Sugar
}

REFINED_BEVERAGES: Dict[str, Type[RefinedBeverage]] = {
    "coffee": RefinedCoffee,
    "tea": RefinedTea
}


def make_refined_beverage(beverage: str, ingredient: str) -> Optional[RefinedBeverage]:
    """Combina qualquer bebida refinada com qualquer ingrediente pelo nome"""
    beverage_class = REFINED_BEVERAGES.get(beverage.lower())
    ingredient_class = INGREDIENTS.get(ingredient.lower())
    if beverage_class is None or ingredient_class is None:
        return None
    return beverage_class(ingredient_class())
