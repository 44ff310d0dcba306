"""
Padrão Template Method para o preparo de bebidas quentes
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO, Type, final


class BeveragePreparation(ABC):
    """
    Esqueleto fixo do preparo: ferver água, infusão, servir, ingredientes.

    Subclasses definem apenas `brew` e `add_ingredients`; `prepare` e os
    passos fixos não devem ser sobrescritos.
    """

    @final
    def prepare(self, out: Optional[TextIO] = None) -> None:
        self.__boil_water(out)
        self.brew(out)
        self.__pour_in_cup(out)
        self.add_ingredients(out)

    @abstractmethod
    def brew(self, out: Optional[TextIO] = None) -> None:
        pass

    @abstractmethod
    def add_ingredients(self, out: Optional[TextIO] = None) -> None:
        pass

    def __boil_water(self, out: Optional[TextIO]) -> None:
        print("Boiling water.", file=out)

    def __pour_in_cup(self, out: Optional[TextIO]) -> None:
        print("Pouring into cup.", file=out)


class CoffeePreparation(BeveragePreparation):
    def brew(self, out: Optional[TextIO] = None) -> None:
        print("Brewing coffee.", file=out)

    def add_ingredients(self, out: Optional[TextIO] = None) -> None:
        print("Adding sugar and milk.", file=out)


class TeaPreparation(BeveragePreparation):
    def brew(self, out: Optional[TextIO] = None) -> None:
        print("Steeping the tea.", file=out)

    def add_ingredients(self, out: Optional[TextIO] = None) -> None:
        print("Adding lemon.", file=out)


PREPARATIONS: Dict[str, Type[BeveragePreparation]] = {
    "coffee": CoffeePreparation,
    "tea": TeaPreparation
}
