import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, TextIO

logger = logging.getLogger(__name__)


class Beverage(ABC):
    """Interface Product do padrão Factory Method"""

    @abstractmethod
    def prepare(self, out: Optional[TextIO] = None) -> None:
        pass


# Bebidas concretas
class Coffee(Beverage):
    def prepare(self, out: Optional[TextIO] = None) -> None:
        print("Preparing a coffee.", file=out)


class Tea(Beverage):
    def prepare(self, out: Optional[TextIO] = None) -> None:
        print("Preparing a tea.", file=out)


class BeverageFactory(ABC):
    """Factory Method interface para criação de bebidas"""

    @abstractmethod
    def create_beverage(self) -> Beverage:
        pass


class CoffeeFactory(BeverageFactory):
    """Factory concreta para cafés"""

    def create_beverage(self) -> Beverage:
        return Coffee()


class TeaFactory(BeverageFactory):
    """Factory concreta para chás"""

    def create_beverage(self) -> Beverage:
        return Tea()


class MenuFactory:
    """Factory para gerenciar criação de bebidas do menu"""

    def __init__(self):
        self._factories: Dict[str, BeverageFactory] = {
            "coffee": CoffeeFactory(),
            "tea": TeaFactory()
        }

    def register_factory(self, kind: str, factory: BeverageFactory):
        """Registra uma nova factory"""
        self._factories[kind.lower()] = factory

    def get_factory(self, kind: str) -> Optional[BeverageFactory]:
        return self._factories.get(kind.lower())

    def create_beverage(self, kind: str) -> Optional[Beverage]:
        """Cria bebida usando factory apropriada"""
        factory = self.get_factory(kind)
        if factory is None:
            logger.debug("No factory registered for %r", kind)
            return None
        logger.debug("Creating %r via %s", kind, type(factory).__name__)
        return factory.create_beverage()

    def available_kinds(self) -> List[str]:
        """Retorna tipos de bebidas disponíveis"""
        return list(self._factories.keys())


class BeverageFactorySelector:
    """Selector para escolher factory baseado no tipo de bebida"""

    @staticmethod
    def get_factory(kind: str) -> Optional[BeverageFactory]:
        factories = {
            "coffee": CoffeeFactory,
            "tea": TeaFactory
        }
        factory_class = factories.get(kind.lower())
        return factory_class() if factory_class else None
