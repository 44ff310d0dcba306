"""
Padrões GoF demonstrados com o preparo de bebidas
"""
from .factory import *
from .bridge import *
from .template_method import *
from .demos import *

__all__ = [
    # Factory Method Pattern
    'Beverage',
    'Coffee',
    'Tea',
    'BeverageFactory',
    'CoffeeFactory',
    'TeaFactory',
    'MenuFactory',
    'BeverageFactorySelector',

    # Bridge Pattern
    'Ingredient',
    'Milk',
    'Sugar',
    'RefinedBeverage',
    'RefinedCoffee',
    'RefinedTea',
    'INGREDIENTS',
    'REFINED_BEVERAGES',
    'make_refined_beverage',

    # Template Method Pattern
    'BeveragePreparation',
    'CoffeePreparation',
    'TeaPreparation',
    'PREPARATIONS',

    # Demonstrações
    'Demo',
    'DEMOS',
    'run_factory_method_demo',
    'run_bridge_demo',
    'run_template_method_demo',
    'run_all',
    'capture'
]
