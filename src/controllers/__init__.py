"""
Controllers do padrão MVC para as demonstrações de bebidas
"""

from .demo_controller import DemoController

__all__ = [
    'DemoController'
]
