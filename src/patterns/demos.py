"""
Demonstrações dos padrões, executadas em ordem fixa
"""
import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO

from .bridge import Milk, RefinedCoffee, RefinedTea, Sugar
from .factory import BeverageFactory, CoffeeFactory, TeaFactory
from .template_method import BeveragePreparation, CoffeePreparation, TeaPreparation

logger = logging.getLogger(__name__)


def run_factory_method_demo(out: Optional[TextIO] = None) -> None:
    factories: List[BeverageFactory] = [CoffeeFactory(), TeaFactory()]
    for factory in factories:
        beverage = factory.create_beverage()
        beverage.prepare(out)


def run_bridge_demo(out: Optional[TextIO] = None) -> None:
    milk = Milk()
    sugar = Sugar()

    RefinedCoffee(milk).prepare(out)
    RefinedTea(sugar).prepare(out)


def run_template_method_demo(out: Optional[TextIO] = None) -> None:
    preparations: List[BeveragePreparation] = [CoffeePreparation(), TeaPreparation()]
    for preparation in preparations:
        preparation.prepare(out)


@dataclass(frozen=True)
class Demo:
    slug: str
    title: str
    description: str
    run: Callable[[Optional[TextIO]], None]


DEMOS: Dict[str, Demo] = {
    "factory-method": Demo(
        slug="factory-method",
        title="Factory Method",
        description="Criação de bebidas sem nomear a classe concreta",
        run=run_factory_method_demo
    ),
    "bridge": Demo(
        slug="bridge",
        title="Bridge",
        description="Bebidas refinadas e ingredientes variam de forma independente",
        run=run_bridge_demo
    ),
    "template-method": Demo(
        slug="template-method",
        title="Template Method",
        description="Roteiro fixo de preparo com passos definidos pelas subclasses",
        run=run_template_method_demo
    ),
}


def run_all(out: Optional[TextIO] = None) -> None:
    """Executa as três demonstrações com seus cabeçalhos numerados"""
    for number, demo in enumerate(DEMOS.values(), start=1):
        logger.debug("Running demo %s", demo.slug)
        prefix = "\n" if number > 1 else ""
        print(f"{prefix}{number}. {demo.title}", file=out)
        demo.run(out)


def capture(func: Callable[..., None], *args) -> List[str]:
    """Executa `func(*args, out=buffer)` e devolve as linhas escritas"""
    buffer = io.StringIO()
    func(*args, out=buffer)
    return buffer.getvalue().splitlines()
