"""
Controller para demonstração dos padrões (padrão MVC)
Preparo de Bebidas - Padrões GoF
"""
import logging
from typing import Iterable, List, Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from patterns.bridge import INGREDIENTS, REFINED_BEVERAGES, make_refined_beverage
from patterns.demos import DEMOS, capture, run_all
from patterns.factory import MenuFactory
from patterns.template_method import PREPARATIONS

logger = logging.getLogger(__name__)


class DemoInfo(BaseModel):
    """Schema de uma demonstração disponível"""
    slug: str
    titulo: str
    descricao: str


class DemoResponse(BaseModel):
    """Schema com as linhas produzidas por uma demonstração"""
    padrao: str
    saida: List[str]

    class Config:
        json_schema_extra = {
            "example": {
                "padrao": "Bridge",
                "saida": ["Preparing a refined coffee.", "Adding milk."]
            }
        }


def _not_found(what: str, kind: str, available: Iterable[str]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{what} '{kind}' não encontrado. Disponíveis: {', '.join(available)}"
    )


class DemoController:
    """Controller para as demonstrações de Factory Method, Bridge e Template Method"""

    def __init__(self):
        self.router = APIRouter(prefix="/demo", tags=["Demonstrações"])
        self.menu_factory = MenuFactory()

        self._setup_routes()

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.get("/", response_model=List[DemoInfo])
        async def listar_demonstracoes():
            """Lista as demonstrações disponíveis"""
            return [
                DemoInfo(slug=demo.slug, titulo=demo.title, descricao=demo.description)
                for demo in DEMOS.values()
            ]

        @self.router.get("/all", response_model=DemoResponse)
        async def executar_todas():
            """Saída completa do programa, com cabeçalhos"""
            return DemoResponse(padrao="Todos", saida=capture(run_all))

        @self.router.get("/factory-method", response_model=DemoResponse)
        async def demo_factory_method(
            beverage: Optional[str] = Query(None, description="Tipo de bebida: coffee, tea")
        ):
            """Demonstração do padrão Factory Method"""
            if beverage is None:
                return self._run_demo("factory-method")

            bebida = self.menu_factory.create_beverage(beverage)
            if bebida is None:
                raise _not_found("Bebida", beverage, self.menu_factory.available_kinds())
            return DemoResponse(padrao="Factory Method", saida=capture(bebida.prepare))

        @self.router.get("/bridge", response_model=DemoResponse)
        async def demo_bridge(
            beverage: Optional[str] = Query(None, description="Bebida refinada: coffee, tea"),
            ingredient: Optional[str] = Query(None, description="Ingrediente: milk, sugar")
        ):
            """Demonstração do padrão Bridge com qualquer combinação"""
            if beverage is None and ingredient is None:
                return self._run_demo("bridge")
            if beverage is None or ingredient is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Informe 'beverage' e 'ingredient' juntos"
                )

            refinada = make_refined_beverage(beverage, ingredient)
            if refinada is None:
                if beverage.lower() not in REFINED_BEVERAGES:
                    raise _not_found("Bebida", beverage, REFINED_BEVERAGES)
                raise _not_found("Ingrediente", ingredient, INGREDIENTS)
            return DemoResponse(padrao="Bridge", saida=capture(refinada.prepare))

        @self.router.get("/template-method", response_model=DemoResponse)
        async def demo_template_method(
            beverage: Optional[str] = Query(None, description="Preparo: coffee, tea")
        ):
            """Demonstração do padrão Template Method"""
            if beverage is None:
                return self._run_demo("template-method")

            preparation_class = PREPARATIONS.get(beverage.lower())
            if preparation_class is None:
                raise _not_found("Preparo", beverage, PREPARATIONS)
            return DemoResponse(
                padrao="Template Method",
                saida=capture(preparation_class().prepare)
            )

    def _run_demo(self, slug: str) -> DemoResponse:
        demo = DEMOS[slug]
        logger.debug("Serving demo %s", slug)
        return DemoResponse(padrao=demo.title, saida=capture(demo.run))
