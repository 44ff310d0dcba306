"""
Aplicação principal das demonstrações de bebidas
Factory Method, Bridge e Template Method
"""
import argparse
import sys
from typing import List, Optional

import uvicorn  # type: ignore
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from controllers.demo_controller import DemoController
from core.config import get_settings
from core.logging import create_logger
from patterns.demos import DEMOS, run_all


def create_app() -> FastAPI:
    """Monta a aplicação FastAPI com as rotas de demonstração"""
    app = FastAPI(
        title="Preparo de Bebidas - Padrões GoF",
        description="""
        Demonstrações de padrões GoF com o preparo de bebidas:

        - 🏭 Factory Method: criação de bebidas sem nomear a classe concreta
        - 🌉 Bridge: bebidas refinadas e ingredientes variam de forma independente
        - 📋 Template Method: roteiro fixo de preparo com passos nas subclasses
        """,
        version="1.0.0"
    )

    # Configuração CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    demo_controller = DemoController()
    app.include_router(demo_controller.router)

    @app.get("/")
    async def root():
        """Endpoint raiz com informações do sistema"""
        return {
            "message": "☕ Preparo de Bebidas - Padrões GoF",
            "version": "1.0.0",
            "padroes_implementados": {
                demo.slug: demo.description for demo in DEMOS.values()
            },
            "endpoints": {
                "documentacao": "/docs",
                "demonstracoes": "/demo/*",
            }
        }

    @app.get("/health")
    async def health_check():
        """Verifica saúde da aplicação"""
        return {
            "status": "healthy",
            "patterns": "implemented"
        }

    return app


app = create_app()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Demonstrações de Factory Method, Bridge e Template Method.")
    parser.add_argument("--demo", choices=list(DEMOS), help="Executa apenas uma demonstração.")
    parser.add_argument("--serve", action="store_true", help="Sobe a API HTTP em vez de imprimir as demonstrações.")
    parser.add_argument("--host", type=str, default=None, help="Endereço do servidor HTTP (padrão: APP_HOST).")
    parser.add_argument("--port", type=int, default=None, help="Porta do servidor HTTP (padrão: APP_PORT).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    create_logger("patterns", settings.log_level)
    create_logger("controllers", settings.log_level)

    if args.serve:
        host = args.host or settings.host
        port = args.port or settings.port
        print(f"📖 Documentação em http://{host}:{port}/docs")
        uvicorn.run(
            "main:app",
            host=host,
            port=port,
            reload=settings.reload,
            log_level=settings.log_level.lower()
        )
        return 0

    if args.demo:
        DEMOS[args.demo].run()
    else:
        run_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())
