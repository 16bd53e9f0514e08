"""
Aplicação FastAPI do Sistema de Orçamentos
Implementa padrão MVC com padrões GoF
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import carregar_configuracoes
from .controllers import OrcamentoController
from .logging_config import configurar_logging
from .patterns.business_object import CacheDeProxies

DESCRICAO = """
Orçamentos compostos com valor em cache:

Padrões GoF Implementados:
- 🌳 Composite: Orçamentos com itens e sub-orçamentos
- 🪞 Proxy: Cache do valor total do orçamento
- 🎨 Decorator: Cálculo lento simulado
- 🔄 State: Aprovação do orçamento
- 💰 Strategy: Impostos (ICMS, ISS)
- 🪶 Flyweight: Dados compartilhados entre pedidos
- 🔌 Adapter: Registro via HTTP

Padrões Arquiteturais:
- 🗄️ DAO/Repository: Acesso a dados
- 💼 Business Object: Lógica de negócio
- 🖥️ MVC: Separação de responsabilidades
"""


def create_app() -> FastAPI:
    configuracoes = carregar_configuracoes()
    configurar_logging(configuracoes.log_level)

    app = FastAPI(
        title="Sistema de Orçamentos",
        description=DESCRICAO,
        version=__version__
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Um cache de proxies por aplicação
    app.state.proxies = CacheDeProxies()
    orcamento_controller = OrcamentoController(app.state.proxies)
    app.include_router(orcamento_controller.router)

    @app.get("/")
    async def root():
        """Endpoint raiz com informações do sistema"""
        return {
            "message": "🧾 Sistema de Orçamentos - Padrões GoF",
            "version": __version__,
            "padroes_implementados": {
                "composite": "✅ Orçamentos aninhados",
                "proxy": "✅ Cache do valor",
                "decorator": "✅ Cálculo lento",
                "state": "✅ Aprovação",
                "strategy": "✅ Impostos",
                "flyweight": "✅ Pedidos",
                "adapter": "✅ Registro HTTP",
                "dao": "✅ Acesso a dados",
                "business_object": "✅ Lógica de negócio",
                "mvc": "✅ Arquitetura MVC"
            },
            "endpoints": {
                "documentacao": "/docs",
                "orcamentos": "/orcamentos/*",
            }
        }

    @app.get("/health")
    async def health_check():
        """Verifica saúde da aplicação"""
        return {
            "status": "healthy",
            "proxies_em_memoria": len(app.state.proxies),
        }

    return app
