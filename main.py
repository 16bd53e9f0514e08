"""
Aplicação principal do Sistema de Orçamentos
"""
import uvicorn  # type: ignore

from orcamentos.app import create_app
from orcamentos.database import init_db

app = create_app()


@app.on_event("startup")
async def startup_event():
    """Inicialização da aplicação"""
    print("🚀 Iniciando Sistema de Orçamentos...")
    print("📊 Inicializando banco de dados...")

    init_db()

    print("✅ Banco de dados inicializado!")
    print("📚 Documentação disponível em: http://localhost:8000/docs")


if __name__ == "__main__":
    print("🧾 Iniciando Sistema de Orçamentos...")
    print("📖 Acesse http://localhost:8000/docs para documentação")

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
