#!/usr/bin/env python3
"""
Script para inicializar o banco de dados
Cria as tabelas, executa as seeds e demonstra o Proxy de cache
"""
import time

from sqlalchemy import inspect

from orcamentos.config import carregar_configuracoes
from orcamentos.database import OrcamentoModel, OrcamentoRepository, init_db, run_seeds
from orcamentos.database.config import DATABASE_URL, SessionLocal, engine
from orcamentos.patterns import CacheOrcamentoProxy, OrcamentoLento


def check_tables_exist():
    """Verifica se as tabelas existem no banco"""
    return inspect(engine).has_table("orcamentos")


def get_database_info():
    """Obtém tabelas e contagem de orçamentos"""
    tables = sorted(inspect(engine).get_table_names())
    with SessionLocal() as db:
        total = db.query(OrcamentoModel).count()
    return tables, total


def demonstrar_proxy(orcamento_id: int, atraso: float):
    """Lê o valor do orçamento várias vezes através do Proxy de cache"""
    with SessionLocal() as db:
        repo = OrcamentoRepository(db)
        arvore = repo.carregar_arvore(repo.get_by_id(orcamento_id))

    proxy = CacheOrcamentoProxy(OrcamentoLento(arvore, atraso))
    for leitura in range(1, 7):
        inicio = time.perf_counter()
        valor = proxy.valor()
        print(f"   Leitura {leitura}: {valor:.2f} ({time.perf_counter() - inicio:.3f}s)")


def main():
    """Função principal"""
    print("🧾 Inicializador do Banco de Dados - Sistema de Orçamentos")
    print("=" * 60)
    print(f"📁 Banco: {DATABASE_URL}")

    tables_exist = check_tables_exist()
    print(f"📋 Tabelas criadas: {'✅ Sim' if tables_exist else '❌ Não'}")

    if not tables_exist:
        print("\n🔧 Iniciando configuração do banco de dados...")
        print("📊 Criando tabelas...")
        init_db()
        print("✅ Tabelas criadas com sucesso!")

    print("🌱 Executando seeds (dados iniciais)...")
    run_seeds()

    tables, total = get_database_info()
    print(f"\n📋 Tabelas ({len(tables)}): {', '.join(tables)}")
    print(f"📈 Orçamentos cadastrados: {total}")

    with SessionLocal() as db:
        raizes = OrcamentoRepository(db).listar_raizes(limit=1)
        orcamento_id = raizes[0].id if raizes else None

    if orcamento_id is not None:
        atraso = carregar_configuracoes().atraso_calculo
        print(f"\n🪞 Proxy de cache (atraso simulado: {atraso}s):")
        demonstrar_proxy(orcamento_id, atraso)

    print("\n🎉 Sistema pronto para uso!")
    print("🚀 Execute: python main.py para iniciar o servidor")
    return 0


if __name__ == "__main__":
    exit(main())
