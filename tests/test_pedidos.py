import json
from datetime import datetime

import pytest

from orcamentos.patterns import (
    ArquivoExportado, ConteudoExportado, CriadorDePedido, OrcamentoExportado, PedidoExportado
)


class RelogioFixo:
    def __init__(self, agora: datetime):
        self.agora = agora

    def __call__(self) -> datetime:
        return self.agora


def test_pedidos_do_mesmo_cliente_e_dia_compartilham_dados():
    relogio = RelogioFixo(datetime(2024, 5, 10, 9, 0))
    criador = CriadorDePedido(relogio)

    pedidos = [criador.cria_pedido("Maria", 500, 2) for _ in range(1000)]

    assert all(p.dados is pedidos[0].dados for p in pedidos)
    assert criador.quantidade_dados_em_cache == 1
    assert len({id(p.orcamento) for p in pedidos}) == 1000


def test_clientes_e_dias_diferentes_geram_novos_dados():
    relogio = RelogioFixo(datetime(2024, 5, 10, 9, 0))
    criador = CriadorDePedido(relogio)

    maria = criador.cria_pedido("Maria", 100, 1)
    joao = criador.cria_pedido("João", 100, 1)
    relogio.agora = datetime(2024, 5, 11, 9, 0)
    maria_amanha = criador.cria_pedido("Maria", 100, 1)

    assert maria.dados is not joao.dados
    assert maria.dados is not maria_amanha.dados
    assert criador.quantidade_dados_em_cache == 3


def test_orcamento_do_pedido():
    pedido = CriadorDePedido().cria_pedido("Maria", 500, 4)
    assert pedido.orcamento.quantidade_itens == 4
    assert pedido.orcamento.valor() == pytest.approx(500)

    vazio = CriadorDePedido().cria_pedido("Maria", 500, 0)
    assert vazio.orcamento.valor() == 0


def test_pedido_exportado():
    relogio = RelogioFixo(datetime(2024, 5, 10, 18, 30))
    pedido = CriadorDePedido(relogio).cria_pedido("Teste", 500, 1)

    assert PedidoExportado(pedido).conteudo() == {
        "data_finalizacao": "10/05/2024",
        "nome_cliente": "Teste",
    }


def test_orcamento_exportado(orcamento_exemplo):
    assert OrcamentoExportado(orcamento_exemplo).conteudo() == {
        "valor": 1100,
        "quantidade_itens": 4,
    }


class ArquivoJsonEmMemoria(ArquivoExportado):
    def __init__(self, nome: str):
        self.nome = nome
        self.arquivos = {}

    def salvar(self, conteudo_exportado: ConteudoExportado) -> str:
        nome_arquivo = f"{self.nome}.json"
        self.arquivos[nome_arquivo] = json.dumps(conteudo_exportado.conteudo())
        return nome_arquivo


def test_exportadores_recebem_qualquer_conteudo(orcamento_exemplo):
    relogio = RelogioFixo(datetime(2024, 5, 10, 18, 30))
    pedido = CriadorDePedido(relogio).cria_pedido("Teste", 500, 1)
    arquivo = ArquivoJsonEmMemoria("relatorio")

    assert arquivo.salvar(OrcamentoExportado(orcamento_exemplo)) == "relatorio.json"
    assert json.loads(arquivo.arquivos["relatorio.json"])["valor"] == 1100

    arquivo.salvar(PedidoExportado(pedido))
    assert json.loads(arquivo.arquivos["relatorio.json"])["nome_cliente"] == "Teste"
