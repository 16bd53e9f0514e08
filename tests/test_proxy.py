import threading
import time

import pytest

from orcamentos.patterns import CacheOrcamentoProxy, ItemOrcamento, Orcamento, OrcamentoLento, Orcavel

from .conftest import OrcamentoContado


def test_primeira_leitura_igual_ao_orcamento(orcamento_exemplo):
    proxy = CacheOrcamentoProxy(orcamento_exemplo)
    assert not proxy.em_cache
    assert proxy.valor() == orcamento_exemplo.valor() == 1100
    assert proxy.em_cache


def test_calcula_uma_unica_vez(orcamento_exemplo):
    contado = OrcamentoContado(orcamento_exemplo)
    proxy = CacheOrcamentoProxy(contado)

    valores = [proxy.valor() for _ in range(6)]

    assert valores == [1100] * 6
    assert contado.chamadas == 1


def test_orcamento_vazio_tambem_fica_em_cache():
    contado = OrcamentoContado(Orcamento())
    proxy = CacheOrcamentoProxy(contado)
    assert proxy.valor() == 0
    assert proxy.valor() == 0
    assert contado.chamadas == 1


def test_cache_nao_e_invalidado_apos_mutacao(orcamento_exemplo):
    proxy = CacheOrcamentoProxy(orcamento_exemplo)
    assert proxy.valor() == 1100

    orcamento_exemplo.add_item(ItemOrcamento(900))

    assert orcamento_exemplo.valor() == 2000
    assert proxy.valor() == 1100


def test_proxy_e_intercambiavel_com_orcamento(orcamento_exemplo):
    externo = Orcamento()
    externo.add_item(CacheOrcamentoProxy(orcamento_exemplo))
    externo.add_item(ItemOrcamento(100))
    assert externo.valor() == 1200


def test_leituras_concorrentes_calculam_uma_vez(orcamento_exemplo):
    contado = OrcamentoContado(OrcamentoLento(orcamento_exemplo, 0.05))
    proxy = CacheOrcamentoProxy(contado)
    barreira = threading.Barrier(8)
    resultados = []

    def ler():
        barreira.wait()
        resultados.append(proxy.valor())

    threads = [threading.Thread(target=ler) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert resultados == [1100] * 8
    assert contado.chamadas == 1


class OrcamentoInstavel(Orcavel):
    def __init__(self):
        self.chamadas = 0

    def valor(self) -> float:
        self.chamadas += 1
        if self.chamadas == 1:
            raise RuntimeError("falha temporária")
        return 42


def test_falha_no_calculo_nao_preenche_cache():
    instavel = OrcamentoInstavel()
    proxy = CacheOrcamentoProxy(instavel)

    with pytest.raises(RuntimeError):
        proxy.valor()
    assert not proxy.em_cache

    assert proxy.valor() == 42
    assert proxy.valor() == 42
    assert instavel.chamadas == 2


def test_orcamento_lento_atrasa_apenas_a_primeira_leitura(orcamento_exemplo):
    proxy = CacheOrcamentoProxy(OrcamentoLento(orcamento_exemplo, 0.2))

    inicio = time.perf_counter()
    proxy.valor()
    primeira = time.perf_counter() - inicio

    inicio = time.perf_counter()
    proxy.valor()
    segunda = time.perf_counter() - inicio

    assert primeira >= 0.19
    assert segunda < 0.1
