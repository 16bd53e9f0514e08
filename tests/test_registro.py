from typing import Any, Dict, List, Optional, Tuple

import pytest

from orcamentos.exceptions import RegistroNaoPermitidoError
from orcamentos.patterns import HttpAdapter, RegistroOrcamento

from .conftest import novo_orcamento

URL = "http://api.registrar/orcamentos"


class HttpAdapterFalso(HttpAdapter):
    def __init__(self):
        self.requisicoes: List[Tuple[str, Optional[Dict[str, Any]]]] = []

    def post(self, url: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.requisicoes.append((url, data))


def test_registra_orcamento_finalizado():
    http = HttpAdapterFalso()
    orcamento = novo_orcamento(300, 200)
    orcamento.aprova()
    orcamento.finaliza()

    RegistroOrcamento(http, URL).registra(orcamento)

    assert http.requisicoes == [(URL, {"valor": 500, "quantidade_itens": 2})]


@pytest.mark.parametrize("passos", [[], ["aprova"], ["reprova"]])
def test_recusa_orcamento_nao_finalizado(passos):
    http = HttpAdapterFalso()
    orcamento = novo_orcamento(300)
    for passo in passos:
        getattr(orcamento, passo)()

    with pytest.raises(RegistroNaoPermitidoError) as excinfo:
        RegistroOrcamento(http, URL).registra(orcamento)

    assert excinfo.value.estado == str(orcamento.estado_atual)
    assert http.requisicoes == []


def test_url_padrao_vem_da_configuracao(monkeypatch):
    monkeypatch.setenv("ORCAMENTO_API_URL", "http://outra.api/registros")
    http = HttpAdapterFalso()
    orcamento = novo_orcamento(10)
    orcamento.reprova()
    orcamento.finaliza()

    RegistroOrcamento(http).registra(orcamento)

    assert http.requisicoes[0][0] == "http://outra.api/registros"
