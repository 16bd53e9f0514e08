import pytest

from orcamentos.database import EstadoOrcamentoEnum, OrcamentoRepository, run_seeds
from orcamentos.exceptions import OrcamentoCiclicoError, SubOrcamentoVinculadoError
from orcamentos.patterns import Aprovado


def test_seeds_criam_cenario_de_exemplo(db):
    orcamento = run_seeds(db)
    repo = OrcamentoRepository(db)

    arvore = repo.carregar_arvore(repo.get_by_id(orcamento.id))

    assert arvore.valor() == 1100
    assert arvore.quantidade_itens == 4
    assert run_seeds(db) is None


def test_carregar_arvore_preserva_ordem(db):
    repo = OrcamentoRepository(db)
    raiz = repo.create_orcamento("raiz")
    repo.add_item(raiz, 1)
    sub = repo.create_orcamento("sub")
    repo.add_item(sub, 2)
    repo.add_sub_orcamento(raiz, sub)
    repo.add_item(raiz, 3)

    arvore = repo.carregar_arvore(repo.get_by_id(raiz.id))

    assert [entrada.valor() for entrada in arvore.itens] == [1, 2, 3]


def test_estado_e_desconto_persistidos(db):
    repo = OrcamentoRepository(db)
    orcamento = repo.create_orcamento()
    repo.update_estado(orcamento.id, EstadoOrcamentoEnum.APROVADO)
    repo.update_desconto_extra(orcamento.id, 12.5)

    arvore = repo.carregar_arvore(repo.get_by_id(orcamento.id))

    assert isinstance(arvore.estado_atual, Aprovado)
    assert arvore.desconto_extra == 12.5


def test_vinculo_ciclico_e_recusado(db):
    repo = OrcamentoRepository(db)
    avo = repo.create_orcamento()
    pai = repo.create_orcamento()
    filho = repo.create_orcamento()
    repo.add_sub_orcamento(avo, pai)
    repo.add_sub_orcamento(pai, filho)

    with pytest.raises(OrcamentoCiclicoError):
        repo.add_sub_orcamento(filho, avo)
    with pytest.raises(OrcamentoCiclicoError):
        repo.add_sub_orcamento(avo, avo)

    assert repo.get_by_id(avo.id).parent_id is None


def test_sub_orcamento_com_pai_nao_e_movido(db):
    repo = OrcamentoRepository(db)
    primeiro = repo.create_orcamento()
    segundo = repo.create_orcamento()
    sub = repo.create_orcamento()
    repo.add_sub_orcamento(primeiro, sub)

    with pytest.raises(SubOrcamentoVinculadoError):
        repo.add_sub_orcamento(segundo, sub)


def test_listar_raizes(db):
    repo = OrcamentoRepository(db)
    raiz = repo.create_orcamento()
    sub = repo.create_orcamento()
    repo.add_sub_orcamento(raiz, sub)

    assert [o.id for o in repo.listar_raizes()] == [raiz.id]
