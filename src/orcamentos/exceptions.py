"""
Hierarquia de exceções do sistema de orçamentos

    OrcamentoError
    +-- OrcamentoCiclicoError
    +-- TransicaoInvalidaError
    +-- RegistroNaoPermitidoError
    +-- OrcamentoNaoEncontradoError
    +-- SubOrcamentoVinculadoError
"""


class OrcamentoError(Exception):
    """Erro base; `code` é estável e pode ser exposto na API"""

    code: str = "ORCAMENTO_ERRO"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class OrcamentoCiclicoError(OrcamentoError):
    """Um orçamento passaria a conter a si mesmo"""

    code = "ORCAMENTO_CICLICO"

    def __init__(self, message: str = "Orçamento não pode conter a si mesmo"):
        super().__init__(message)


class TransicaoInvalidaError(OrcamentoError):
    """Ação não permitida no estado atual do orçamento"""

    code = "TRANSICAO_INVALIDA"

    def __init__(self, estado: str, acao: str):
        self.estado = estado
        self.acao = acao
        super().__init__(f"Orçamento '{estado}' não permite a ação '{acao}'")


class RegistroNaoPermitidoError(OrcamentoError):
    code = "REGISTRO_NAO_PERMITIDO"

    def __init__(self, estado: str):
        self.estado = estado
        super().__init__(
            f"Orçamentos não finalizados não podem ser registrados (estado atual: '{estado}')"
        )


class OrcamentoNaoEncontradoError(OrcamentoError):
    code = "ORCAMENTO_NAO_ENCONTRADO"

    def __init__(self, orcamento_id: int):
        self.orcamento_id = orcamento_id
        super().__init__(f"Orçamento {orcamento_id} não encontrado")


class SubOrcamentoVinculadoError(OrcamentoError):
    """O orçamento já pertence a outro orçamento"""

    code = "SUB_ORCAMENTO_VINCULADO"

    def __init__(self, orcamento_id: int, parent_id: int):
        self.orcamento_id = orcamento_id
        self.parent_id = parent_id
        super().__init__(f"Orçamento {orcamento_id} já está vinculado ao orçamento {parent_id}")
