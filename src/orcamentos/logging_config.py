"""
Configuração de logging da aplicação
"""
import logging

FORMATO = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configurado = False


def configurar_logging(nivel: str = "INFO") -> None:
    """Instala um único handler de console no logger do pacote"""
    global _configurado
    logger = logging.getLogger("orcamentos")
    logger.setLevel(nivel)
    if _configurado:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(FORMATO))
    logger.addHandler(handler)
    _configurado = True
