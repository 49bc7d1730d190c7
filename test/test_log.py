from loja_pix.log import configurar_logging
import logging
import logging.handlers


def test_configurar_logging_nao_duplica_handlers():
    configurar_logging()
    total = len(logging.getLogger().handlers)

    configurar_logging()
    configurar_logging()

    assert len(logging.getLogger().handlers) == total


def test_configurar_logging_grava_em_arquivo():
    logger = configurar_logging()

    arquivos = [h for h in logger.handlers
                if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(arquivos) == 1
    assert arquivos[0].baseFilename.endswith('app.log')
