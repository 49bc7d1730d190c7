from logging.handlers import RotatingFileHandler
from loja_pix import config
import os
import logging


def configurar_logging(log_dir=None, nivel=None):
    logger = logging.getLogger()

    if getattr(logger, '_loja_pix_configurado', False):
        return logger

    log_dir = log_dir or config.LOG_DIR
    nivel = nivel or config.LOG_LEVEL

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logger.setLevel(nivel)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, 'app.log'),
        maxBytes=2000000,
        backupCount=5,
        encoding='utf-8'
    )

    file_handler.setLevel(nivel)
    file_handler.setFormatter(logging.Formatter(
        '[%(asctime)s] [%(levelname)s] - [%(message)s]'
    ))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter(
        '%(levelname)s: %(message)s'
    ))

    logger.addHandler(file_handler)
    logger.addHandler(console)

    logger._loja_pix_configurado = True
    return logger
