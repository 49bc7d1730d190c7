from flask import request
from loja_pix.log import configurar_logging
from werkzeug.exceptions import BadRequest
from loja_pix.pix import formatar_valor, GUI_PIX, MAX_CAMPO
from decimal import Decimal
import logging
import math


configurar_logging()
logger = logging.getLogger(__name__)


# 14 do GUI e 8 dos dois cabeçalhos ID+tamanho dentro do campo 26
MAX_CHAVE = MAX_CAMPO - len(GUI_PIX) - 8
MAX_VALOR = 13


class DadosInvalidos(Exception):
    def __init__(self, mensagem, status=400):
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.status = status


def validar_json():
    if not request.is_json:
        logger.warning('Requisição deve ser Content_type: application/json.')
        raise DadosInvalidos(
            'Requisição deve ser Content-type: application/json!')

    try:
        dados = request.get_json()
    except BadRequest:
        logger.warning('JSON malformado! Dados inválidos no corpo da requisição.')
        raise DadosInvalidos('JSON malformado. Dados inválidos!')

    if not dados or not isinstance(dados, dict):
        logger.warning('Dados ausentes ou inválidos no corpo da requisição.')
        raise DadosInvalidos('Dados ausentes ou inválidos no corpo da requisição!')

    return dados


def validar_valor(valor):
    if isinstance(valor, bool) or not isinstance(valor, (int, float)):
        logger.warning(f'Valor inválido para cobrança PIX: {valor!r}')
        raise DadosInvalidos('Valor da cobrança deve ser numérico!')

    if not math.isfinite(valor) or valor <= 0:
        logger.warning(f'Valor fora do intervalo para cobrança PIX: {valor!r}')
        raise DadosInvalidos('Valor da cobrança deve ser maior que zero!')

    # str() evita carregar a representação binária do float para o payload
    decimal = Decimal(str(valor))

    if len(formatar_valor(decimal)) > MAX_VALOR:
        logger.warning(f'Valor excede o tamanho do campo EMV: {valor!r}')
        raise DadosInvalidos(
            f'Valor da cobrança deve ter no máximo {MAX_VALOR} caracteres!')

    return decimal


def validar_chave(chave):
    if not chave:
        logger.warning('Cobrança PIX sem chave configurada.')
        raise DadosInvalidos('Chave PIX não configurada!', 422)

    if len(chave) > MAX_CHAVE:
        logger.warning(f'Chave PIX com {len(chave)} caracteres excede o campo EMV.')
        raise DadosInvalidos(
            f'Chave PIX deve ter no máximo {MAX_CHAVE} caracteres!', 422)

    return chave


def validar_texto(dados, campo, padrao=''):
    valor = dados.get(campo)

    if valor is None:
        return padrao

    if not isinstance(valor, str):
        logger.warning(f'Valor inválido para {campo}: {valor!r}')
        raise DadosInvalidos(f'Valor inválido para {campo}!')

    return valor.strip() or padrao


def validar_parcela(parcela):
    if parcela is None:
        return None

    if isinstance(parcela, bool) or not isinstance(parcela, int) or parcela <= 0:
        logger.warning(f'Parcela inválida: {parcela!r}')
        raise DadosInvalidos('Parcela deve ser um inteiro positivo!')

    return parcela
