from flask import Blueprint, current_app, jsonify
from loja_pix.pix import (gerar_payload_pix, normalizar_texto, normalizar_txid,
                          formatar_valor, MAX_NOME, MAX_CIDADE)
from loja_pix.qr_code import gerar_qr_code
from loja_pix.validation import (DadosInvalidos, validar_json, validar_valor,
                                 validar_chave, validar_texto, validar_parcela)
from loja_pix.log import configurar_logging
from loja_pix.limiter import limiter, LIMITE_COBRANCAS
import logging


configurar_logging()
logger = logging.getLogger(__name__)


pix_bp = Blueprint('pix', __name__)


def _dados_loja():
    return {
        'chave': current_app.config.get('PIX_CHAVE', '').strip(),
        'nome': current_app.config.get('LOJA_NOME', '').strip(),
        'cidade': current_app.config.get('LOJA_CIDADE', '').strip()
    }


def txid_pedido(pedido_id, parcela=None):
    if parcela is None:
        return str(pedido_id)
    return f'{pedido_id}-{parcela}'


def _emitir_cobranca(chave, nome, cidade, txid, valor):
    validar_chave(chave)

    if not nome:
        logger.warning('Cobrança PIX sem nome do recebedor.')
        raise DadosInvalidos('Nome do recebedor é obrigatório!', 422)

    payload = gerar_payload_pix(chave, nome, cidade, txid, valor)
    qr_code = gerar_qr_code(payload)

    logger.info(f'Cobrança PIX gerada txid={normalizar_txid(txid)} '
                f'valor={formatar_valor(valor)}.')
    return jsonify({
        'payload': payload,
        'qr_code': qr_code,
        'txid': normalizar_txid(txid),
        'valor': formatar_valor(valor)
    }), 201


@pix_bp.route('/loja', methods=['GET'])
def buscar_dados_loja():
    logger.info('Buscando dados PIX da loja...')
    loja = _dados_loja()

    if not loja['chave']:
        logger.warning('Chave PIX da loja não configurada.')
        return jsonify({'erro': 'Chave PIX da loja não configurada!'}), 503

    return jsonify({
        'chave': loja['chave'],
        'nome': normalizar_texto(loja['nome'], MAX_NOME),
        'cidade': normalizar_texto(loja['cidade'], MAX_CIDADE)
    }), 200


@pix_bp.route('/cobrancas', methods=['POST'])
@limiter.limit(LIMITE_COBRANCAS)
def gerar_cobranca():
    logger.info('Gerando cobrança PIX...')

    dados = validar_json()
    loja = _dados_loja()

    valor = validar_valor(dados.get('valor'))
    txid = validar_texto(dados, 'txid')
    chave = validar_texto(dados, 'chave', loja['chave'])
    nome = validar_texto(dados, 'nome', loja['nome'])
    cidade = validar_texto(dados, 'cidade', loja['cidade'])

    return _emitir_cobranca(chave, nome, cidade, txid, valor)


@pix_bp.route('/pedidos/<pedido_id>', methods=['POST'])
@limiter.limit(LIMITE_COBRANCAS)
def gerar_cobranca_pedido(pedido_id):
    logger.info(f'Gerando cobrança PIX do pedido id={pedido_id}...')

    dados = validar_json()
    loja = _dados_loja()

    valor = validar_valor(dados.get('valor'))
    parcela = validar_parcela(dados.get('parcela'))

    return _emitir_cobranca(loja['chave'], loja['nome'], loja['cidade'],
                            txid_pedido(pedido_id, parcela), valor)
