from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
from loja_pix.validation import DadosInvalidos
from loja_pix.pix import PixPayloadError
from loja_pix.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def register_erro_handlers(app):
    @app.errorhandler(DadosInvalidos)
    def dados_invalidos_handler(erro):
        logger.warning(f'Dados inválidos na rota {request.path}: {erro.mensagem}')
        return jsonify({'erro': erro.mensagem}), erro.status

    @app.errorhandler(PixPayloadError)
    def payload_pix_handler(erro):
        logger.warning(f'Payload PIX não pôde ser gerado: {str(erro)}')
        return jsonify({'erro': 'Dados da cobrança geram um payload PIX inválido!'}), 422

    @app.errorhandler(404)
    def rota_nao_encontrado(erro):
        logger.warning(f'Rota não encontrada: {str(erro)}')
        return jsonify({'erro': 'Rota não encontrada!'}), 404

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT excedido | IP={request.remote_addr} | rota={request.path}"
        )
        return jsonify({
            'erro': 'Muitas requisições. Tente novamente mais tarde.'
        }), 429

    @app.errorhandler(400)
    def dados_inválidos(erro):
        logger.warning(f'Dados inválidos na rota: {str(erro)}')
        return jsonify({'erro': 'Dados inválidos na rota!'}), 400

    @app.errorhandler(405)
    def metodo_errado(erro):
        logger.warning(f'Método HTTP não permitido nesta rota: {str(erro)}')
        return jsonify({'erro': 'Método HTTP não permitido nesta rota!'}), 405

    @app.errorhandler(Exception)
    def erro_interno(erro):
        logger.error(f'Erro inesperado ao acessar a rota: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao acessar a rota!'}), 500
