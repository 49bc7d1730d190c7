from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from loja_pix import config


LIMITE_COBRANCAS = '30 per minute'


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[config.RATELIMIT_DEFAULT]
)
