from flask import Flask
from loja_pix import config
from loja_pix.routes.pix import pix_bp
from loja_pix.error import register_erro_handlers
from loja_pix.limiter import limiter


def create_app(overrides=None):
    app = Flask('LOJA_PIX')

    app.config.from_object(config)
    if overrides:
        app.config.update(overrides)

    limiter.init_app(app)

    app.register_blueprint(pix_bp, url_prefix='/pix')

    register_erro_handlers(app)

    return app
