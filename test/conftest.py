import pytest
from loja_pix import create_app


@pytest.fixture(scope='session')
def app():
    app = create_app({
        'TESTING': True,
        'RATELIMIT_ENABLED': False,
        'PIX_CHAVE': '11144477735',
        'LOJA_NOME': 'Loja Teste',
        'LOJA_CIDADE': 'Sao Paulo'
    })
    return app


@pytest.fixture
def client(app):
    with app.app_context():
        with app.test_client() as client:
            yield client


@pytest.fixture
def sem_chave(app, monkeypatch):
    monkeypatch.setitem(app.config, 'PIX_CHAVE', '')
