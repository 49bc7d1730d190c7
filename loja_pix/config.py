import os


# Dados PIX da loja (chave, nome e cidade do recebedor)
PIX_CHAVE = os.getenv('PIX_CHAVE', '')
LOJA_NOME = os.getenv('LOJA_NOME', 'ADC Móveis')
LOJA_CIDADE = os.getenv('LOJA_CIDADE', 'São Paulo')

# Logs
LOG_DIR = os.getenv('LOG_DIR', 'logs')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

# Flask-Limiter
RATELIMIT_DEFAULT = os.getenv('RATELIMIT_DEFAULT', '100 per hour')
RATELIMIT_ENABLED = os.getenv('RATELIMIT_ENABLED', '1') != '0'

# Imagem do QR Code
QR_CODE_BOX_SIZE = int(os.getenv('QR_CODE_BOX_SIZE', '8'))
QR_CODE_BORDER = int(os.getenv('QR_CODE_BORDER', '1'))

PORTA = int(os.getenv('PORTA', '5000'))
