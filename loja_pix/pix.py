'''
Geração do payload PIX estático "Copia e Cola" (BR Code),
padrão EMV QRCPS-MPM adotado pelo BACEN.
'''
from decimal import Decimal, Context, ROUND_HALF_UP
import unicodedata
import logging
import re
import crcmod


logger = logging.getLogger(__name__)


GUI_PIX = 'br.gov.bcb.pix'
TXID_PADRAO = '***'

MAX_NOME = 25
MAX_CIDADE = 15
MAX_TXID = 25
MAX_CAMPO = 99

CENTAVOS = Decimal('0.01')

_MARCAS_DIACRITICAS = re.compile('[\u0300-\u036f]')
_NAO_ALFANUMERICO = re.compile(r'[^a-zA-Z0-9]')

# CRC-16/CCITT-FALSE
_crc16_ccitt = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF,
                               rev=False, xorOut=0x0000)


class PixPayloadError(ValueError):
    pass


def emv(id_: str, valor: str) -> str:
    if len(valor) > MAX_CAMPO:
        logger.warning(
            f'Campo {id_} com {len(valor)} caracteres excede o limite EMV.')

    tamanho = f"{len(valor):02d}"
    return f"{id_}{tamanho}{valor}"


def crc16(payload: str) -> str:
    # Cada caractere entra no registrador como um único byte.
    dados = bytes(ord(c) & 0xFF for c in payload)
    return f"{_crc16_ccitt(dados):04X}"


def normalizar_texto(texto: str, limite: int) -> str:
    '''
    Trunca antes de remover acentos: um texto já decomposto (NFD)
    pode ficar menor que o limite depois que as marcas caem.
    '''
    truncado = unicodedata.normalize('NFD', texto[:limite])
    return _MARCAS_DIACRITICAS.sub('', truncado).upper()


def normalizar_txid(txid: str) -> str:
    return _NAO_ALFANUMERICO.sub('', txid)[:MAX_TXID] or TXID_PADRAO


def formatar_valor(valor) -> str:
    if isinstance(valor, bool) or not isinstance(valor, (int, float, Decimal)):
        raise TypeError(f'Valor da transação deve ser numérico: {valor!r}')

    decimal = Decimal(valor)
    if decimal.is_nan():
        return 'NaN'

    if decimal.is_infinite():
        return '-Infinity' if decimal.is_signed() else 'Infinity'

    # -0 sai sem sinal; só negativos arredondados a zero mantêm o "-"
    if decimal.is_zero():
        return '0.00'

    arredondado = decimal.quantize(CENTAVOS, rounding=ROUND_HALF_UP,
                                   context=Context(prec=400))
    return f"{arredondado:f}"


def gerar_payload_pix(
        chave: str,
        nome: str,
        cidade: str,
        txid: str,
        valor
) -> str:
    '''
    Gera payload PIX Cópia e Cola conforme padrão BACEN (EMV-Co).

    A chave é usada como veio; nome, cidade e txid são normalizados.
    O valor é escrito com duas casas decimais, sem validação de sinal.
    '''
    payload = (
        emv("00", "01") +
        emv(
            "26",
            emv("00", GUI_PIX) +
            emv("01", chave)
        ) +
        emv("52", "0000") +
        emv("53", "986") +
        emv("54", formatar_valor(valor)) +
        emv("58", "BR") +
        emv("59", normalizar_texto(nome, MAX_NOME)) +
        emv("60", normalizar_texto(cidade, MAX_CIDADE)) +
        emv("62", emv("05", normalizar_txid(txid)))
    )

    payload_crc = payload + "6304"

    if not payload_crc.isascii():
        raise PixPayloadError(
            'Payload PIX contém caracteres fora do ASCII.')

    return payload_crc + crc16(payload_crc)
