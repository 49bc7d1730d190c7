from loja_pix import config
import qrcode
import io
import base64


def gerar_qr_code(payload: str, box_size=None, border=None) -> str:
    '''
    Renderiza o payload PIX em PNG e devolve como data URL.
    '''
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size or config.QR_CODE_BOX_SIZE,
        border=config.QR_CODE_BORDER if border is None else border,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    img_base64 = base64.b64encode(buffer.getvalue()).decode()

    return f"data:image/png;base64,{img_base64}"
