"""PIX QR code rendering."""

import base64
from io import BytesIO

import qrcode


def generate_qr_data_uri(payload):
    """
    Render a PIX copy-paste code as a PNG data URI.

    The front end drops the result straight into an ``<img src>``.
    Error correction level M (15% recovery) keeps the code small enough
    for phone cameras.
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
    return f"data:image/png;base64,{encoded}"
