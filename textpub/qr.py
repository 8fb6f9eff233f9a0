"""QR code rendering for page links."""

import base64
import io

import qrcode


def qr_png_bytes(data: str, box_size: int = 10, border: int = 4) -> bytes:
    """Render ``data`` as a QR code PNG.

    Args:
        data: Payload to encode (the page URL)
        box_size: Pixels per module
        border: Quiet zone width in modules

    Returns:
        PNG image bytes
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def qr_data_url(data: str, box_size: int = 10, border: int = 4) -> str:
    """Render ``data`` as a QR code and return it as an inline ``data:`` URL."""
    png = qr_png_bytes(data, box_size=box_size, border=border)
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
