# imgext/filetype.py

from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Tuple, Union

from .errors import ImageDetectionError, UnknownFormat
from .model import ImageFormat

# --- sniffers -------------------------------------------------------------------


def _is_png(head: bytes) -> bool:
    return head.startswith(b"\x89PNG\r\n\x1a\n")


def _is_jpeg(head: bytes) -> bool:
    return head.startswith(b"\xFF\xD8\xFF")


def _is_gif(head: bytes) -> bool:
    return head.startswith(b"GIF87a") or head.startswith(b"GIF89a")


def _is_webp(head: bytes) -> bool:
    return head[:4] == b"RIFF" and len(head) >= 12 and head[8:12] == b"WEBP"


def _is_tiff(head: bytes) -> bool:
    return head.startswith(b"II*\x00") or head.startswith(b"MM\x00*")


def _is_bmp(head: bytes) -> bool:
    return head.startswith(b"BM")


def _is_ico(head: bytes) -> bool:
    return head.startswith(b"\x00\x00\x01\x00")


def _is_pnm(head: bytes) -> bool:
    # P1..P3 ascii, P4..P6 binary, P7 PAM
    return len(head) >= 2 and head[:1] == b"P" and head[1:2] in b"1234567"


def _is_dds(head: bytes) -> bool:
    return head.startswith(b"DDS ")


def _is_hdr(head: bytes) -> bool:
    return head.startswith(b"#?RADIANCE")


def _is_exr(head: bytes) -> bool:
    return head.startswith(b"\x76\x2F\x31\x01")


def _is_farbfeld(head: bytes) -> bool:
    return head.startswith(b"farbfeld")


def _is_avif(head: bytes) -> bool:
    return head[4:12] == b"ftypavif"


def _is_qoi(head: bytes) -> bool:
    return head.startswith(b"qoif")


_SIGNATURES: List[Tuple[ImageFormat, Callable[[bytes], bool]]] = [
    (ImageFormat.PNG, _is_png),
    (ImageFormat.JPEG, _is_jpeg),
    (ImageFormat.GIF, _is_gif),
    (ImageFormat.WEBP, _is_webp),
    (ImageFormat.TIFF, _is_tiff),
    (ImageFormat.DDS, _is_dds),
    (ImageFormat.BMP, _is_bmp),
    (ImageFormat.ICO, _is_ico),
    (ImageFormat.HDR, _is_hdr),
    (ImageFormat.OPENEXR, _is_exr),
    (ImageFormat.FARBFELD, _is_farbfeld),
    (ImageFormat.AVIF, _is_avif),
    (ImageFormat.QOI, _is_qoi),
    (ImageFormat.PNM, _is_pnm),
]


# --- public API -----------------------------------------------------------------


def guess_format(data: bytes) -> ImageFormat:
    """Classify an in-memory buffer by its container signature.

    Args:
        data (bytes): File content.

    Returns:
        ImageFormat: The first format whose signature matches.

    Raises:
        UnknownFormat: If no signature matches.
    """
    for fmt, matches in _SIGNATURES:
        if matches(data):
            return fmt
    raise UnknownFormat()


def detect_format(path: Union[str, Path]) -> ImageFormat:
    """Read the whole file at `path` and detect its image format.

    Raises:
        ImageDetectionError: If the file cannot be read or is not a known image.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ImageDetectionError(path, exc) from exc
    try:
        return guess_format(data)
    except UnknownFormat as exc:
        raise ImageDetectionError(path, exc) from exc
