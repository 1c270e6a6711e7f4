"""Reading the headers and pixels of 8-bit grayscale BMP files."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_RULE = "-------------------------------------------------------------"


class BmpError(ValueError):
    """Raised when data is not a readable 8-bit BMP image."""


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte file header."""

    file_type: bytes
    file_size: int
    reserved1: int
    reserved2: int
    pixel_data_offset: int


@dataclass(frozen=True)
class InfoHeader:
    """The 40-byte bitmap information header."""

    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int


@dataclass(frozen=True)
class BmpImage:
    """Headers plus the raw pixel bytes that follow the info header."""

    header: FileHeader
    info: InfoHeader
    data: bytes

    @property
    def width(self) -> int:
        return self.info.width

    @property
    def height(self) -> int:
        return self.info.height

    def rows(self) -> list[bytes]:
        """Pixel rows from top to bottom; the stored rows run bottom-up."""
        width = self.width
        stored = [self.data[i * width : (i + 1) * width] for i in range(self.height)]
        return stored[::-1]


def _parse_file_header(data: bytes) -> FileHeader:
    if len(data) < _FILE_HEADER.size:
        raise BmpError("File is too short for a BMP file header")
    header = FileHeader(*_FILE_HEADER.unpack_from(data, 0))
    if header.file_type != b"BM":
        raise BmpError("Input file is not a BMP image")
    return header


def _parse_info_header(data: bytes) -> InfoHeader:
    end = _FILE_HEADER.size + _INFO_HEADER.size
    if len(data) < end:
        raise BmpError("File is too short for a BMP info header")
    info = InfoHeader(*_INFO_HEADER.unpack_from(data, _FILE_HEADER.size))
    if info.bits_per_pixel != 8:
        raise BmpError("Input file is not an 8-bit BMP image")
    if info.width < 0 or info.height < 0:
        raise BmpError("Invalid image dimensions")
    return info


def parse_bmp(data: bytes) -> BmpImage:
    """Parse an 8-bit BMP held in memory."""
    data = bytes(data)
    header = _parse_file_header(data)
    info = _parse_info_header(data)
    start = _FILE_HEADER.size + _INFO_HEADER.size
    count = info.width * info.height
    pixels = data[start : start + count]
    pixels += bytes(count - len(pixels))
    return BmpImage(header=header, info=info, data=pixels)


def read_bmp(path) -> BmpImage:
    """Read and parse an 8-bit BMP file."""
    return parse_bmp(Path(path).read_bytes())


def _format_file_header(header: FileHeader) -> str:
    lines = [
        "",
        "-------------------- Bit Map File Header --------------------",
        f"File type: {header.file_type.decode('latin-1')}",
        f"File Size: {header.file_size}",
        f"Pixel Data Offset: {header.pixel_data_offset}",
        _RULE,
        "",
    ]
    return "\n".join(lines)


def _format_info_header(info: InfoHeader) -> str:
    lines = [
        "-------------------- Bit Map Info Header --------------------",
        f"Header Size: {info.header_size}",
        f"Width: {info.width}",
        f"Height: {info.height}",
        f"Planes: {info.planes}",
        f"Bits per pixel: {info.bits_per_pixel}",
        f"Compression type: {info.compression}",
        f"Image Size: {info.image_size}",
        f"X pixels per meter: {info.x_pixels_per_meter}",
        f"Y pixels per meter: {info.y_pixels_per_meter}",
        f"Number of Colors Used: {info.colors_used}",
        f"Number of important colors: {info.colors_important}",
        _RULE,
        "",
    ]
    return "\n".join(lines)


def format_report(image: BmpImage) -> str:
    """Describe both headers of an image as printable text."""
    return "\n".join(
        [_format_file_header(image.header), _format_info_header(image.info)]
    )


def _save_png(image: BmpImage, output) -> None:
    picture = Image.frombytes("L", (image.width, image.height), b"".join(image.rows()))
    picture.save(output, format="PNG")


def main(argv=None) -> int:
    """Print the headers of a BMP file and optionally save its pixels as PNG."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 2):
        print(f"Usage: {Path(sys.argv[0]).name} <input_file.bmp> [output.png]", file=sys.stderr)
        return 1

    source = args[0]
    try:
        data = Path(source).read_bytes()
    except OSError:
        print(f"Error: Could not open input file: {source}", file=sys.stderr)
        return 1

    try:
        header = _parse_file_header(data)
        print(_format_file_header(header))
        image = parse_bmp(data)
    except BmpError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print(_format_info_header(image.info))
    if len(args) == 2:
        _save_png(image, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())