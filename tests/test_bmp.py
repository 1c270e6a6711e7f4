import struct

import pytest

from visionbasics.bmp import BmpError, format_report, main, parse_bmp, read_bmp


def _make_bmp(width, height, pixels, bits=8, signature=b"BM"):
    file_header = struct.pack("<2sIHHI", signature, 54 + len(pixels), 0, 0, 54)
    info_header = struct.pack(
        "<IiiHHIIiiII", 40, width, height, 1, bits, 0, len(pixels), 2835, 2835, 0, 0
    )
    return file_header + info_header + pixels


def test_parse_reads_headers():
    image = parse_bmp(_make_bmp(2, 3, bytes(range(6))))
    assert image.header.file_type == b"BM"
    assert image.header.file_size == 60
    assert image.header.pixel_data_offset == 54
    assert image.info.header_size == 40
    assert image.info.width == 2
    assert image.info.height == 3
    assert image.info.bits_per_pixel == 8
    assert image.info.x_pixels_per_meter == 2835
    assert image.data == bytes(range(6))


def test_rows_run_top_to_bottom():
    image = parse_bmp(_make_bmp(2, 2, b"\x01\x02\x03\x04"))
    assert image.rows() == [b"\x03\x04", b"\x01\x02"]


def test_short_pixel_data_is_zero_filled():
    image = parse_bmp(_make_bmp(2, 2, b"\x09"))
    assert image.data == b"\x09\x00\x00\x00"


def test_wrong_signature_rejected():
    with pytest.raises(BmpError, match="not a BMP image"):
        parse_bmp(_make_bmp(1, 1, b"\x00", signature=b"XX"))


def test_non_eight_bit_rejected():
    with pytest.raises(BmpError, match="not an 8-bit BMP image"):
        parse_bmp(_make_bmp(1, 1, b"\x00\x00\x00", bits=24))


def test_truncated_header_rejected():
    with pytest.raises(BmpError):
        parse_bmp(_make_bmp(1, 1, b"\x00")[:20])


def test_negative_dimensions_rejected():
    with pytest.raises(BmpError):
        parse_bmp(_make_bmp(2, -2, b"\x00" * 4))


def test_read_bmp_from_file(tmp_path):
    path = tmp_path / "image.bmp"
    path.write_bytes(_make_bmp(3, 1, b"\x0a\x0b\x0c"))
    image = read_bmp(path)
    assert image.rows() == [b"\x0a\x0b\x0c"]


def test_format_report_lists_fields():
    report = format_report(parse_bmp(_make_bmp(2, 3, bytes(6))))
    assert "-------------------- Bit Map File Header --------------------" in report
    assert "File type: BM" in report
    assert "Width: 2" in report
    assert "Height: 3" in report
    assert "Bits per pixel: 8" in report
    assert "Header Size: 40" in report


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "missing.bmp"
    assert main([str(missing)]) == 1
    assert "Could not open input file" in capsys.readouterr().err


def test_main_rejects_wrong_depth(tmp_path, capsys):
    path = tmp_path / "deep.bmp"
    path.write_bytes(_make_bmp(1, 1, b"\x00\x00\x00", bits=24))
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Bit Map File Header" in captured.out
    assert "not an 8-bit BMP image" in captured.err


def test_main_prints_report_and_saves_png(tmp_path, capsys):
    source = tmp_path / "image.bmp"
    source.write_bytes(_make_bmp(2, 2, b"\x00\x40\x80\xff"))
    output = tmp_path / "image.png"
    assert main([str(source), str(output)]) == 0
    assert "Bit Map Info Header" in capsys.readouterr().out
    assert output.read_bytes().startswith(b"\x89PNG\r\n\x1a\n")