import io

from PIL import Image

from photoframe.__main__ import main


def make_png(width, height):
    buf = io.BytesIO()
    Image.new('RGB', (width, height), (30, 120, 200)).save(buf, format='PNG')
    return buf.getvalue()


def test_export_writes_png(tmp_path):
    src = tmp_path / "in.png"
    src.write_bytes(make_png(320, 240))
    out = tmp_path / "joke-photo.png"

    code = main([str(src), '-t', 'Hello there', '-s', 'star', '--size', '30', '-e', str(out)])

    assert code == 0
    image = Image.open(io.BytesIO(out.read_bytes()))
    assert image.size == (600, 700)
    assert image.getpixel((0, 0))[3] == 0


def test_export_inset_mode(tmp_path):
    src = tmp_path / "in.png"
    src.write_bytes(make_png(320, 240))
    out = tmp_path / "out.png"
    assert main([str(src), '-m', 'inset', '-s', 'none', '-e', str(out)]) == 0
    image = Image.open(out)
    assert image.getpixel((300, 100))[3] == 255
    assert image.getpixel((300, 650))[3] == 0


def test_export_bad_image_fails(tmp_path):
    src = tmp_path / "in.png"
    src.write_bytes(b"nope")
    assert main([str(src), '-e', str(tmp_path / "out.png")]) == 1
    assert not (tmp_path / "out.png").exists()


def test_export_without_image_fails(tmp_path):
    assert main(['-e', str(tmp_path / "out.png")]) == 2
