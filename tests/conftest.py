"""공용 테스트 fixture"""
import shutil
import tempfile
from pathlib import Path

import pytest
from PIL import Image

SLIDE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>{title}</title></head>
<body{body_attrs}>
{body}
</body>
</html>
"""


@pytest.fixture
def temp_dir():
    """임시 디렉토리 생성"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def write_slide(temp_dir):
    """HTML 슬라이드 파일을 만드는 팩토리"""

    def _write(name: str, body: str, title: str = "Slide", body_attrs: str = "") -> Path:
        path = temp_dir / name
        if body_attrs:
            body_attrs = " " + body_attrs
        path.write_text(
            SLIDE_TEMPLATE.format(title=title, body=body, body_attrs=body_attrs),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def png_file(temp_dir):
    """40x20 PNG 이미지"""
    path = temp_dir / "pixel.png"
    Image.new("RGB", (40, 20), (255, 0, 0)).save(path, format="PNG")
    return path
