import base64

import pytest

# 1x1 transparent PNG
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

DECK_MD = """\
Intro text that belongs to no slide.

# Welcome

Hello **bold and [a link](https://example.com) here**.

> Note: remember timeline

- first point
- second *point*

---

| A | B |
|---|---|
| 1 | 2 |

# Shapes

!shape[rect]({"w": 2, "h": 1, "fill": {"color": "FF0000"}})

!shape[hexagon]({})

- [x] shipped
- [ ] pending
"""


@pytest.fixture
def deck_md():
    return DECK_MD


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "pixel.png"
    path.write_bytes(PNG_1X1)
    return path
