from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
SRC_STR = str(SRC)
if SRC_STR not in sys.path:
    sys.path.insert(0, SRC_STR)


SAMPLE_DOCUMENT = """\
server:
  host: localhost
  port: 8080
  tls:
    cert: /etc/cert.pem
database:
  users:
    - alice
    - bob
  pool_size: 5
"""


@pytest.fixture
def sample_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "app.yaml"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
