import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


LANDING_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Landing</title>
  <style>body { margin: 0 }</style>
  <script src="/app.js"></script>
</head>
<body class="app" data-page="home">
  <header class="top" style="background-color: #fff; --accent: #f60">
    <img src="/front/assets/logo-abc.png" alt="Logo">
  </header>
  <main>
    <label for="email">Email</label>
    <input id="email" type="email" required="">
    <button onclick="track('signup')" disabled="false">Sign up</button>
  </main>
  <script>window.analytics = {};</script>
</body>
</html>
"""

LANDING_IMAGE_MAP = {"/front/assets/logo-abc.png": "_logo_abc.png"}


@pytest.fixture
def landing_page() -> str:
    return LANDING_PAGE


@pytest.fixture
def landing_image_map() -> dict[str, str]:
    return dict(LANDING_IMAGE_MAP)


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests.

    The CLI calls ``logging.basicConfig(force=True)``, which would otherwise
    replace handlers installed by other tests (and by pytest's caplog).
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)
