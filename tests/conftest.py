"""Shared pytest fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def messages() -> list[str]:
  """Collect log lines written by the code under test."""
  return []


@pytest.fixture
def site_tree(tmp_path: Path) -> Path:
  """Create a small static site on disk."""
  root = tmp_path / "app"
  (root / "css").mkdir(parents=True)
  (root / "js" / "vendor").mkdir(parents=True)
  (root / "empty").mkdir()

  (root / "index.html").write_text("<html><body>hi</body></html>")
  (root / "css" / "site.css").write_text("body { color: red; }")
  (root / "js" / "app.js").write_text("console.log('app');")
  (root / "js" / "vendor" / "lib.js").write_text("/* lib */")
  (root / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
  (root / "data.unknownext").write_bytes(b"\xff\xfe\x00raw")
  return root
