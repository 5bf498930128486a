from pathlib import Path

import pytest

from tokenkit.adapters import BundledOverlaySource
from tokenkit.context import TokenContext


@pytest.fixture
def ios_ctx() -> TokenContext:
    return TokenContext.create("ios", source=BundledOverlaySource())


@pytest.fixture
def android_ctx() -> TokenContext:
    return TokenContext.create("android", source=BundledOverlaySource())


@pytest.fixture
def base_ctx() -> TokenContext:
    """Resolution for a platform with no overlay: base tokens only."""
    return TokenContext.create("web", source=BundledOverlaySource())


@pytest.fixture
def overlay_dir(tmp_path: Path) -> Path:
    """
    Directory of YAML overlays: a plain ios file and a markdown-wrapped
    android file.
    """
    (tmp_path / "ios.yaml").write_text(
        "layout:\n"
        "  borderRadius:\n"
        "    small: 9\n"
        "components:\n"
        "  button:\n"
        "    pressedStateScale: 0.95\n"
    )
    (tmp_path / "android.yaml").write_text(
        "# Android overrides\n"
        "\n"
        "```yaml\n"
        "colors:\n"
        "  primary: '#6200EE'\n"
        "```\n"
        "\n"
        "Trailing notes are ignored.\n"
    )
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TOKENKIT_PLATFORM", "TOKENKIT_OVERLAY_DIR", "TOKENKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
