"""Palette resolution and dark-mode signal tests."""

from types import SimpleNamespace

import pytest

from settings.palettes import DARK_PALETTE, LIGHT_PALETTE, STATIC_PALETTE
from utils import theme


@pytest.mark.parametrize(
    "prefers_dark, expected",
    [(True, DARK_PALETTE), (False, LIGHT_PALETTE), (None, LIGHT_PALETTE)],
)
def test_resolve_palette(prefers_dark, expected):
    assert theme.resolve_palette(prefers_dark) == expected


def test_dark_palette_is_muted_gray_and_green():
    assert DARK_PALETTE.primary == "#666666"
    assert DARK_PALETTE.secondary == "#339933"
    assert LIGHT_PALETTE == ("#EEEEEE", "#008800")


@pytest.mark.parametrize("prefers_dark", [True, False, None])
def test_static_palette_ignores_signal(prefers_dark):
    assert theme.static_palette(prefers_dark) == STATIC_PALETTE


def test_get_palette_strategy():
    assert theme.get_palette_strategy("theme") is theme.resolve_palette
    assert theme.get_palette_strategy("static") is theme.static_palette


def test_get_palette_strategy_rejects_unknown_mode():
    with pytest.raises(ValueError, match="Unknown palette mode"):
        theme.get_palette_strategy("sepia")


def test_prefers_dark_mode_from_context(monkeypatch):
    monkeypatch.setattr(theme.st, "context", SimpleNamespace(theme=SimpleNamespace(type="dark")))
    assert theme.prefers_dark_mode() is True

    monkeypatch.setattr(theme.st, "context", SimpleNamespace(theme=SimpleNamespace(type="light")))
    assert theme.prefers_dark_mode() is False


def test_prefers_dark_mode_falls_back_to_base_option(monkeypatch):
    monkeypatch.setattr(theme.st, "context", SimpleNamespace())
    monkeypatch.setattr(theme.st, "get_option", lambda key: "dark")
    assert theme.prefers_dark_mode() is True


def test_prefers_dark_mode_unavailable(monkeypatch):
    monkeypatch.setattr(theme.st, "context", SimpleNamespace(theme=SimpleNamespace(type=None)))
    monkeypatch.setattr(theme.st, "get_option", lambda key: None)
    assert theme.prefers_dark_mode() is None
    assert theme.resolve_palette(theme.prefers_dark_mode()) == LIGHT_PALETTE
