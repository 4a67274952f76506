"""Shared fixtures for accessibility checker tests."""

import pytest

from accessibility_checker import AccessibilityChecker


def _build_page(body: str = "", head: str = "", lang: str = "en", title: str = "Test page") -> str:
    lang_attr = f' lang="{lang}"' if lang is not None else ""
    title_tag = f"<title>{title}</title>" if title is not None else ""
    return (
        f"<!DOCTYPE html><html{lang_attr}><head>{title_tag}{head}</head>"
        f'<body><a href="#main-content" tabindex="0">Skip</a>{body}</body></html>'
    )


@pytest.fixture
def page():
    """Build a complete, otherwise clean page around a body fragment."""
    return _build_page


@pytest.fixture
def checker():
    return AccessibilityChecker()


@pytest.fixture
def types_of():
    """Issue types found by a list of issues, in order."""
    def _types(issues):
        return [issue.type for issue in issues]
    return _types
