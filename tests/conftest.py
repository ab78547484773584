"""Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup
- Settings cache isolation
- Sample test data (manifest elements, event streams)
"""

import os
from typing import Generator

import pytest

# Set application environment variables BEFORE importing any application code
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["ATTRIBUTE_LIST_WHITESPACE_MODE"] = "strip_all"
os.environ["XML_SKIP_WHITESPACE_EVENTS"] = "true"
os.environ["POWERTOOLS_DEV"] = "true"

from android_manifest.attribute_list import AttributeList, Semicolon, VerticalBar  # noqa: E402
from android_manifest.shared.config import clear_settings_cache  # noqa: E402
from android_manifest.xml_events import (  # noqa: E402
    Characters,
    EndElement,
    StartElement,
    XmlEvent,
)


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def trim_whitespace(monkeypatch: pytest.MonkeyPatch) -> None:
    """Switch the list codec to delimiter-only whitespace trimming."""
    monkeypatch.setenv("ATTRIBUTE_LIST_WHITESPACE_MODE", "trim")
    clear_settings_cache()


# =============================================================================
# Attribute List Fixtures
# =============================================================================


@pytest.fixture
def semicolon_strings() -> type[AttributeList]:
    """Semicolon-delimited list of strings."""
    return AttributeList[Semicolon, str]


@pytest.fixture
def bar_strings() -> type[AttributeList]:
    """Bar-delimited list of strings."""
    return AttributeList[VerticalBar, str]


@pytest.fixture
def category_events() -> list[XmlEvent]:
    """Event stream of an element holding two categories."""
    return [
        StartElement(name="categories"),
        Characters(text="cat1;cat2"),
        EndElement(name="categories"),
    ]


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_provider_xml() -> str:
    """Provider element with authorities, meta-data and path permissions."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<provider xmlns:android="http://schemas.android.com/apk/res/android"
    android:name="com.example.files.FileProvider"
    android:authorities="com.example.files; com.example.documents"
    android:exported="false"
    android:grantUriPermissions="true">

    <meta-data
        android:name="android.support.FILE_PROVIDER_PATHS"
        android:resource="@xml/file_paths" />

    <path-permission
        android:pathPrefix="/search"
        android:readPermission="android.permission.GLOBAL_SEARCH" />
</provider>
"""


@pytest.fixture
def sample_activity_xml() -> str:
    """Activity element using bar-delimited flag lists."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<activity xmlns:android="http://schemas.android.com/apk/res/android"
    android:name=".MainActivity"
    android:configChanges="orientation|screenSize|keyboardHidden"
    android:windowSoftInputMode="stateHidden|adjustResize"
    android:exported="true">
    <intent-filter android:priority="10">
        <data android:scheme="https" android:host="example.com" android:pathPrefix="/open" />
        <data android:mimeType="image/*" />
    </intent-filter>
</activity>
"""
