"""Shared fixtures."""

import pytest

from samples import FORM_01721_TEXT, FORM_01848_TEXT, FORM_02050_TEXT


@pytest.fixture
def form_01721_text():
    return FORM_01721_TEXT


@pytest.fixture
def form_01848_text():
    return FORM_01848_TEXT


@pytest.fixture
def form_02050_text():
    return FORM_02050_TEXT
