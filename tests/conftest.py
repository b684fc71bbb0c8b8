# -*- coding: utf-8 -*-
"""Shared fixtures: every test starts from an empty, non-zeroing pool."""

import pytest

import tint_pool


@pytest.fixture(autouse=True)
def fresh_pool():
    tint_pool.clear()
    tint_pool.set_zero_on_release(False)
    yield
    tint_pool.clear()
    tint_pool.set_zero_on_release(False)
