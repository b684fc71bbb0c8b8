# -*- coding: utf-8 -*-
"""Test project metadata."""

import __about__


def test_metadata_summary():
    summary = __about__.metadata_summary()
    assert summary["title"] == "Tint"
    assert summary["version"] == __about__.__version__
    assert set(summary) == {"title", "version", "license", "description", "copyright"}
