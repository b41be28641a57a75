# File: site_crawler/report/__init__.py
"""site_crawler.report: report writers used by the CLI."""

from __future__ import annotations

from .json_report import render_json

__all__ = ["render_json"]
