# File: site_crawler/parser/__init__.py
"""site_crawler.parser: structural extraction from HTML pages."""

from .html_parser import extract_page_data, get_first_paragraph_from_html, get_h1_from_html

__all__ = ["extract_page_data", "get_first_paragraph_from_html", "get_h1_from_html"]
