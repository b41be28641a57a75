# File: tests/test_html_parser.py
import dataclasses

import pytest

from site_crawler.crawler.models import ExtractedPageData
from site_crawler.parser.html_parser import (
    extract_page_data,
    get_first_paragraph_from_html,
    get_h1_from_html,
)

BASE = "https://blog.boot.dev"


def test_h1_basic():
    assert get_h1_from_html("<html><body><h1>Test Title</h1></body></html>") == "Test Title"


def test_h1_missing():
    assert get_h1_from_html("<html><body><p>No H1 here</p></body></html>") == ""


def test_h1_first_wins_and_is_trimmed():
    html = "<h1>\n   First <em>heading</em>  \n</h1><h1>Second</h1>"
    assert get_h1_from_html(html) == "First heading"


def test_first_paragraph_main_priority():
    html = """
    <html><body>
      <p>Outside paragraph.</p>
      <main>
        <p>Main paragraph.</p>
      </main>
    </body></html>"""
    assert get_first_paragraph_from_html(html) == "Main paragraph."


def test_first_paragraph_fallback_to_first_p():
    html = """
    <html><body>
      <p>First outside paragraph.</p>
      <p>Second outside paragraph.</p>
    </body></html>"""
    assert get_first_paragraph_from_html(html) == "First outside paragraph."


def test_first_paragraph_empty_main_falls_through():
    html = "<p>Before main.</p><main><div>nothing here</div></main><p>After main.</p>"
    assert get_first_paragraph_from_html(html) == "Before main."


def test_first_paragraph_nested_in_main():
    html = "<p>Outer.</p><main><section><div><p>  Deep inside.  </p></div></section></main>"
    assert get_first_paragraph_from_html(html) == "Deep inside."


def test_first_paragraph_none():
    assert get_first_paragraph_from_html("<html><body><h1>Title</h1></body></html>") == ""


def test_extract_page_data_basic(sample_html):
    actual = extract_page_data(sample_html, BASE)
    assert actual == ExtractedPageData(
        url="https://blog.boot.dev",
        h1="Test Title",
        first_paragraph="This is the first paragraph.",
        outgoing_links=("https://blog.boot.dev/link1",),
        image_urls=("https://blog.boot.dev/image1.jpg",),
    )
    assert actual.to_dict() == {
        "url": "https://blog.boot.dev",
        "h1": "Test Title",
        "first_paragraph": "This is the first paragraph.",
        "outgoing_links": ["https://blog.boot.dev/link1"],
        "image_urls": ["https://blog.boot.dev/image1.jpg"],
    }


def test_extract_page_data_main_section_priority():
    html = """
    <html><body>
      <nav><p>Navigation paragraph</p></nav>
      <main>
        <h1>Main Title</h1>
        <p>Main paragraph content.</p>
      </main>
    </body></html>
    """
    actual = extract_page_data(html, BASE)
    assert actual.h1 == "Main Title"
    assert actual.first_paragraph == "Main paragraph content."


def test_extract_page_data_missing_elements():
    html = "<html><body><div>No h1, p, links, or images</div></body></html>"
    assert extract_page_data(html, BASE).to_dict() == {
        "url": "https://blog.boot.dev",
        "h1": "",
        "first_paragraph": "",
        "outgoing_links": [],
        "image_urls": [],
    }


def test_extract_page_data_keeps_url_verbatim_and_resolves_against_it():
    page_url = "https://BLOG.boot.dev/posts/first/"
    data = extract_page_data('<a href="second">next</a><img src="../img/a.png">', page_url)
    assert data.url == page_url
    assert data.outgoing_links == ("https://blog.boot.dev/posts/first/second",)
    assert data.image_urls == ("https://blog.boot.dev/posts/img/a.png",)


def test_extract_page_data_bad_reference_does_not_break_other_fields():
    html = '<h1>Title</h1><p>Body</p><a href="http://[::1">bad</a><a href="/ok">ok</a>'
    data = extract_page_data(html, BASE)
    assert data.h1 == "Title"
    assert data.first_paragraph == "Body"
    assert data.outgoing_links == ("https://blog.boot.dev/ok",)


def test_extracted_page_data_is_immutable():
    data = extract_page_data("<h1>x</h1>", BASE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.h1 = "y"  # type: ignore[misc]
