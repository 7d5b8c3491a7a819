# File: tests/test_links.py
from contact_scout.crawler.link_extractor import discover_links
from contact_scout.crawler.models import CrawlState

PAGE = """
<html><head><link rel="canonical" href="https://acme.co.uk/"></head><body>
  <a href="mailto:info@acme.co.uk">mail</a>
  <a href="tel:+442079460958">call</a>
  <a href="#top">top</a>
  <a href="javascript:void('acme.co.uk')">js</a>
  <a href="https://acme.co.uk/about">About</a>
  <a href="https://acme.co.uk/about#team">About again</a>
  <a href="/contact">Contact (relative, no domain text)</a>
  <a href="/go?to=acme.co.uk">Relative with domain text</a>
  <a href="https://partner.example.org/acme">Partner</a>
  <a href="https://shop.acme.co.uk/">Shop</a>
</body></html>
"""


def test_discover_links_filters_and_resolves():
    links = discover_links(PAGE, "https://acme.co.uk/index.html", "acme.co.uk")
    assert links == [
        "https://acme.co.uk/",
        "https://acme.co.uk/about",
        "https://acme.co.uk/go?to=acme.co.uk",
        "https://shop.acme.co.uk/",
    ]


def test_discover_links_skips_visited_and_caps_budget():
    state = CrawlState(max_pages=3)
    state.mark("https://acme.co.uk")
    links = discover_links(PAGE, "https://acme.co.uk/", "acme.co.uk", state)
    assert links == ["https://acme.co.uk/about", "https://acme.co.uk/go?to=acme.co.uk"]


def test_discover_links_empty_when_budget_spent():
    state = CrawlState(max_pages=1)
    state.mark("https://acme.co.uk/")
    assert discover_links(PAGE, "https://acme.co.uk/", "acme.co.uk", state) == []


def test_crawl_state_marks_once():
    state = CrawlState(max_pages=2)
    assert state.mark("http://Acme.co.uk/a#x")
    assert not state.mark("http://acme.co.uk/a")
    assert state.mark_all(["http://acme.co.uk/b", "http://acme.co.uk/c"]) == ["http://acme.co.uk/b"]
    assert state.remaining == 0
    assert len(state.visited) == 2


def test_discover_links_skips_malformed_href():
    html = (
        '<a href="http://[acme.co.uk/">broken</a>'
        '<a href="https://acme.co.uk/about">About</a>'
    )
    assert discover_links(html, "https://acme.co.uk/", "acme.co.uk") == ["https://acme.co.uk/about"]
