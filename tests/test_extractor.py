# File: tests/test_extractor.py
"""Extraction heuristics: title, emails, phones, addresses and industries."""
import pytest

from contact_scout.parser.addresses import clean_address, match_address
from contact_scout.parser.contacts import contact_trailer, find_emails, find_phones
from contact_scout.parser.extractor import match_industries


# --------------------------------------------------------------------------- #
#                                   Title                                     #
# --------------------------------------------------------------------------- #


def test_title_prefers_og_site_name(extractor):
    html = (
        '<head><meta property="og:site_name" content="Acme Ltd">'
        '<meta name="application-name" content="Acme App"><title>Home</title></head>'
    )
    assert extractor.extract(html, "acme.co.uk").title == "Acme Ltd"


def test_title_falls_back_to_application_name_then_title(extractor):
    html = '<head><meta property="og:site_name" content="  "><meta name="application-name" content="Acme App"></head>'
    assert extractor.extract(html, "acme.co.uk").title == "Acme App"
    assert extractor.extract("<title> Welcome </title>", "acme.co.uk").title == "Welcome"
    assert extractor.extract("<p>no title</p>", "acme.co.uk").title == ""


# --------------------------------------------------------------------------- #
#                              Emails and phones                              #
# --------------------------------------------------------------------------- #


def test_find_emails_filters_tracking_and_images():
    text = "admin@sentry.io x@o1.ingest.sentry.io logo@example.com.png icon@2x.png Info@Example.com"
    assert find_emails(text) == {"info@example.com"}


def test_contact_trailer_decodes_hrefs():
    hrefs = ["mailto:Sales%40acme.co.uk?subject=Hi", "tel:+44%2020%207946%200958", "/about", "mailto:"]
    assert contact_trailer(hrefs).splitlines() == ["Sales@acme.co.uk", "+44 20 7946 0958"]


def test_find_phones_uk_number():
    assert "020 7946 0958" in find_phones("Call us on 020 7946 0958 today", "GB")


def test_extract_uses_mailto_and_tel_links(extractor):
    html = (
        "<body><a href='mailto:hello@acme.co.uk'><img src='mail.svg'></a>"
        "<a href='tel:+442079460000'><i class='icon'></i></a></body>"
    )
    record = extractor.extract(html, "acme.co.uk")
    assert record.emails == {"hello@acme.co.uk"}
    assert "+442079460000" in record.phones


def test_extract_ignores_script_and_style(extractor):
    html = (
        "<body><script>var e = 'bot@tracker.com';</script>"
        "<style>.a{content:'css@style.com'}</style>"
        "<noscript>hidden@noscript.com</noscript>"
        "<p>Write to Info@Acme.co.uk</p></body>"
    )
    assert extractor.extract(html, "acme.co.uk").emails == {"info@acme.co.uk"}


# --------------------------------------------------------------------------- #
#                                  Addresses                                  #
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize(
    "text,expected",
    [
        ("221B Baker Street, London NW1 6XE", "221B Baker Street, London NW1 6XE"),
        ("SW1A 1AA", "SW1A 1AA"),
        ("Find us: sw1a 1aa", "SW1A 1AA"),
        ("Unit 4, 7 Mill Lane ,  Leeds   LS1 4AB", "Unit 4, 7 Mill Lane, Leeds LS1 4AB"),
        ("£19.99 at 12 High Street, London SW1A 1AA", None),
        ("Tickets $5 at 3 Park Road, M1 1AE", None),
        ("12 High Street", None),
        ("Email info@acme.co.uk, LS1 4AB", None),
        ("", None),
    ],
)
def test_match_address(text, expected):
    assert match_address(text) == expected


def test_match_address_length_limit():
    text = "221B Baker Street, London NW1 6XE " + "x" * 160
    assert match_address(text) is None
    assert match_address(text, max_length=500) is not None


def test_clean_address():
    assert clean_address(" 1  Way ,Town , ") == "1 Way, Town"


def test_extract_addresses_deduplicated(extractor):
    html = (
        "<body><div><address>221B Baker Street,<br>London NW1 6XE</address></div>"
        "<footer><span>NW1 6XE</span><li>NW1 6XE</li></footer></body>"
    )
    record = extractor.extract(html, "acme.co.uk")
    assert record.addresses == {"221B Baker Street, London NW1 6XE", "NW1 6XE"}


# --------------------------------------------------------------------------- #
#                                 Industries                                  #
# --------------------------------------------------------------------------- #


def test_match_industries_keywords_and_description(vocabulary):
    found = match_industries(vocabulary, "Joinery, CONSTRUCTION , ", "We do Construction and Hospitality")
    assert found == {"joinery", "construction", "hospitality"}


def test_keywords_must_match_whole_token(vocabulary):
    assert match_industries(vocabulary, "technology, estate", "") == set()


def test_leading_space_entry_avoids_subwords(vocabulary):
    assert match_industries(vocabulary, "", "we maintain gardens") == set()
    assert match_industries(vocabulary, "", "we build ai tools") == {" ai"}


def test_extract_industries_idempotent(extractor):
    html = (
        '<head><meta name="Keywords" content="joinery,Construction">'
        '<meta property="og:description" content="Joinery for hospitality venues"></head>'
    )
    first = extractor.extract(html, "acme.co.uk").industries
    second = extractor.extract(html, "acme.co.uk").industries
    assert first == second == {"joinery", "construction", "hospitality"}


def test_description_meta_wins_over_og_description(extractor):
    html = (
        '<meta name="description" content="real estate agents">'
        '<meta property="og:description" content="hospitality">'
    )
    assert extractor.extract(html, "acme.co.uk").industries == {"real estate"}
