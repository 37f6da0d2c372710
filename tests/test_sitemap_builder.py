import re
import xml.etree.ElementTree as ET
from datetime import datetime, timedelta, timezone

import pytest

from sitemapgen.builders import SitemapBuilder, format_lastmod, format_priority
from sitemapgen.entries import ChangeFrequency
from sitemapgen.errors import InvalidArgumentError

from conftest import NS

PLUS_THREE = timezone(timedelta(hours=3))


def test_new_builder_is_empty():
    builder = SitemapBuilder()
    assert builder.is_empty
    assert len(builder) == 0


def test_empty_document_has_declaration_and_namespaces():
    text = SitemapBuilder().serialize()
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?><urlset ')
    assert 'xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"' in text
    assert 'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"' in text
    assert ('xsi:schemaLocation="http://www.sitemaps.org/schemas/sitemap/0.9 '
            'http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd"') in text


def test_loc_only():
    builder = SitemapBuilder()
    builder.append_url('https://example.com/')
    assert not builder.is_empty
    assert builder.serialize().endswith(
        '<url><loc>https://example.com/</loc></url></urlset>'
    )


def test_all_fields_in_fixed_order():
    builder = SitemapBuilder()
    builder.append_url(
        'https://example.com/a',
        priority=0.5,
        changefreq=ChangeFrequency.DAILY,
        lastmod=datetime(2024, 3, 1, 10, 15, 0, 123456, tzinfo=PLUS_THREE),
    )
    assert (
        '<url><loc>https://example.com/a</loc>'
        '<lastmod>2024-03-01T10:15:00+03:00</lastmod>'
        '<changefreq>daily</changefreq>'
        '<priority>0.5</priority></url>'
    ) in builder.serialize()


@pytest.mark.parametrize('kwargs, expected_children', [
    ({'changefreq': 'weekly'}, ['loc', 'changefreq']),
    ({'priority': 0.3}, ['loc', 'priority']),
    ({'lastmod': datetime(2024, 1, 1, tzinfo=timezone.utc), 'priority': 1}, ['loc', 'lastmod', 'priority']),
    ({'changefreq': 'never', 'priority': 0.1}, ['loc', 'changefreq', 'priority']),
])
def test_optional_field_subsets(kwargs, expected_children):
    builder = SitemapBuilder()
    builder.append_url('https://example.com/', **kwargs)
    root = ET.fromstring(builder.serialize())
    url = root.find('sm:url', NS)
    assert [child.tag.split('}')[1] for child in url] == expected_children


def test_changefreq_string_is_accepted():
    builder = SitemapBuilder()
    builder.append_url('https://example.com/', changefreq='hourly')
    assert '<changefreq>hourly</changefreq>' in builder.serialize()


def test_invalid_changefreq_rejected():
    builder = SitemapBuilder()
    with pytest.raises(InvalidArgumentError):
        builder.append_url('https://example.com/', changefreq='sometimes')
    assert builder.is_empty


def test_none_loc_raises_without_mutation():
    builder = SitemapBuilder()
    with pytest.raises(InvalidArgumentError):
        builder.append_url(None, changefreq='daily', priority=1)
    assert builder.is_empty
    assert '<url>' not in builder.serialize()


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        SitemapBuilder().append_url(None)


def test_loc_is_xml_escaped():
    builder = SitemapBuilder()
    builder.append_url('https://example.com/?a=1&b=<2>')
    text = builder.serialize()
    assert '<loc>https://example.com/?a=1&amp;b=&lt;2&gt;</loc>' in text
    assert ET.fromstring(text).find('sm:url/sm:loc', NS).text == 'https://example.com/?a=1&b=<2>'


def test_serialize_is_idempotent():
    builder = SitemapBuilder()
    builder.append_url('https://example.com/', datetime(2024, 1, 1, tzinfo=timezone.utc), 'daily', 0.7)
    assert builder.serialize() == builder.serialize()


def test_preserves_append_order():
    builder = SitemapBuilder()
    locs = [f'https://example.com/{i}' for i in range(5)]
    for loc in locs:
        builder.append_url(loc)
    root = ET.fromstring(builder.serialize())
    assert [node.text for node in root.findall('sm:url/sm:loc', NS)] == locs


def test_format_lastmod_utc():
    assert format_lastmod(datetime(2024, 1, 1, tzinfo=timezone.utc)) == '2024-01-01T00:00:00+00:00'


def test_format_lastmod_naive_uses_local_offset():
    text = format_lastmod(datetime(2024, 6, 15, 8, 30, 5, 999))
    assert re.fullmatch(r'2024-06-15T08:30:05[+-]\d{2}:\d{2}', text)


@pytest.mark.parametrize('value, expected', [
    (1, '1'),
    (1.0, '1'),
    (0, '0'),
    (0.5, '0.5'),
    (0.8, '0.8'),
    (0.25, '0.25'),
])
def test_format_priority(value, expected):
    assert format_priority(value) == expected


@pytest.mark.parametrize('offset, expected', [
    (timedelta(hours=5, minutes=53, seconds=28), '1900-01-01T00:00:00+05:53'),
    (-timedelta(minutes=25, seconds=21), '1900-01-01T00:00:00-00:25'),
    (timedelta(hours=-9, minutes=-30), '1900-01-01T00:00:00-09:30'),
])
def test_format_lastmod_offset_is_hours_and_minutes(offset, expected):
    assert format_lastmod(datetime(1900, 1, 1, tzinfo=timezone(offset))) == expected
