import os
from pathlib import Path

import pytest
import yaml

import main
from sitemapgen.utils import parse_size


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main, 'setup_logging', lambda **kwargs: None)


def test_generate_from_txt_entries(tmp_path, monkeypatch):
    monkeypatch.delenv('SITEMAP_ROOT_URI', raising=False)
    entries_file = tmp_path / 'urls.txt'
    entries_file.write_text('\n'.join(f'https://example.com/{i}' for i in range(5)), encoding='utf-8')
    output_dir = tmp_path / 'out'

    exit_code = main.main([
        '--config', str(tmp_path / 'missing.yaml'),
        '--entries', str(entries_file),
        '--root-uri', 'https://example.com/',
        '--output-dir', str(output_dir),
        '--max-entries-per-sitemap', '2',
    ])

    assert exit_code == 0
    assert sorted(os.listdir(output_dir)) == [
        'sitemap1.xml.gz', 'sitemap2.xml.gz', 'sitemap3.xml.gz', 'sitemapindex1.xml']


def test_root_uri_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('SITEMAP_ROOT_URI', 'https://env.example.com/')
    entries_file = tmp_path / 'urls.txt'
    entries_file.write_text('https://env.example.com/a\n', encoding='utf-8')
    output_dir = tmp_path / 'out'

    exit_code = main.main([
        '--config', str(tmp_path / 'missing.yaml'),
        '--entries', str(entries_file),
        '--output-dir', str(output_dir),
    ])

    assert exit_code == 0
    index = (output_dir / 'sitemapindex1.xml').read_text(encoding='utf-8')
    assert '<loc>https://env.example.com/sitemap1.xml.gz</loc>' in index


def test_missing_root_uri_fails(tmp_path, monkeypatch):
    monkeypatch.delenv('SITEMAP_ROOT_URI', raising=False)
    exit_code = main.main([
        '--config', str(tmp_path / 'missing.yaml'),
        '--entries', str(tmp_path / 'urls.txt'),
    ])
    assert exit_code == 1


def test_missing_entries_file_fails(tmp_path):
    exit_code = main.main([
        '--config', str(tmp_path / 'missing.yaml'),
        '--entries', str(tmp_path / 'urls.txt'),
        '--root-uri', 'https://example.com/',
        '--output-dir', str(tmp_path / 'out'),
    ])
    assert exit_code == 1
    assert not (tmp_path / 'out').exists()


def test_create_config(tmp_path):
    config_path = tmp_path / 'config' / 'config.yaml'
    assert main.main(['--config', str(config_path), '--create-config']) == 0
    data = yaml.safe_load(config_path.read_text(encoding='utf-8'))
    assert data['generator']['root_uri'] == '${SITEMAP_ROOT_URI}'


@pytest.mark.parametrize('text, expected', [
    ('10MB', 10 * 1024 * 1024),
    ('512KB', 512 * 1024),
    ('1GB', 1024 ** 3),
    ('2048', 2048),
])
def test_parse_size(text, expected):
    assert parse_size(text) == expected


SHIPPED_CONFIG = Path(main.__file__).resolve().parent / 'config' / 'config.yaml'


def test_root_uri_flag_overrides_unresolved_shipped_config(tmp_path, monkeypatch):
    monkeypatch.delenv('SITEMAP_ROOT_URI', raising=False)
    entries_file = tmp_path / 'urls.txt'
    entries_file.write_text('https://example.com/a\n', encoding='utf-8')
    output_dir = tmp_path / 'out'

    exit_code = main.main([
        '--config', str(SHIPPED_CONFIG),
        '--entries', str(entries_file),
        '--root-uri', 'https://example.com/',
        '--output-dir', str(output_dir),
    ])

    assert exit_code == 0
    assert (output_dir / 'sitemapindex1.xml').exists()


def test_shipped_config_without_root_uri_fails(tmp_path, monkeypatch):
    monkeypatch.delenv('SITEMAP_ROOT_URI', raising=False)
    exit_code = main.main([
        '--config', str(SHIPPED_CONFIG),
        '--entries', str(tmp_path / 'urls.txt'),
        '--output-dir', str(tmp_path / 'out'),
    ])
    assert exit_code == 1


def test_config_file_settings_reach_logging(tmp_path, monkeypatch):
    monkeypatch.delenv('SITEMAP_ROOT_URI', raising=False)
    config_path = tmp_path / 'config.yaml'
    config_path.write_text(yaml.safe_dump({
        'generator': {'root_uri': 'https://example.com/', 'output_dir': str(tmp_path / 'out')},
        'logging': {'level': 'warning', 'format': '%(levelname)s %(message)s', 'max_size': '1MB'},
    }), encoding='utf-8')
    entries_file = tmp_path / 'urls.txt'
    entries_file.write_text('https://example.com/a\n', encoding='utf-8')

    calls = []
    monkeypatch.setattr(main, 'setup_logging', lambda **kwargs: calls.append(kwargs))

    assert main.main(['--config', str(config_path), '--entries', str(entries_file)]) == 0
    assert calls[0]['log_format'] == '%(levelname)s %(message)s'
    assert calls[0]['log_level'] == 'WARNING'
    assert calls[0]['max_bytes'] == 1024 * 1024
