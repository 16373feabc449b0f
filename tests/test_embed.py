from urllib.parse import parse_qs, urlparse

import pytest

from core.embed import (
    build_embed_code,
    build_embed_url,
    calculator_from_query,
    is_embed_request,
    theme_param_from_query,
)
from core.theme import DEFAULT_THEME, decode_theme_from_param, merge_theme


def test_calculator_from_query():
    assert calculator_from_query({"calculator": "refinance"}) == "refinance"
    assert calculator_from_query({"calculator": ["rent-vs-buy"]}) == "rent-vs-buy"
    assert calculator_from_query({"calculator": "heloc"}) == "purchase"
    assert calculator_from_query({}) == "purchase"


def test_embed_request_detection():
    assert is_embed_request({"embed": "1"})
    assert not is_embed_request({"calculator": "purchase"})
    assert theme_param_from_query({"t": ["abc"]}) == "abc"


def test_embed_url_carries_calculator_and_theme():
    theme = merge_theme({"primary": "#ff0000"})
    url = build_embed_url("https://calc.example.com/", "cash-out", theme)
    parsed = urlparse(url)
    qs = parse_qs(parsed.query)
    assert parsed.netloc == "calc.example.com"
    assert qs["embed"] == ["1"]
    assert qs["calculator"] == ["cash-out"]
    assert decode_theme_from_param(qs["t"][0]) == theme


def test_embed_code_markup():
    code = build_embed_code("https://calc.example.com", "purchase", DEFAULT_THEME)
    assert code.startswith('<iframe src="https://calc.example.com/?embed=1&amp;calculator=purchase&amp;t=')
    assert 'style="border:0;width:100%;max-width:980px;height:820px;"' in code
    assert 'loading="lazy"' in code
    assert code.endswith("></iframe>")


def test_embed_code_rejects_unknown_calculator():
    with pytest.raises(ValueError):
        build_embed_code("https://calc.example.com", "heloc", DEFAULT_THEME)


def test_embed_code_escapes_origin():
    code = build_embed_code('https://calc.example.com/"><script>x</script>', "purchase", DEFAULT_THEME)
    assert "<script>" not in code
    assert code.count('"') == 8
    assert 'src="https://calc.example.com/&quot;&gt;&lt;script&gt;' in code
