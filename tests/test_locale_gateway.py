import logging
from dataclasses import replace

import pytest

from moodshaker.services.locale_gateway import (
    CHINESE_FIRST,
    ENGLISH_FIRST,
    GatewayConfig,
    PassThrough,
    Redirect,
    RequestDescriptor,
    build_redirect_path,
    decide,
    is_static_asset,
    match_supported_language,
    parse_accept_language,
    resolve_language,
)

COOKIE = ENGLISH_FIRST.cookie_name


def _request(path="/", cookies=None, headers=None):
    return RequestDescriptor(path=path, cookies=cookies or {}, headers=headers or {})


@pytest.mark.parametrize("path", ["/en", "/en/", "/en/about", "/zh", "/zh/cocktail/42"])
def test_decide_passes_through_language_prefixed_paths(path):
    assert decide(_request(path), ENGLISH_FIRST) == PassThrough(reason="language_prefixed")


@pytest.mark.parametrize("path", ["/", "/about", "/gallery", "/questions"])
def test_decide_is_idempotent_after_redirect(path):
    first = decide(_request(path), ENGLISH_FIRST)
    assert isinstance(first, Redirect)

    second = decide(_request(first.path, cookies={COOKIE: first.language}), ENGLISH_FIRST)
    assert isinstance(second, PassThrough)


@pytest.mark.parametrize("path", ["/logo.png", "/images/mojito.webp", "/favicon.ico", "/en/hero.avif"])
def test_decide_never_redirects_static_assets(path):
    request = _request(
        path,
        cookies={COOKIE: "zh"},
        headers={"Accept-Language": "zh-CN,zh;q=0.9"},
    )
    assert decide(request, ENGLISH_FIRST) == PassThrough(reason="static_asset")


def test_static_asset_match_is_case_sensitive():
    assert is_static_asset("/photo.png")
    assert not is_static_asset("/photo.PNG")
    assert isinstance(decide(_request("/photo.PNG"), ENGLISH_FIRST), Redirect)


@pytest.mark.parametrize("path", ["/english", "/zhongwen/menu", "/enx"])
def test_language_must_be_a_whole_segment(path):
    decision = decide(_request(path), ENGLISH_FIRST)
    assert isinstance(decision, Redirect)
    assert decision.path == f"/en{path}"


def test_cookie_beats_accept_language():
    request = _request("/about", cookies={COOKIE: "zh"}, headers={"accept-language": "en-US,en;q=0.9"})
    decision = decide(request, ENGLISH_FIRST)
    assert isinstance(decision, Redirect)
    assert decision.language == "zh"
    assert decision.path == "/zh/about"


def test_invalid_cookie_is_ignored():
    request = _request("/", cookies={COOKIE: "fr"}, headers={"accept-language": "zh-TW"})
    assert resolve_language(request, ENGLISH_FIRST) == "zh"


def test_accept_language_ignores_quality_ordering():
    request = _request("/", headers={"accept-language": "fr;q=0.9,en;q=0.8"})
    assert resolve_language(request, ENGLISH_FIRST) == "en"

    request = _request("/", headers={"accept-language": "zh;q=0.1,en;q=1.0"})
    assert resolve_language(request, ENGLISH_FIRST) == "zh"


def test_accept_language_header_name_is_case_insensitive():
    request = _request("/", headers={"Accept-Language": "zh-CN"})
    assert resolve_language(request, ENGLISH_FIRST) == "zh"


@pytest.mark.parametrize("header", ["", ",,;", "fr-FR,de;q=0.5", "EN-us", ";q=0.9"])
def test_unusable_accept_language_falls_back_to_default(header):
    assert resolve_language(_request("/", headers={"accept-language": header}), ENGLISH_FIRST) == "en"
    assert resolve_language(_request("/", headers={"accept-language": header}), CHINESE_FIRST) == "cn"


def test_missing_signals_use_default_language():
    assert resolve_language(_request("/"), ENGLISH_FIRST) == "en"
    assert resolve_language(_request("/"), CHINESE_FIRST) == "cn"


def test_client_hint_header_sits_between_cookie_and_accept_language():
    config = replace(ENGLISH_FIRST, client_hint_header="X-MoodShaker-Language")

    hinted = _request("/", headers={"x-moodshaker-language": "zh", "accept-language": "en"})
    assert resolve_language(hinted, config) == "zh"

    with_cookie = _request("/", cookies={COOKIE: "en"}, headers={"x-moodshaker-language": "zh"})
    assert resolve_language(with_cookie, config) == "en"

    bogus = _request("/", headers={"x-moodshaker-language": "klingon", "accept-language": "zh"})
    assert resolve_language(bogus, config) == "zh"


def test_client_hint_is_ignored_when_not_configured():
    request = _request("/", headers={"x-moodshaker-language": "zh"})
    assert resolve_language(request, ENGLISH_FIRST) == "en"


def test_parse_accept_language_keeps_listed_order():
    assert parse_accept_language("fr;q=0.9, en-GB;q=0.8 ,zh") == ["fr", "en-GB", "zh"]
    assert parse_accept_language(None) == []


def test_match_supported_language_uses_prefix():
    assert match_supported_language(["fr", "zh-Hant"], ("en", "zh")) == "zh"
    assert match_supported_language(["cn-x"], ("en", "cn")) == "cn"
    assert match_supported_language(["fr"], ("en", "zh")) is None


@pytest.mark.parametrize(
    "path, expected",
    [("/", "/en"), ("", "/en"), ("/about", "/en/about"), ("/cocktail/7", "/en/cocktail/7")],
)
def test_build_redirect_path(path, expected):
    assert build_redirect_path("en", path) == expected


def test_redirect_carries_preference_cookie():
    decision = decide(_request("/"), ENGLISH_FIRST)
    assert isinstance(decision, Redirect)
    assert decision.cookie.name == "moodshaker-language"
    assert decision.cookie.value == "en"
    assert decision.cookie.max_age == 60 * 60 * 24 * 365
    assert decision.cookie.path == "/"


def test_chinese_first_profile_uses_one_day_cookie():
    decision = decide(_request("/gallery"), CHINESE_FIRST)
    assert isinstance(decision, Redirect)
    assert decision.path == "/cn/gallery"
    assert decision.cookie.max_age == 60 * 60 * 24


def test_redirect_is_logged_at_debug(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="moodshaker.services.locale_gateway")
    decide(_request("/about"), ENGLISH_FIRST)
    assert "/en/about" in caplog.text


@pytest.mark.parametrize(
    "kwargs",
    [
        {"languages": (), "default_language": "en"},
        {"languages": ("en", "zh"), "default_language": "fr"},
        {"languages": ("en", "zh", "fr"), "default_language": "en"},
        {"languages": ("en", "en"), "default_language": "en"},
        {"languages": ("en", "zh"), "default_language": "en", "cookie_max_age": 0},
        {"languages": ("en", "zh"), "default_language": "en", "cookie_name": ""},
    ],
)
def test_gateway_config_rejects_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        GatewayConfig(**kwargs)
