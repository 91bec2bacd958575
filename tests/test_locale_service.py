import json

import pytest

from wordle_cli.exceptions import LocaleError
from wordle_cli.services import locale_service as locale_module
from wordle_cli.services.locale_service import (
    LocaleService, alphabet_for, format_message, load_catalogs, negotiate_locale, parse_catalog
)
from wordle_cli.utils.helpers import normalize_locale_tag


def write_catalog(directory, tag, alphabet="ABC", messages=None):
    data = {"alphabet": alphabet, "messages": messages or {"hello": "Hello {name}"}}
    (directory / f"{tag}.json").write_text(json.dumps(data), encoding="utf-8")


@pytest.mark.parametrize("tag, expected", [
    ("en", "en"),
    ("en_US.UTF-8", "en-us"),
    ("BG-bg", "bg-bg"),
    ("de_DE@euro", "de-de"),
    ("C", ""),
    ("POSIX", ""),
    ("", ""),
])
def test_normalize_locale_tag(tag, expected):
    assert normalize_locale_tag(tag) == expected


@pytest.mark.parametrize("requested, expected", [
    ("en", "en"),
    ("en-US", "en"),
    ("en_GB.UTF-8", "en"),
    ("bg", "bg"),
    ("pt-BR", "pt-br"),
    ("pt", "pt-br"),
    ("fr", "en"),
    ("", "en"),
    (None, "en"),
])
def test_negotiate_locale(requested, expected):
    assert negotiate_locale(requested, ["en", "bg", "pt-BR"], default="en") == expected


def test_negotiate_locale_without_match_or_default():
    assert negotiate_locale("fr", ["en", "bg"], default="de") is None
    assert negotiate_locale("fr", [], default="en") is None


def test_load_catalogs_is_read_only(tmp_path):
    write_catalog(tmp_path, "xx")
    catalogs = load_catalogs(str(tmp_path))
    assert list(catalogs) == ["xx"]
    with pytest.raises(TypeError):
        catalogs["yy"] = catalogs["xx"]
    with pytest.raises(TypeError):
        catalogs["xx"].messages["hello"] = "changed"


def test_invalid_json_is_fatal(tmp_path):
    (tmp_path / "xx.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(LocaleError):
        load_catalogs(str(tmp_path))


@pytest.mark.parametrize("data", [
    [],
    {"messages": {}},
    {"alphabet": "", "messages": {}},
    {"alphabet": "ABC"},
    {"alphabet": "ABC", "messages": {"key": 3}},
])
def test_malformed_catalog_is_fatal(data):
    with pytest.raises(LocaleError):
        parse_catalog("xx", data)


def test_resolve_bundle_falls_back_to_default(tmp_path):
    write_catalog(tmp_path, "en")
    write_catalog(tmp_path, "bg", alphabet="АБВ")
    service = LocaleService.from_directory(str(tmp_path), default_locale="en")
    assert service.resolve_bundle("bg-BG").locale == "bg"
    assert service.resolve_bundle("ja").locale == "en"


def test_resolve_bundle_without_any_match_is_fatal(tmp_path):
    write_catalog(tmp_path, "bg")
    service = LocaleService.from_directory(str(tmp_path), default_locale="en")
    with pytest.raises(LocaleError):
        service.resolve_bundle("fr")


def test_resolve_bundle_with_no_catalogs_is_fatal(tmp_path):
    service = LocaleService.from_directory(str(tmp_path))
    with pytest.raises(LocaleError):
        service.resolve_bundle("en")


def test_format_interpolates_named_arguments(tmp_path):
    write_catalog(tmp_path, "xx")
    bundle = load_catalogs(str(tmp_path))["xx"]
    assert bundle.format("hello", name="World") == "Hello World"
    assert format_message(bundle, "hello", name="there") == "Hello there"


def test_format_unknown_key_returns_key(tmp_path):
    write_catalog(tmp_path, "xx")
    bundle = load_catalogs(str(tmp_path))["xx"]
    assert bundle.format("no-such-key") == "no-such-key"
    assert bundle.format("no-such-key", name="x") == "no-such-key"


def test_format_unknown_key_warns_once(tmp_path, caplog):
    write_catalog(tmp_path, "xx")
    bundle = load_catalogs(str(tmp_path))["xx"]
    with caplog.at_level("WARNING", logger=locale_module.__name__):
        bundle.format("missing")
        bundle.format("missing")
    assert len([r for r in caplog.records if "missing" in r.getMessage()]) == 1


def test_format_missing_argument_keeps_placeholder(tmp_path):
    write_catalog(tmp_path, "xx")
    bundle = load_catalogs(str(tmp_path))["xx"]
    assert bundle.format("hello") == "Hello {name}"


def test_alphabet_is_ordered_and_uppercase(tmp_path):
    write_catalog(tmp_path, "xx", alphabet="cab")
    bundle = load_catalogs(str(tmp_path))["xx"]
    assert alphabet_for(bundle) == ("C", "A", "B")


def test_packaged_catalogs_share_message_keys(locale_service):
    en = locale_service.resolve_bundle("en")
    bg = locale_service.resolve_bundle("bg")
    assert set(en.messages) == set(bg.messages)
    assert len(en.alphabet) == 26
    assert len(bg.alphabet) == 30


def test_packaged_catalog_messages(en_bundle):
    assert en_bundle.format("wrong-length", word_length=5) == "Your guess must be 5 letters."
    assert en_bundle.format("not-in-dictionary", guess="ZZZZZ") == "ZZZZZ isn't in the dictionary."
    assert en_bundle.format("win", word="APPLE", n_tries=1) == \
        "Correct! You guessed the word APPLE in 1 tries."


def test_global_locale_service(tmp_path, monkeypatch):
    monkeypatch.setattr(locale_module, "_locale_service", None)
    write_catalog(tmp_path, "en")
    assert locale_module.get_locale_service() is None
    service = locale_module.initialize_locale_service(str(tmp_path), default_locale="en")
    assert locale_module.get_locale_service() is service
