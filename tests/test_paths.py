import pytest

from pdflinks.core.links import (
    clean_path,
    decode_and_clean_path,
    decode_uri_component,
    encode_uri_component,
    encode_uri_pathname,
    is_external_link,
    is_pdf_path,
)


def test_encode_uri_component() -> None:
    assert encode_uri_component("a b") == "a%20b"
    assert encode_uri_component("page=10") == "page%3D10"
    assert encode_uri_component("a/b&c#d") == "a%2Fb%26c%23d"
    assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_uri_component("é") == "%C3%A9"


def test_encode_uri_pathname_keeps_slashes() -> None:
    assert encode_uri_pathname("/docs/my file.txt") == "/docs/my%20file.txt"
    assert encode_uri_pathname("C:\\docs") == "C%3A%5Cdocs"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a%20b", "a b"),
        ("%C3%A9t%C3%A9", "été"),
        ("plain", "plain"),
        ("100%", "100%"),
        ("%%", "%%"),
        ("%2", "%2"),
        ("%zz", "%zz"),
        ("%FF", "%FF"),
    ],
)
def test_decode_uri_component(text, expected) -> None:
    assert decode_uri_component(text) == expected


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a/../b", "b"),
        ("a/../../b", "../b"),
        ("/a//b/./c", "/a/b/c"),
        ("/../a", "/a"),
        ("/a/b/../c.pdf", "/a/c.pdf"),
        ("../../a/../b", "../../b"),
        ("a/..", "."),
        ("", "."),
        (".", "."),
        ("/", "/"),
        ("/..", "/"),
        ("///doc.pdf", "/doc.pdf"),
        ("dir/", "dir"),
        ("C:\\docs\\document.pdf", "C:\\docs\\document.pdf"),
    ],
)
def test_clean_path(path, expected) -> None:
    assert clean_path(path) == expected
    assert clean_path(clean_path(path)) == clean_path(path)


def test_decode_and_clean_path() -> None:
    assert decode_and_clean_path("/a/b%20c/../d.pdf") == "/a/d.pdf"
    assert decode_and_clean_path("%2E%2E/x") == "../x"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("http://example.com", True),
        ("mailto:someone@example.com", True),
        ("svn+ssh://host/repo", True),
        ("a1-b.c:rest", True),
        ("file:notes.txt", True),
        ("C:\\docs\\a.pdf", False),
        ("ab:c", False),
        ("1ab:c", False),
        ("ht_p://x", False),
        ("no scheme here", False),
        ("", False),
    ],
)
def test_is_external_link(text, expected) -> None:
    assert is_external_link(text) is expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("doc.pdf", True),
        ("DOC.PDF", True),
        (".pdf", True),
        ("pdf", False),
        ("doc.pdfx", False),
        ("", False),
    ],
)
def test_is_pdf_path(text, expected) -> None:
    assert is_pdf_path(text) is expected
