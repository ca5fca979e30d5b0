import pytest

from modules.checklist.urls import build_url


@pytest.mark.unit
@pytest.mark.parametrize(
    "base_url,path,expected",
    [
        ("http://x", "/o/r/pull/1", "http://x/o/r/pull/1"),
        ("http://x/", "/o/r/pull/1", "http://x/o/r/pull/1"),
        ("https://example.com/checklist/", "o/r/pull/1/qa", "https://example.com/checklist/o/r/pull/1/qa"),
    ],
)
def test_build_url(base_url, path, expected):
    assert build_url(base_url, path) == expected
