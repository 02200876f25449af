"""
Unit Tests: Storage keys

Key format, sanitization, uniqueness and traversal safety.
"""

import re

import pytest

from docstore.storage import keys
from docstore.storage.keys import (
    generate_key,
    is_safe_key,
    sanitize_basename,
    split_filename,
)

KEY_PATTERN = re.compile(r"^(\d+)-([0-9a-f]{16})-(.*)$")


class TestSanitize:
    """Test base name sanitization."""

    def test_keeps_allowed_characters(self):
        assert sanitize_basename("Tax-Return_2023") == "Tax-Return_2023"

    def test_replaces_each_disallowed_character(self):
        assert sanitize_basename("my file (v2).final") == "my_file__v2__final"

    def test_non_ascii_replaced(self):
        assert sanitize_basename("reçu") == "re_u"

    def test_empty(self):
        assert sanitize_basename("") == ""


class TestSplitFilename:
    """Test extension and base extraction."""

    def test_simple(self):
        assert split_filename("doc.pdf") == ("doc", ".pdf")

    def test_only_last_extension(self):
        assert split_filename("archive.tar.gz") == ("archive.tar", ".gz")

    def test_directories_dropped(self):
        assert split_filename("a/b/c.pdf") == ("c", ".pdf")

    def test_backslash_directories_dropped(self):
        assert split_filename("a\\b\\c.pdf") == ("c", ".pdf")

    def test_dotfile_has_no_extension(self):
        assert split_filename(".pdf") == (".pdf", "")

    def test_no_extension(self):
        assert split_filename("README") == ("README", "")

    def test_nul_in_extension_moves_to_base(self):
        assert split_filename("report.p\x00df") == ("report.p\x00df", "")


class TestGenerateKey:
    """Test key composition."""

    def test_format(self):
        key = generate_key("Scan 01.PDF")
        match = KEY_PATTERN.match(key)

        assert match is not None
        assert match.group(3) == "Scan_01.PDF"

    def test_extension_preserved_verbatim(self):
        assert generate_key("photo.JPeG").endswith("-photo.JPeG")

    def test_timestamp_is_current_millis(self):
        import time

        before = int(time.time() * 1000)
        key = generate_key("a.pdf")
        after = int(time.time() * 1000)

        timestamp = int(KEY_PATTERN.match(key).group(1))
        assert before <= timestamp <= after

    def test_same_filename_gives_distinct_keys(self):
        generated = {generate_key("same.pdf") for _ in range(200)}
        assert len(generated) == 200

    def test_timestamps_never_decrease(self, monkeypatch):
        first = int(KEY_PATTERN.match(generate_key("a")).group(1))
        # Clock stepping backwards
        monkeypatch.setattr(keys.time, "time_ns", lambda: 1_000_000)
        second = int(KEY_PATTERN.match(generate_key("a")).group(1))

        assert second >= first

    @pytest.mark.parametrize(
        "filename",
        [
            "../../etc/passwd",
            "a/b/c.pdf",
            "..\\..\\windows\\system.ini",
            "",
            "..",
            ".",
            "/",
            "!!!@@@###",
            ".pdf",
            "name\x00.pdf",
            "report.p\x00df",
        ],
    )
    def test_adversarial_filenames_give_safe_keys(self, filename):
        key = generate_key(filename)

        assert is_safe_key(key)
        assert ".." not in key.split("/")
        assert KEY_PATTERN.match(key)

    def test_empty_filename_has_empty_base(self):
        key = generate_key("")
        assert key.endswith("-")

    def test_special_characters_only(self):
        assert generate_key("$%^&.pdf").endswith("-____.pdf")


class TestIsSafeKey:
    """Test validation of caller-supplied keys."""

    @pytest.mark.parametrize("key", ["", ".", "..", "../x", "a/b", "a\\b", "a\x00b"])
    def test_rejects_unsafe(self, key):
        assert is_safe_key(key) is False

    def test_accepts_generated(self):
        assert is_safe_key(generate_key("x.pdf")) is True
