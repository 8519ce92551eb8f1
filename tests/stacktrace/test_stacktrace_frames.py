"""Tests for stacktrace.frames: filtering, normalization and rendering."""

from __future__ import annotations

import pytest

from assertkit.stacktrace import Frame, filter_frames, is_source_frame, normalize_function, render_frames


class TestNormalizeFunction:
    @pytest.mark.parametrize("raw, expected", [
        ("assertkit/asserts/asserter.Asserter.equal", "asserter.Asserter.equal"),
        ("pkg/mod.func", "mod.func"),
        ("mod.func", "mod.func"),
        ("func", "func"),
        ("a/b/c/d.<lambda>", "d.<lambda>"),
    ])
    def test_strips_path(self, raw, expected):
        assert normalize_function(raw) == expected

    def test_trailing_slash_kept(self):
        assert normalize_function("pkg/") == "pkg/"


class TestIsSourceFrame:
    def test_source(self):
        assert is_source_frame(Frame("main.main", "/a/main.py", 10)) is True

    @pytest.mark.parametrize("frame", [
        Frame("x", "invalid.txt", 20),
        Frame("x", "<string>", 3),
        Frame("", "/a/main.py", 10),
        Frame("x", "", 10),
        Frame("x", "/a/main.py", 0),
        Frame("x", "/a/main.py", -4),
    ])
    def test_rejected(self, frame):
        assert is_source_frame(frame) is False


class TestFilterFrames:
    def test_drops_non_source_file(self):
        frames = [
            Frame("main.main", "/a/main.py", 10),
            Frame("x", "invalid.txt", 20),
        ]
        result = filter_frames(frames)
        assert len(result) == 1
        assert result[0].function == "main.main"

    def test_accepts_tuples_and_normalizes(self):
        result = filter_frames([
            ("pkg/sub/mod.Cls.method", "/src/pkg/sub/mod.py", 42),
            ("<frozen>", "<frozen importlib._bootstrap>", 7),
        ])
        assert result == (Frame("mod.Cls.method", "/src/pkg/sub/mod.py", 42),)

    def test_keeps_order(self):
        frames = [Frame(f"m.f{i}", f"/x/m{i}.py", i + 1) for i in range(5)]
        assert [f.function for f in filter_frames(frames)] == ["m.f0", "m.f1", "m.f2", "m.f3", "m.f4"]

    def test_empty(self):
        assert filter_frames([]) == ()

    def test_every_retained_frame_is_well_formed(self):
        frames = [
            Frame("a/b.c", "/b.py", 1),
            Frame("d", "/d.py", 0),
            Frame("", "/e.py", 3),
            Frame("f/g.h", "/g.pyc", 2),
        ]
        for frame in filter_frames(frames):
            assert frame.line > 0
            assert frame.file.endswith(".py")
            assert "/" not in frame.function


class TestRenderFrames:
    def test_one_line_per_frame(self):
        frames = [Frame("mod.a", "/x/mod.py", 3), Frame("mod.b", "/x/mod.py", 9)]
        assert render_frames(frames) == "/x/mod.py:3 mod.a\n/x/mod.py:9 mod.b"

    def test_empty(self):
        assert render_frames([]) == ""

    def test_frame_str(self):
        assert str(Frame("main.main", "/a/main.py", 10)) == "/a/main.py:10 main.main"
