"""Tests for file suggestion extraction."""

from localchat.domain.chat import FileSuggestion
from localchat.suggestions import extract_file_suggestions, render_suggestion_preview


def test_extract_single_fence():
    text = '```file path="a/b.txt"\nhello\nworld```'

    assert extract_file_suggestions(text) == [
        FileSuggestion(path="a/b.txt", content="hello\nworld")
    ]


def test_extract_no_fences():
    assert extract_file_suggestions("Just prose with ```python\ncode\n``` inside.") == []


def test_extract_multiple_fences_in_order():
    text = (
        "Here are two files.\n\n"
        '```file path="src/one.py"\nprint(1)\n```\n\n'
        "And the second:\n\n"
        '```file path="src/two.py"\nprint(2)\n```\n'
    )

    suggestions = extract_file_suggestions(text)

    assert [s.path for s in suggestions] == ["src/one.py", "src/two.py"]
    assert suggestions[0].content == "print(1)\n"
    assert suggestions[1].content == "print(2)\n"


def test_extract_keeps_empty_content():
    suggestions = extract_file_suggestions('```file path="empty.txt"\n```')

    assert suggestions == [FileSuggestion(path="empty.txt", content="")]


def test_extract_trims_path_and_skips_blank_path():
    text = '```file path="  notes.md "\nA\n```\n```file path="   "\nB\n```'

    suggestions = extract_file_suggestions(text)

    assert suggestions == [FileSuggestion(path="notes.md", content="A\n")]


def test_extract_handles_crlf_line_endings():
    text = '```file path="win.txt"\r\nline\r\n```'

    assert extract_file_suggestions(text) == [
        FileSuggestion(path="win.txt", content="line\r\n")
    ]


def test_render_suggestion_preview_truncates_long_content():
    content = "\n".join(f"line {i}" for i in range(12))
    preview = render_suggestion_preview(FileSuggestion(path="long.txt", content=content))

    lines = preview.splitlines()
    assert lines[0].startswith("long.txt (")
    assert "  | line 0" in lines
    assert "  | line 8" not in lines
    assert lines[-1] == "  | ... (4 more lines)"
