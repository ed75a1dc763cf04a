import pytest

from falsrue.dialog import DIALOGS, DialogFrame, dialog_frames, read_line


def test_frames_grow_one_character_at_a_time():
    frames = list(dialog_frames("abc"))
    assert [f.text for f in frames] == ["a", "ab", "abc"]
    assert not any(f.after_pause for f in frames)


def test_newline_pauses_and_restarts():
    frames = list(dialog_frames("ab\ncd"))
    assert frames == [
        DialogFrame("a"),
        DialogFrame("ab"),
        DialogFrame("c", True),
        DialogFrame("cd"),
    ]


def test_trailing_newline_ends_dialog():
    frames = list(dialog_frames(DIALOGS[3]))
    assert frames[-1].text == DIALOGS[3].rstrip("\n")


def test_double_newline_shows_second_newline():
    frames = list(dialog_frames("a\n\nb"))
    assert [f.text for f in frames] == ["a", "\n", "\nb"]


def test_frame_count_matches_visible_characters():
    text = DIALOGS[1]
    frames = list(dialog_frames(text))
    assert len(frames) == len(text) - text.count("\n")
    assert sum(f.after_pause for f in frames) == text.count("\n")


def test_read_line(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("first\nsecond\nthird\n", encoding="utf-8")
    assert read_line(path, 1) == "first"
    assert read_line(path, 3) == "third"
    assert read_line(path, 4) == ""


@pytest.mark.parametrize("line", [0, -2])
def test_read_line_rejects_non_positive(tmp_path, line):
    path = tmp_path / "lines.txt"
    path.write_text("x\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_line(path, line)


def test_read_line_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_line(tmp_path / "absent.txt", 1)