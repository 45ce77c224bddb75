"""Test text insertion and deletion on the TextModel."""

import pytest

from inedit.model import TextModel
from inedit.selection import Position


def lines(model):
    return model.buffer.lines()


class TestInsertion:
    def test_insert_char_advances_focus(self):
        """Each inserted character moves the focus right."""
        model = TextModel()
        for c in "hey":
            model.insert_char(c)
        assert lines(model) == ["hey"]
        assert model.position == Position(0, 3)

    def test_insert_newline_starts_next_line(self):
        """Inserting a newline moves to the start of the new line."""
        model = TextModel("abcdef", Position(0, 3))
        model.insert_char("\n")
        assert lines(model) == ["abc", "def"]
        assert model.position == Position(1, 0)

    def test_insert_multiline_string(self):
        """A multi-line insert ends after its last segment."""
        model = TextModel("[]", Position(0, 1))
        model.insert_str("one\ntwo\nthree")
        assert lines(model) == ["[one", "two", "three]"]
        assert model.position == Position(2, 5)

    def test_insert_normalizes_carriage_returns(self):
        """Inserted CR and CRLF become newlines."""
        model = TextModel()
        model.insert_str("a\r\nb\rc")
        assert lines(model) == ["a", "b", "c"]
        assert model.position == Position(2, 1)

    def test_insert_replaces_selection(self):
        """Inserting with a selection replaces it."""
        model = TextModel("hello world", Position(0, 0))
        for _ in range(5):
            model.move_right(extend_selection=True)
        model.insert_str("howdy")
        assert model.contents() == "howdy world"
        assert model.selection.anchor is None
        assert model.position == Position(0, 5)

    def test_insert_clamps_stale_column(self):
        """Inserting from a stale column inserts at the line end."""
        model = TextModel("a long line\nab", Position(0, 10))
        model.move_down()
        assert model.position == Position(1, 10)
        model.insert_char("c")
        assert lines(model) == ["a long line", "abc"]
        assert model.position == Position(1, 3)


class TestDeletion:
    def test_backspace_joins_lines(self):
        """Backspace at column 0 joins with the previous line."""
        model = TextModel("abc\ndef", Position(1, 0))
        model.delete_backward()
        assert lines(model) == ["abcdef"]
        assert model.position == Position(0, 3)

    def test_backspace_within_line(self):
        """Backspace removes the character before the cursor."""
        model = TextModel("abc", Position(0, 2))
        model.delete_backward()
        assert lines(model) == ["ac"]
        assert model.position == Position(0, 1)

    def test_backspace_at_start_of_buffer_is_noop(self):
        """Backspace at (0, 0) does nothing."""
        model = TextModel("abc")
        model.delete_backward()
        assert lines(model) == ["abc"]
        assert model.position == Position(0, 0)

    def test_delete_forward_within_line(self):
        """Delete removes the character under the cursor."""
        model = TextModel("abc", Position(0, 1))
        model.delete_forward()
        assert lines(model) == ["ac"]
        assert model.position == Position(0, 1)

    def test_delete_forward_joins_next_line(self):
        """Delete at the line end joins the next line."""
        model = TextModel("abc\ndef", Position(0, 3))
        model.delete_forward()
        assert lines(model) == ["abcdef"]
        assert model.position == Position(0, 3)

    def test_delete_forward_at_end_of_buffer_is_noop(self):
        """Delete at the very end does nothing."""
        model = TextModel("abc", Position(0, 3))
        model.delete_forward()
        assert lines(model) == ["abc"]

    def test_delete_selection_across_lines(self):
        """Delete removes a selection spanning lines."""
        model = TextModel("one\ntwo\nthree", Position(2, 2))
        model.selection.anchor = Position(0, 1)
        model.delete_forward()
        assert lines(model) == ["oree"]
        assert model.position == Position(0, 1)
        assert model.selection.anchor is None

    def test_backspace_deletes_selection_to_its_start(self):
        """Backspace with a selection collapses to its start."""
        model = TextModel("one\ntwo\nthree", Position(0, 1))
        model.selection.anchor = Position(2, 2)
        model.delete_backward()
        assert lines(model) == ["oree"]
        assert model.position == Position(0, 1)

    def test_delete_line_range(self):
        """Removing columns before the cursor shifts it left."""
        model = TextModel("    text", Position(0, 6))
        model.delete_line_range(0, 4)
        assert lines(model) == ["text"]
        assert model.position == Position(0, 2)

    def test_remove_line(self):
        """Removing the cursor's line moves it to a remaining line."""
        model = TextModel("a\nbb\nccc", Position(2, 3))
        assert model.remove_line(2) == "ccc"
        assert lines(model) == ["a", "bb"]
        assert model.position == Position(1, 2)


class TestInverseProperties:
    @pytest.mark.parametrize("text,column,inserted", [
        ("abcdef", 3, "xyz"),
        ("abcdef", 0, "x\ny"),
        ("", 0, "hello\n"),
        ("line", 4, "\n\n"),
    ])
    def test_insert_then_delete_forward_restores(self, text, column, inserted):
        """Deleting what was just inserted restores the text."""
        model = TextModel(text, Position(0, column))
        model.insert_str(inserted)
        model.selection.focus = Position(0, column)
        for _ in inserted:
            model.delete_forward()
        assert model.contents() == TextModel(text).contents()
        assert lines(model) == [text]

    @pytest.mark.parametrize("k", [0, 2, 6])
    def test_split_then_backspace_restores(self, k):
        """Enter then Backspace restores the original line."""
        model = TextModel("abcdef", Position(0, k))
        model.insert_char("\n")
        model.delete_backward()
        assert lines(model) == ["abcdef"]
        assert model.position == Position(0, k)


class TestContents:
    def test_strips_single_trailing_newline(self):
        """contents() drops exactly one trailing newline."""
        assert TextModel("a\nb\n").contents() == "a\nb"
        assert TextModel("a\n\n").contents() == "a\n"

    def test_empty(self):
        """An empty model has empty contents."""
        assert TextModel().contents() == ""

    def test_selection_text(self):
        """The selected text spans lines in document order."""
        model = TextModel("one\ntwo\nthree", Position(2, 2))
        assert model.current_selection_text() is None
        model.selection.anchor = Position(0, 1)
        assert model.current_selection_text() == "ne\ntwo\nth"

    def test_counts(self):
        """Line and character counts match the text."""
        model = TextModel("ab\ncd")
        assert model.line_count() == 2
        assert model.char_count() == 5
        assert model.line(1) == "cd"

    def test_initial_cursor_is_clamped(self):
        """An initial cursor past the text is clamped."""
        model = TextModel("ab\ncd", Position(7, 9))
        assert model.position == Position(1, 2)


class TestStaleSelectionStart:
    """Selections whose start column lies past the end of its line."""

    def make_model(self):
        model = TextModel("ab\ncdefgh", Position(1, 5))
        model.move_up(extend_selection=True)
        assert model.position == Position(0, 5)
        return model

    def test_delete_lands_on_clamped_start(self):
        """Deleting the selection leaves the cursor at the join point."""
        model = self.make_model()
        model.delete_backward()
        assert lines(model) == ["abh"]
        assert model.position == Position(0, 2)

    def test_replace_inserts_at_clamped_start(self):
        """Typing over the selection puts the text where the selection began."""
        model = self.make_model()
        model.insert_char("X")
        assert lines(model) == ["abXh"]
        assert model.position == Position(0, 3)


class TestDeleteLineRangeSelection:
    """Removing columns keeps a selection on the same characters."""

    def test_selection_after_removed_range_moves_with_text(self):
        """A selection right of the removed columns still selects the same text."""
        model = TextModel("    abcd", Position(0, 6))
        model.move_to_line_end(extend_selection=True)
        assert model.current_selection_text() == "cd"
        model.delete_line_range(0, 4)
        assert lines(model) == ["abcd"]
        assert model.selection.anchor == Position(0, 2)
        assert model.position == Position(0, 4)
        assert model.current_selection_text() == "cd"

    def test_selection_inside_removed_range_is_dropped(self):
        """A selection that is removed entirely leaves no empty anchor behind."""
        model = TextModel("    abcd", Position(0, 1))
        model.move_right(extend_selection=True)
        model.move_right(extend_selection=True)
        model.delete_line_range(0, 4)
        assert model.selection.anchor is None
        assert model.position == Position(0, 0)
