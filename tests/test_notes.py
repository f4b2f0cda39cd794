import unittest

from comparetable.extract.notes import build_notes_index, parse_notes


class NotesIndexTests(unittest.TestCase):
    def test_header_is_dropped(self) -> None:
        notes = parse_notes("id,text\n1,First\n2,Second\n")
        self.assertEqual(notes, {"1": "First", "2": "Second"})

    def test_keys_are_raw_text(self) -> None:
        notes = parse_notes("id,text\n01,Zero-padded\n1,Plain\n")
        self.assertEqual(set(notes), {"01", "1"})

    def test_last_duplicate_wins(self) -> None:
        self.assertEqual(parse_notes("id,text\n3,old\n3,new\n"), {"3": "new"})

    def test_short_rows_do_not_raise(self) -> None:
        self.assertEqual(build_notes_index([["id", "text"], ["4"], []]), {"4": ""})

    def test_quoted_note_text(self) -> None:
        notes = parse_notes('id,text\n1,"Measured at 25°C, ""typical"" load"\n')
        self.assertEqual(notes["1"], 'Measured at 25°C, "typical" load')

    def test_empty_and_header_only(self) -> None:
        self.assertEqual(parse_notes(""), {})
        self.assertEqual(parse_notes("id,text\n"), {})


if __name__ == "__main__":
    unittest.main()
