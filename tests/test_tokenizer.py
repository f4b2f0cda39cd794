import unittest

from comparetable.extract.tokenizer import tokenize


def _serialize(rows):
    return "\n".join(",".join(r) for r in rows)


class TokenizeTests(unittest.TestCase):
    def test_plain_grid_survives_serialize(self) -> None:
        grids = [
            [["a"]],
            [["Feature", "Ours", "Theirs"], ["Speed", "Fast|good", "Slow|bad"]],
            [["x", "y"], ["1", "2"], ["3", "4"]],
        ]
        for rows in grids:
            with self.subTest(rows=rows):
                self.assertEqual(tokenize(_serialize(rows)), rows)

    def test_quoted_delimiter(self) -> None:
        self.assertEqual(tokenize('a,"b,c",d'), [["a", "b,c", "d"]])

    def test_escaped_quote(self) -> None:
        self.assertEqual(tokenize('"a""b"'), [['a"b']])

    def test_blank_lines_and_crlf_skip_empty_rows(self) -> None:
        self.assertEqual(tokenize("a,b\r\n\r\nc,d"), [["a", "b"], ["c", "d"]])
        self.assertEqual(tokenize("a\n\n\nb\n"), [["a"], ["b"]])

    def test_empty_input(self) -> None:
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("\r\n\n"), [])

    def test_last_row_without_newline(self) -> None:
        self.assertEqual(tokenize("h1,h2\nv1,v2"), [["h1", "h2"], ["v1", "v2"]])

    def test_cells_are_trimmed(self) -> None:
        self.assertEqual(tokenize("  a ,\tb  \n"), [["a", "b"]])
        self.assertEqual(tokenize('" padded "'), [["padded"]])

    def test_newline_inside_quotes_stays_in_cell(self) -> None:
        self.assertEqual(
            tokenize('x,"line1\nline2"\ny'),
            [["x", "line1\nline2"], ["y"]],
        )

    def test_trailing_delimiter_gives_empty_cell(self) -> None:
        self.assertEqual(tokenize("a,\n"), [["a", ""]])

    def test_unterminated_quote_is_tolerated(self) -> None:
        self.assertEqual(tokenize('a,"b,c\nd'), [["a", "b,c\nd"]])

    def test_ragged_rows_are_kept(self) -> None:
        self.assertEqual(tokenize("a,b,c\n1\n1,2,3,4"), [["a", "b", "c"], ["1"], ["1", "2", "3", "4"]])

    def test_stray_quote_mid_cell(self) -> None:
        self.assertEqual(tokenize('ab"c,d"e\n'), [["abc,de"]])


if __name__ == "__main__":
    unittest.main()
