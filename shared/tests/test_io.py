"""
Tests for the matrix text codec.

Covers:
1. Flat strings: row-major reshaping, dimension checks, bad tokens
2. Interchange documents: comments, wrapped values, short reads, bad headers
3. Bundled fixtures match the built-in constants
4. Output formatting: flat, document, comparison table
5. Round trips through the formatters
"""

import io

import numpy as np
import pytest
from numpy.testing import assert_array_equal, assert_allclose

from smas.config import DEFAULT_MATRIX_PATH, REFERENCE_REACTIONS_PATH, FloatFormat
from smas.errors import FormatError, LengthMismatchError, MatrixIOError, ParseError
from smas.io import (
    COMPARISON_HEADER,
    MatrixDocument,
    format_comparison,
    format_document,
    format_flat,
    format_float,
    load_matrix,
    load_vector,
    parse_document,
    parse_flat,
    parse_matrix,
    parse_vector,
    read_document,
    write_text,
)
from smas.matrices import R_STD_015, S_MAT


class TestParseFlat:
    """Tests for whitespace-delimited strings."""

    def test_row_major_fidelity(self):
        """Element [1, 2] of a 2 x 3 matrix is the sixth token, not the third."""
        M = parse_flat("1 2 3 4 5 6", 2, 3)
        assert M.shape == (2, 3)
        assert M[1, 2] == 6
        assert M[0, 2] == 3
        assert_array_equal(M[1], [4, 5, 6])

    def test_any_whitespace_separates(self):
        M = parse_flat("1\t2\n 3   4\r\n5 6 ", 3, 2)
        assert_array_equal(M, [[1, 2], [3, 4], [5, 6]])

    def test_vector_without_dimensions(self):
        v = parse_flat("1e-3 -2.5 +4 1.8217e+05")
        assert v.shape == (4,)
        assert_array_equal(v, [1e-3, -2.5, 4.0, 1.8217e5])

    def test_column_and_row_vectors(self):
        assert parse_flat("1 2 3", 3, 1).shape == (3, 1)
        assert parse_flat("1 2 3", 1, 3).shape == (1, 3)
        assert parse_flat("7", 1, 1)[0, 0] == 7

    def test_missing_dimension_is_inferred(self):
        assert parse_flat("1 2 3 4 5 6", rows=3).shape == (3, 2)
        assert parse_flat("1 2 3 4 5 6", cols=3).shape == (2, 3)

    def test_count_mismatch_fails(self):
        with pytest.raises(FormatError):
            parse_flat("1 2 3 4 5", 2, 3)
        with pytest.raises(FormatError):
            parse_flat("1 2 3 4 5 6 7", 2, 3)
        with pytest.raises(FormatError):
            parse_flat("1 2 3 4 5", rows=2)

    def test_empty_input_fails(self):
        with pytest.raises(FormatError):
            parse_flat("")
        with pytest.raises(FormatError):
            parse_flat("   \n\t ", 1, 1)

    def test_zero_dimension_fails(self):
        with pytest.raises(FormatError):
            parse_flat("1 2", 0, 2)
        with pytest.raises(FormatError):
            parse_flat("1 2", 2, 0)

    @pytest.mark.parametrize("rows", [float("inf"), float("nan"), 2.0, "2"])
    def test_non_integer_dimension_fails(self, rows):
        with pytest.raises(FormatError):
            parse_flat("1 2", rows, 1)

    @pytest.mark.parametrize("text", ["1 2 x", "1 2 3,4", "1 2 0x10", "1 1_000"])
    def test_invalid_token_fails(self, text):
        with pytest.raises(ParseError):
            parse_flat(text)

    def test_parse_error_names_token(self):
        with pytest.raises(ParseError, match="'abc'"):
            parse_vector("1.0 abc 2.0")

    def test_parse_matrix_full_default_matrix(self):
        """The default matrix as a single flat string parses back exactly."""
        text = DEFAULT_MATRIX_PATH.read_text().splitlines()
        body = " ".join(line for line in text if not line.startswith("%"))
        # drop the dimension line tokens
        body = body.split(None, 2)[2]
        M = parse_matrix(body, 39, 28)
        assert_array_equal(M, S_MAT)

    def test_errors_are_value_errors(self):
        """Callers that only know builtin exceptions can still catch these."""
        with pytest.raises(ValueError):
            parse_flat("1 2 3", 2, 2)
        with pytest.raises(ValueError):
            parse_flat("nope")


class TestReadDocument:
    """Tests for interchange documents."""

    def test_basic_document(self):
        doc = parse_document("% a 2 x 3 matrix\n2 3\n1 2 3\n4 5 6\n")
        assert doc.shape == (2, 3)
        assert doc.header == ["a 2 x 3 matrix"]
        assert_array_equal(doc.as_matrix(), [[1, 2, 3], [4, 5, 6]])

    def test_values_wrap_across_lines(self):
        """Line boundaries between values carry no meaning."""
        doc = parse_document("2 3\n1\n2 3 4\n\n5\n   6")
        assert_array_equal(doc.as_matrix(), [[1, 2, 3], [4, 5, 6]])

    def test_comments_and_blank_lines(self):
        text = (
            "%%MatrixMarket matrix array real general\n"
            "   % indented comment\n"
            "\n"
            "3 1\n"
            "% comment between values\n"
            "1.5\n"
            "-2.5\n"
            "3.5\n"
        )
        doc = parse_document(text)
        assert doc.header == ["MatrixMarket matrix array real general", "indented comment"]
        assert_array_equal(doc.as_vector(), [1.5, -2.5, 3.5])

    def test_extra_dimension_tokens_ignored(self):
        doc = parse_document("% h\n3 1 3\n  1.0\n  2.0\n  3.0")
        assert doc.shape == (3, 1)

    def test_short_read(self):
        with pytest.raises(FormatError, match="short read"):
            parse_document("2 3\n1 2 3 4 5")

    def test_too_many_values(self):
        with pytest.raises(FormatError, match="short read"):
            parse_document("2 2\n1 2 3 4 5")

    def test_dimensions_without_values(self):
        with pytest.raises(FormatError):
            parse_document("% header only\n4 1\n")

    def test_empty_document(self):
        with pytest.raises(FormatError):
            parse_document("")
        with pytest.raises(FormatError):
            parse_document("% only\n% comments\n")

    @pytest.mark.parametrize("dims", ["3", "3 x", "3.0 1", "-3 1", "0 1", "1 0", "1_0 1"])
    def test_bad_dimension_line(self, dims):
        with pytest.raises(FormatError):
            parse_document(f"% h\n{dims}\n1 2 3\n")

    def test_bad_value_reports_line(self):
        with pytest.raises(ParseError, match="line 3"):
            parse_document("% h\n2 1\n1.0 oops\n")

    def test_read_from_path(self, tmp_path):
        path = tmp_path / "m.txt"
        path.write_text("% test\n2 2\n1 2\n3 4\n")
        assert_array_equal(load_matrix(path), [[1, 2], [3, 4]])
        assert_array_equal(load_matrix(str(path)), [[1, 2], [3, 4]])

    def test_read_from_stream(self):
        stream = io.StringIO("% s\n1 3\n7 8 9\n")
        assert_array_equal(load_vector(stream), [7, 8, 9])

    def test_missing_file(self, tmp_path):
        with pytest.raises(MatrixIOError):
            read_document(tmp_path / "does_not_exist.txt")

    def test_missing_file_is_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_vector(tmp_path / "does_not_exist.txt")

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(MatrixIOError):
            read_document(tmp_path)

    def test_load_vector_rejects_matrix(self):
        with pytest.raises(FormatError):
            load_vector(io.StringIO("2 2\n1 2 3 4"))

    def test_document_rejects_inconsistent_values(self):
        with pytest.raises(FormatError):
            MatrixDocument(rows=2, cols=2, values=np.zeros(3))

    def test_as_matrix_returns_copy(self):
        doc = parse_document("1 2\n1 2")
        M = doc.as_matrix()
        M[0, 0] = 99
        assert doc.values[0] == 1


class TestBundledData:
    """The shipped fixture files must agree with the built-in constants."""

    def test_default_matrix_file(self):
        S = load_matrix(DEFAULT_MATRIX_PATH)
        assert S.shape == (39, 28)
        assert_array_equal(S, S_MAT)

    def test_reference_reaction_file(self):
        r = load_vector(REFERENCE_REACTIONS_PATH)
        assert r.shape == (28,)
        assert_array_equal(r, R_STD_015)


class TestFormatting:
    """Tests for output formatting."""

    def test_format_float(self):
        assert format_float(0.001, FloatFormat.DECIMAL, 5) == "0.00100"
        assert format_float(0.001, FloatFormat.SCIENTIFIC, 5) == "1.00000e-03"
        assert format_float(182170.0, "scientific", 2) == "1.82e+05"
        assert format_float(-2.5, "decimal", 0) == "-2"

    def test_format_flat(self):
        assert format_flat([1000.0, -0.001], FloatFormat.SCIENTIFIC, 2) == "1.00e+03 -1.00e-03"
        assert format_flat([1.0, 2.5], "decimal", 1) == "1.0 2.5"

    def test_format_flat_no_trailing_whitespace(self):
        text = format_flat(np.arange(5.0))
        assert text == text.strip()
        assert len(text.split(" ")) == 5

    def test_format_flat_accepts_column(self):
        assert format_flat(np.array([[1.0], [2.0]]), "decimal", 1) == "1.0 2.0"

    def test_format_document(self):
        text = format_document([1.0, -2.5], FloatFormat.DECIMAL, 2, "hdr")
        assert text == "% hdr\n2 1 2\n  1.00\n  -2.50"

    def test_format_document_default_scientific(self):
        text = format_document([12.0])
        assert text == "% \n1 1 1\n  1.20000e+01"

    def test_format_comparison_layout(self):
        text = format_comparison([1.0, 2.0], [1.0005, 3.0], FloatFormat.DECIMAL, 4, 1e-3)
        lines = text.split("\n")
        assert lines[0] == COMPARISON_HEADER
        assert lines[1] == "  1.0000\t1.0005\t0.0005\ttrue"
        assert lines[2] == "  2.0000\t3.0000\t1.0000\tfalse"
        assert not text.endswith("\n")

    def test_comparison_flag_depends_on_epsilon(self):
        loose = format_comparison([1.0], [1.0005], epsilon=1e-3)
        tight = format_comparison([1.0], [1.0005], epsilon=1e-4)
        assert loose.split("\n")[1].endswith("\ttrue")
        assert tight.split("\n")[1].endswith("\tfalse")

    def test_comparison_flag_is_strict(self):
        text = format_comparison([0.0], [0.5], epsilon=0.5)
        assert text.endswith("\tfalse")

    def test_comparison_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            format_comparison([1.0, 2.0], [1.0])
        with pytest.raises(IndexError):
            format_comparison([1.0], [1.0, 2.0])

    def test_invalid_options(self):
        with pytest.raises(ValueError):
            format_flat([1.0], "engineering", 3)
        with pytest.raises(ValueError):
            format_flat([1.0], "decimal", -1)
        with pytest.raises(ValueError):
            format_flat(np.zeros((2, 2)))
        with pytest.raises(ValueError):
            format_flat([])


class TestRoundTrip:
    """Formatted output reads back to the same values."""

    values = np.array([1.5, -2.25e-7, 303900.0, 0.0, 13086.0, -7.9655e-10])

    @pytest.mark.parametrize("precision", [2, 5, 9])
    def test_decimal_flat(self, precision):
        text = format_flat(self.values, FloatFormat.DECIMAL, precision)
        back = parse_flat(text, self.values.size, 1)
        assert back.shape == (self.values.size, 1)
        assert np.all(np.abs(back[:, 0] - self.values) <= 10.0 ** -precision)

    @pytest.mark.parametrize("precision", [3, 5, 12])
    def test_scientific_flat(self, precision):
        text = format_flat(self.values, FloatFormat.SCIENTIFIC, precision)
        back = parse_flat(text, self.values.size, 1)[:, 0]
        assert_allclose(back, self.values, rtol=10.0 ** -precision, atol=0)

    def test_document(self):
        text = format_document(self.values, FloatFormat.SCIENTIFIC, 16, "round trip")
        doc = parse_document(text)
        assert doc.header == ["round trip"]
        assert doc.shape == (self.values.size, 1)
        assert_array_equal(doc.as_vector(), self.values)

    def test_document_multiline_header(self):
        text = format_document([1.0, 2.0], "decimal", 2, "line one\nline two")
        assert text.startswith("% line one\n% line two\n2 1 2\n")
        doc = parse_document(text)
        assert doc.header == ["line one", "line two"]
        assert_array_equal(doc.as_vector(), [1.0, 2.0])

    def test_write_text(self, tmp_path):
        path = tmp_path / "out" / "r.txt"
        write_text(format_document(self.values, "decimal", 10), path)
        assert path.read_text().endswith("\n")
        assert_allclose(load_vector(path), self.values, atol=1e-10)
