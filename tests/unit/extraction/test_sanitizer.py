"""Tests for the HTML to text sanitizer."""

import pytest

from jobpreview.extraction.sanitizer import MAX_DESCRIPTION_LENGTH, decode_entities, strip_html


class TestStructure:
    def test_paragraphs_become_blank_lines(self) -> None:
        assert strip_html("<p>Hello</p><p>World</p>") == "Hello\n\nWorld"

    def test_line_breaks(self) -> None:
        assert strip_html("a<br>b<BR/>c<br />d") == "a\nb\nc\nd"

    def test_list_items_become_bullets(self) -> None:
        html = "<ul><li>Python</li><li class='x'>Go</li></ul>"
        assert strip_html(html) == "• Python\n• Go"

    def test_link_tag_is_not_a_list_item(self) -> None:
        assert strip_html('<link rel="stylesheet" href="a.css">Text') == "Text"

    def test_div_close_is_newline(self) -> None:
        assert strip_html("<div>One</div><div>Two</div>") == "One\nTwo"

    def test_other_tags_removed(self) -> None:
        assert strip_html('<span class="x"><strong>Bold</strong> move</span>') == "Bold move"


class TestEntities:
    def test_named_entities(self) -> None:
        html = "Tom &amp; Jerry &quot;quoted&quot; it&#39;s it&#x27;s"
        assert strip_html(html) == "Tom & Jerry \"quoted\" it's it's"

    def test_numeric_entities(self) -> None:
        assert strip_html("&#169; 2024 &#8211; now") == "© 2024 – now"

    def test_nbsp_collapses_with_spaces(self) -> None:
        assert strip_html("a&nbsp;&nbsp; b") == "a b"

    def test_out_of_range_reference_kept(self) -> None:
        assert decode_entities("x&#99999999;y") == "x&#99999999;y"

    def test_surrogate_reference_kept(self) -> None:
        assert decode_entities("&#55296;") == "&#55296;"

    def test_very_long_reference_kept(self) -> None:
        reference = "&#" + "1" * 5000 + ";"

        assert decode_entities(reference) == reference
        assert strip_html(reference) == reference[:MAX_DESCRIPTION_LENGTH]

    def test_seven_digit_reference_in_range_decoded(self) -> None:
        assert decode_entities("&#1114111;") == "\U0010ffff"

    def test_double_escaped_entity_decodes_one_level(self) -> None:
        once = strip_html("Tom &amp;amp; Jerry")

        assert once == "Tom &amp; Jerry"
        assert strip_html(once) == "Tom & Jerry"

    def test_escaped_markup_is_stripped(self) -> None:
        result = strip_html("&lt;script&gt;alert(1)&lt;/script&gt;")
        assert result == "alert(1)"
        assert "<" not in result
        assert ">" not in result


class TestWhitespace:
    def test_excess_newlines_collapsed(self) -> None:
        assert strip_html("a\n\n\n\n\nb") == "a\n\nb"

    def test_newline_runs_with_spaces_collapsed(self) -> None:
        assert strip_html("a\n  \n\t\n\nb") == "a\n\nb"

    def test_horizontal_whitespace_collapsed(self) -> None:
        assert strip_html("a  \t  b") == "a b"

    def test_trimmed(self) -> None:
        assert strip_html("  \n <p> text </p>\n ") == "text"

    def test_empty(self) -> None:
        assert strip_html("") == ""
        assert strip_html("<div><span></span></div>") == ""


class TestLength:
    @pytest.mark.parametrize(
        "html",
        [
            "x" * 5000,
            "<p>" + "word " * 2000 + "</p>",
            "<li>item</li>" * 1000,
            "&amp;" * 4000,
        ],
    )
    def test_never_exceeds_limit(self, html: str) -> None:
        assert len(strip_html(html)) <= MAX_DESCRIPTION_LENGTH

    def test_truncates_to_limit(self) -> None:
        assert strip_html("y" * 3500) == "y" * 3000

    def test_custom_limit(self) -> None:
        assert strip_html("abcdef", max_length=3) == "abc"


class TestIdempotence:
    @pytest.mark.parametrize(
        "html",
        [
            "<div><h1>Engineer</h1><p>Build things &amp; ship.</p>"
            "<ul><li>Python</li><li>Go</li></ul></div>",
            "<p>About</p>\n\n\n<p>We build tools.</p>",
            "plain text with  double  spaces",
            "<br><br><br>Line<br><br><br>",
        ],
    )
    def test_sanitizing_clean_output_is_noop(self, html: str) -> None:
        clean = strip_html(html)
        assert strip_html(clean) == clean
