"""
Unit tests for the boost-weighted HTML tokenizer.
"""

import pytest

from search_processors.html_boost import ScoredFragment, TagWeightTable, tokenize

pytestmark = pytest.mark.unit


def words(fragments):
    return " ".join(f.text for f in fragments).split()


class TestBoosting:
    """Test weight assignment and multiplication"""

    def test_nested_weights_multiply(self):
        """Test h1=5 around strong=2 gives 10"""
        fragments = tokenize("<h1><strong>X</strong></h1>", {"h1": 5, "strong": 2})
        assert fragments == [ScoredFragment("X", 10.0)]

    def test_document_order(self):
        """Test fragments follow the markup order, depth-first"""
        fragments = tokenize(
            "<h2>Title</h2><p>Intro <em>key</em> words</p>",
            {"h2": 3, "em": 1.5},
        )
        assert fragments == [
            ScoredFragment("Title", 3.0),
            ScoredFragment("Intro", 1.0),
            ScoredFragment("key", 1.5),
            ScoredFragment("words", 1.0),
        ]

    def test_default_table(self, default_tags):
        """Test the out-of-the-box boosts"""
        fragments = tokenize("<h1>Big <em>news</em></h1> today", default_tags)
        assert fragments == [
            ScoredFragment("Big", 5.0),
            ScoredFragment("news", 7.5),
            ScoredFragment("today", 1.0),
        ]

    def test_tag_names_case_insensitive(self):
        """Test upper-case markup matches lower-case configuration"""
        assert tokenize("<H1>Big</H1>", {"h1": 5}) == [ScoredFragment("Big", 5.0)]

    def test_plain_mapping_and_table_agree(self):
        """Test a dict works the same as a TagWeightTable"""
        raw = "<b>bold</b> and <u>under</u>"
        table = TagWeightTable({"b": 2, "u": 1.5})
        assert tokenize(raw, {"b": 2, "u": 1.5}) == tokenize(raw, table)


class TestZeroWeight:
    """Test weight 0 hides element content"""

    def test_zero_weight_suppresses_text(self):
        """Test text inside a 0-weight element is dropped"""
        fragments = tokenize("A<b>hidden</b>B", {"b": 0})
        assert fragments == [ScoredFragment("A", 1.0), ScoredFragment("B", 1.0)]

    def test_zero_weight_suppresses_descendants(self):
        """Test nested configured elements stay hidden and closing tags still match"""
        fragments = tokenize("<b>x<h1>y</h1></b>z", {"b": 0, "h1": 5})
        assert fragments == [ScoredFragment("z", 1.0)]


class TestStripping:
    """Test handling of unconfigured and empty elements"""

    def test_unconfigured_tag_stripped(self, default_tags):
        """Test unknown elements are removed, content kept at weight 1"""
        assert tokenize("<span>Y</span>", default_tags) == [ScoredFragment("Y", 1.0)]

    def test_removed_tag_keeps_words_apart(self, default_tags):
        """Test <br> between words doesn't merge them"""
        fragments = tokenize("foo<br>bar", default_tags)
        assert words(fragments) == ["foo", "bar"]
        assert "foobar" not in words(fragments)

    def test_boosted_tag_keeps_words_apart(self):
        """Test adjacent boosted element gives separate fragments"""
        fragments = tokenize("foo<b>bar</b>", {"b": 2})
        assert fragments == [ScoredFragment("foo", 1.0), ScoredFragment("bar", 2.0)]

    def test_empty_elements_never_configured(self):
        """Test br/hr boosts are discarded"""
        table = TagWeightTable({"br": 3, "hr": 0, "b": 2})
        assert "br" not in table
        assert "hr" not in table
        assert tokenize("a<hr>b", table) == [ScoredFragment("a b", 1.0)]

    def test_comments_removed(self):
        """Test HTML comments don't reach the index"""
        assert tokenize("a<!-- hidden -->b", {"b": 2}) == [ScoredFragment("a b", 1.0)]

    def test_entities_decoded(self):
        """Test entities in fragments are decoded"""
        fragments = tokenize("<b>Fish &amp; chips</b>", {"b": 2})
        assert fragments == [ScoredFragment("Fish & chips", 2.0)]


class TestEmptyTable:
    """Test behaviour without any boosted element"""

    def test_single_fragment(self):
        """Test all text comes back as one weight-1 fragment"""
        fragments = tokenize("<p>Hello <b>world</b></p>", {})
        assert fragments == [ScoredFragment("Hello world", 1.0)]

    def test_entity_only(self):
        """Test a lone entity decodes"""
        assert tokenize("&amp;", {}) == [ScoredFragment("&", 1.0)]

    def test_blank_input(self):
        """Test empty and markup-only input give no fragments"""
        assert tokenize("", {}) == []
        assert tokenize("<br>", {}) == []
        assert tokenize("", {"b": 2}) == []


class TestAttributes:
    """Test title and alt attribute extraction"""

    def test_alt_text_indexed(self, default_tags):
        """Test img alt text becomes content with weight 1"""
        fragments = tokenize('<img src="x.png" alt="A cat">', default_tags)
        assert fragments == [ScoredFragment("A cat", 1.0)]

    def test_alt_text_single_quotes(self):
        assert tokenize("<img alt='A dog' src='y.png'>", {"b": 2}) == [ScoredFragment("A dog", 1.0)]

    def test_alt_text_boosted_when_img_configured(self):
        """Test a configured img weight applies to alt text"""
        fragments = tokenize('<h2><img src="x.png" alt="Logo"></h2>', {"img": 3, "h2": 2})
        assert fragments == [ScoredFragment("Logo", 6.0)]

    def test_alt_disabled(self, default_tags):
        """Test alt text is dropped with the tag when disabled"""
        assert tokenize('<img src="x.png" alt="A cat">', default_tags, include_alt=False) == []

    def test_img_without_alt_does_not_swallow_closing_tag(self):
        """Test a plain <img> inside a boosted element leaves the element's end intact"""
        fragments = tokenize('<h1><img src="x.png">Title</h1> body', {"h1": 5})
        assert fragments == [ScoredFragment("Title", 5.0), ScoredFragment("body", 1.0)]

    def test_title_off_by_default(self, default_tags):
        """Test title attribute values are not indexed by default"""
        fragments = tokenize('<a title="hi">link</a>', default_tags)
        assert fragments == [ScoredFragment("link", 1.0)]

    def test_title_included(self, default_tags):
        """Test title text is placed right after its tag"""
        fragments = tokenize('<a title="hi">link</a>', default_tags, include_title=True)
        assert fragments == [ScoredFragment("hi link", 1.0)]

    def test_title_inside_boosted_element(self):
        """Test title text gets the element's boost"""
        fragments = tokenize('<h1 title="T">Head</h1>', {"h1": 5}, include_title=True)
        assert fragments == [ScoredFragment("T Head", 5.0)]

    def test_malformed_attribute_left_alone(self, default_tags):
        """Test an unquoted alt can't be extracted and is dropped with the tag"""
        assert tokenize("<img src=x alt=cat>", default_tags) == []


class TestMalformedMarkup:
    """Test the tokenizer never fails"""

    def test_unmatched_closing_tag_ignored(self):
        assert tokenize("</h1>text", {"h1": 5}) == [ScoredFragment("text", 1.0)]

    def test_unclosed_tag_runs_to_end(self):
        """Test an element never closed keeps its boost to the end"""
        assert tokenize("<b>bold to the end", {"b": 2}) == [ScoredFragment("bold to the end", 2.0)]

    def test_closing_tag_of_ancestor_ignored(self):
        """Test only the innermost open element can be closed"""
        fragments = tokenize("<h1><b>x</h1>y", {"h1": 5, "b": 2})
        assert fragments == [ScoredFragment("x", 10.0), ScoredFragment("y", 10.0)]

    def test_self_closing_tag_has_no_content(self):
        assert tokenize("<b/>x", {"b": 2}) == [ScoredFragment("x", 1.0)]

    def test_literal_angle_brackets(self):
        """Test < and > that don't form tags stay in the text"""
        fragments = tokenize("a < b and c > d", {"b": 2})
        assert fragments == [ScoredFragment("a < b and c > d", 1.0)]

    @pytest.mark.parametrize("raw", [
        "<", ">", "<<>>", "<b", "</", "</>", "<b>>", "<!-- open", "<?php x",
        "<b title='x>y'>z</b>", "&#xZZ;", "<img alt=\"\">", "\x00<b>\x00</b>",
    ])
    def test_total_on_garbage(self, raw, default_tags):
        """Test odd input never raises"""
        fragments = tokenize(raw, default_tags, include_title=True)
        assert all(isinstance(f, ScoredFragment) for f in fragments)


class TestNestingDepth:
    """Test the nesting depth guard"""

    def test_deep_elements_scored_neutral(self, caplog):
        """Test elements beyond max_depth don't multiply further"""
        fragments = tokenize("<b><b><b>deep</b></b></b> after", {"b": 2}, max_depth=2)
        assert fragments == [ScoredFragment("deep", 4.0), ScoredFragment("after", 1.0)]
        assert "nested deeper than 2 levels" in caplog.text

    def test_pathological_nesting_does_not_overflow(self):
        """Test thousands of nested elements don't exhaust the stack"""
        raw = "<b>" * 5000 + "core" + "</b>" * 5000
        fragments = tokenize(raw, {"b": 1})
        assert fragments == [ScoredFragment("core", 1.0)]

    def test_depth_within_limit_unaffected(self):
        raw = "<u>" * 10 + "x" + "</u>" * 10
        assert tokenize(raw, {"u": 2}, max_depth=10) == [ScoredFragment("x", 1024.0)]

    def test_closing_tag_of_skipped_element_keeps_outer_open(self):
        """Test a same-name element past the limit doesn't close its parent early"""
        fragments = tokenize("<b>x<b>y</b>z</b>w", {"b": 2}, max_depth=1)
        assert fragments == [
            ScoredFragment("x", 2.0),
            ScoredFragment("y", 2.0),
            ScoredFragment("z", 2.0),
            ScoredFragment("w", 1.0),
        ]
