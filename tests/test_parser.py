"""
Tests for infographic.parser: section extraction, prompt finalization and
citation dedup.
"""

from types import SimpleNamespace

from conftest import make_chunk, make_text_response
from infographic.models import ComplexityLevel, SearchResultItem, VisualStyle
from infographic.parser import (
    extract_search_results,
    finalize_image_prompt,
    parse_facts,
    parse_image_prompt,
    parse_research_response,
)
from infographic.prompts import ASPECT_RATIO_PREFIX, QUALITY_SUFFIX


class TestParseFacts:

    def test_basic_sections(self):
        text = "FACTS:\n- A\n- B\nIMAGE_PROMPT:\nFoo"
        assert parse_facts(text) == ["A", "B"]
        assert parse_image_prompt(text) == "Foo"

    def test_truncates_to_five_in_order(self):
        bullets = "\n".join(f"- Fact {i}" for i in range(1, 9))
        text = f"FACTS:\n{bullets}\n\nIMAGE_PROMPT:\nX"
        assert parse_facts(text) == [f"Fact {i}" for i in range(1, 6)]

    def test_case_insensitive_and_indented(self):
        text = "facts:\n    - One\n\n   -Two  \nimage_prompt: Z"
        assert parse_facts(text) == ["One", "Two"]

    def test_no_image_prompt_reads_to_end(self):
        assert parse_facts("FACTS:\n- Only\n- Facts") == ["Only", "Facts"]

    def test_missing_section(self):
        assert parse_facts("Nothing structured here") == []
        assert parse_facts("") == []
        assert parse_facts(None) == []


class TestParseImagePrompt:

    def test_missing_or_blank(self):
        assert parse_image_prompt("FACTS:\n- A") is None
        assert parse_image_prompt("IMAGE_PROMPT:   \n ") is None

    def test_multiline_prompt(self):
        text = "IMAGE_PROMPT:\nLine one\nLine two\n"
        assert parse_image_prompt(text) == "Line one\nLine two"


class TestFinalizeImagePrompt:

    def test_prefixes_when_no_aspect_ratio(self):
        result = finalize_image_prompt("A diagram of the heart")
        assert result.startswith(ASPECT_RATIO_PREFIX)
        assert result.endswith(QUALITY_SUFFIX)

    def test_widescreen_left_unprefixed(self):
        result = finalize_image_prompt("A WideScreen diagram")
        assert result == "A WideScreen diagram" + QUALITY_SUFFIX

    def test_16_9_left_unprefixed(self):
        assert not finalize_image_prompt("16:9 poster").startswith(ASPECT_RATIO_PREFIX)

    def test_suffix_exactly_once(self):
        for prompt in ["", "x", "16:9 x", "widescreen"]:
            assert finalize_image_prompt(prompt).count(QUALITY_SUFFIX) == 1


class TestExtractSearchResults:

    def test_dedup_keeps_first_title(self):
        response = make_text_response("", [
            make_chunk("u1", "T1"),
            make_chunk("u1", "T2"),
            make_chunk("u2", "T3"),
        ])
        assert extract_search_results(response) == [
            SearchResultItem(title="T1", url="u1"),
            SearchResultItem(title="T3", url="u2"),
        ]

    def test_skips_incomplete_chunks(self):
        response = make_text_response("", [
            SimpleNamespace(web=None),
            make_chunk("", "No URL"),
            make_chunk("u3", None),
            make_chunk("u4", "Kept"),
        ])
        assert extract_search_results(response) == [SearchResultItem(title="Kept", url="u4")]

    def test_no_grounding(self):
        assert extract_search_results(make_text_response("", None)) == []
        assert extract_search_results(SimpleNamespace(candidates=None)) == []
        assert extract_search_results(SimpleNamespace(candidates=[SimpleNamespace()])) == []


class TestParseResearchResponse:

    def test_full_response(self):
        response = make_text_response(
            "FACTS:\n- A\n- B\nIMAGE_PROMPT:\nFoo",
            [make_chunk("https://a.example", "A")],
        )
        result = parse_research_response(response, "Bees", "College", "Cartoon")
        assert result.facts == ["A", "B"]
        assert result.image_prompt == ASPECT_RATIO_PREFIX + "Foo" + QUALITY_SUFFIX
        assert result.search_results == [SearchResultItem(title="A", url="https://a.example")]

    def test_fallback_prompt_contains_topic(self):
        response = make_text_response("FACTS:\n- A")
        result = parse_research_response(
            response, "Honey bees", ComplexityLevel.EXPERT, VisualStyle.SKETCH
        )
        assert "Honey bees" in result.image_prompt
        assert "Industry Expert" in result.image_prompt
        assert "Da Vinci Notebook" in result.image_prompt
        # fallback already says widescreen
        assert not result.image_prompt.startswith(ASPECT_RATIO_PREFIX)
        assert result.image_prompt.endswith(QUALITY_SUFFIX)

    def test_empty_text(self):
        result = parse_research_response(make_text_response(None), "Rain", "?", "?")
        assert result.facts == []
        assert result.search_results == []
        assert "Rain" in result.image_prompt
        assert "General Public" in result.image_prompt
        assert "Modern Scientific Infographic" in result.image_prompt

    def test_facts_limit_invariant(self):
        bullets = "\n".join(f"- {i}" for i in range(20))
        result = parse_research_response(make_text_response(f"FACTS:\n{bullets}"), "t", "", "")
        assert len(result.facts) == 5
