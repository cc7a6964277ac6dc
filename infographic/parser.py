"""
Research response parser.

The text model is asked for a rigid two-section format:

    FACTS:
    - ...
    IMAGE_PROMPT:
    ...

Its output is not guaranteed to follow it, so every extraction here is total:
a missing or malformed section degrades to an empty list or the fallback
prompt, never an exception.
"""

import logging
import re
from typing import Any, List, Optional, Union

from .models import (
    MAX_FACTS,
    ComplexityLevel,
    ResearchResult,
    SearchResultItem,
    VisualStyle,
)
from .prompts import (
    ASPECT_RATIO_PREFIX,
    QUALITY_SUFFIX,
    build_fallback_image_prompt,
    get_level_instruction,
    get_style_instruction,
)

log = logging.getLogger("infographic.parser")

FACTS_PATTERN = re.compile(r"FACTS:\s*(.*?)(?=IMAGE_PROMPT:|\Z)", re.IGNORECASE | re.DOTALL)
IMAGE_PROMPT_PATTERN = re.compile(r"IMAGE_PROMPT:\s*(.*)\Z", re.IGNORECASE | re.DOTALL)
BULLET_PATTERN = re.compile(r"^-\s*")


def parse_facts(text: str) -> List[str]:
    """Bullet lines of the FACTS section, marker stripped, at most MAX_FACTS."""
    match = FACTS_PATTERN.search(text or "")
    if not match:
        return []

    facts = []
    for line in match.group(1).strip().split("\n"):
        fact = BULLET_PATTERN.sub("", line.strip()).strip()
        if fact:
            facts.append(fact)
    return facts[:MAX_FACTS]


def parse_image_prompt(text: str) -> Optional[str]:
    """Everything after IMAGE_PROMPT:, or None when absent or blank."""
    match = IMAGE_PROMPT_PATTERN.search(text or "")
    if not match:
        return None
    return match.group(1).strip() or None


def finalize_image_prompt(prompt: str) -> str:
    """Force the 16:9 mandate and append the quality sentence exactly once."""
    lowered = prompt.lower()
    if "16:9" not in lowered and "widescreen" not in lowered:
        prompt = ASPECT_RATIO_PREFIX + prompt
    return prompt + QUALITY_SUFFIX


def extract_search_results(response: Any) -> List[SearchResultItem]:
    """
    Citations from the first candidate's grounding chunks.

    Chunks lacking a web URI or title are skipped. Results are unique by URL;
    the first occurrence keeps its position and title.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    unique = {}
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        title = getattr(web, "title", None)
        if uri and title and uri not in unique:
            unique[uri] = SearchResultItem(title=title, url=uri)
    return list(unique.values())


def parse_research_response(
    response: Any,
    topic: str,
    level: Union[ComplexityLevel, str],
    style: Union[VisualStyle, str],
) -> ResearchResult:
    """Build a ResearchResult from a text-model response."""
    text = getattr(response, "text", None) or ""

    facts = parse_facts(text)

    image_prompt = parse_image_prompt(text)
    if image_prompt is None:
        log.info("No IMAGE_PROMPT section in research response; using fallback")
        image_prompt = build_fallback_image_prompt(
            topic, get_level_instruction(level), get_style_instruction(style)
        )

    search_results = extract_search_results(response)

    return ResearchResult(
        image_prompt=finalize_image_prompt(image_prompt),
        facts=facts,
        search_results=search_results,
    )
