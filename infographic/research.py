"""
Topic research with Google Search grounding.

    from infographic.research import research_topic_for_prompt

    result = await research_topic_for_prompt(
        "Photosynthesis", ComplexityLevel.HIGH_SCHOOL, VisualStyle.CARTOON, "English"
    )
    # result.facts, result.search_results, result.image_prompt

Provider errors (auth, quota, network) propagate to the caller unchanged.
"""

import logging
from typing import Union

from google.genai import types

from .client import get_client
from .config import get_infographic_config
from .models import ComplexityLevel, ResearchResult, VisualStyle
from .parser import parse_research_response
from .prompts import build_research_prompt

log = logging.getLogger("infographic.research")


async def research_topic_for_prompt(
    topic: str,
    level: Union[ComplexityLevel, str],
    style: Union[VisualStyle, str],
    language: str,
) -> ResearchResult:
    """
    Research a topic and derive an infographic image prompt.

    Args:
        topic: Subject of the infographic
        level: Audience complexity level (unknown values use the general-public preset)
        style: Visual style (unknown values use the scientific-infographic preset)
        language: Natural language for all text in the output

    Returns:
        ResearchResult with up to 5 facts, unique citations and a finalized prompt.
    """
    config = get_infographic_config()
    prompt = build_research_prompt(topic, level, style, language)

    log.info("Researching %r with %s", topic, config.text_model)
    response = await get_client(config).aio.models.generate_content(
        model=config.text_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
        ),
    )

    result = parse_research_response(response, topic, level, style)
    log.info(
        "Research for %r: %d facts, %d sources",
        topic, len(result.facts), len(result.search_results),
    )
    return result
