"""
End-to-end infographic pipeline.

  Research → Generate → Verify → [Fix]

Research produces the facts, citations and image prompt; the image is
generated from that prompt and handed to the verification stage. A single fix
pass runs only when verification reports a problem, using its critique as the
correction instruction.

Usage:
    from infographic.pipeline import create_infographic

    result = await create_infographic("Black holes", "College", "Futuristic", "English")
    # result.image is a data:image/png;base64,... URI
"""

import logging
from typing import Union

from .imagegen import fix_infographic_image, generate_infographic_image
from .models import ComplexityLevel, InfographicResult, VisualStyle
from .research import research_topic_for_prompt
from .verification import verify_infographic_accuracy

log = logging.getLogger("infographic.pipeline")


async def create_infographic(
    topic: str,
    level: Union[ComplexityLevel, str],
    style: Union[VisualStyle, str],
    language: str,
) -> InfographicResult:
    research = await research_topic_for_prompt(topic, level, style, language)
    image = await generate_infographic_image(research.image_prompt)

    verification = await verify_infographic_accuracy(image, topic, level, style, language)
    fixed = False
    if not verification.is_accurate:
        log.info("Verification flagged %r, running fix pass", topic)
        image = await fix_infographic_image(image, verification.critique)
        fixed = True

    return InfographicResult(
        research=research,
        image=image,
        verification=verification,
        fixed=fixed,
    )
