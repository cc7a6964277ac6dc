"""
Infographic Studio: research-grounded infographic generation on Gemini.

Pipeline:

1. Research: gemini-2.5-flash with Google Search grounding turns a topic,
   audience level, visual style and language into facts, citations and an
   image prompt.
2. Image: gemini-2.5-flash-image generates the infographic, and later edits
   or fixes it from a free-text instruction.
3. Verify: accuracy verification stage (currently a no-op).

Every call builds its own client from the current environment; nothing is
shared between calls, so operations can run concurrently.
"""

from .config import InfographicConfig, get_infographic_config
from .client import get_client
from .imagegen import (
    edit_infographic_image,
    fix_infographic_image,
    generate_infographic_image,
)
from .models import (
    ComplexityLevel,
    ImageNotProducedError,
    InfographicResult,
    ResearchResult,
    SearchResultItem,
    VerificationResult,
    VisualStyle,
)
from .pipeline import create_infographic
from .research import research_topic_for_prompt
from .verification import verify_infographic_accuracy

__all__ = [
    "research_topic_for_prompt",
    "generate_infographic_image",
    "fix_infographic_image",
    "edit_infographic_image",
    "verify_infographic_accuracy",
    "create_infographic",
    "get_client",
    "get_infographic_config",
    "InfographicConfig",
    "ComplexityLevel",
    "VisualStyle",
    "ResearchResult",
    "SearchResultItem",
    "VerificationResult",
    "InfographicResult",
    "ImageNotProducedError",
]
