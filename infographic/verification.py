"""
Infographic accuracy verification stage.

Currently a no-op: every image is reported accurate and sent straight through.
The stage keeps its place in the pipeline so a real critic can be dropped in
without touching callers.
"""

import logging
from typing import Union

from .models import ComplexityLevel, VerificationResult, VisualStyle

log = logging.getLogger("infographic.verification")

BYPASSED_CRITIQUE = "Verification bypassed."


async def verify_infographic_accuracy(
    image: str,
    topic: str,
    level: Union[ComplexityLevel, str],
    style: Union[VisualStyle, str],
    language: str,
) -> VerificationResult:
    """No-op verification. Always returns is_accurate=True."""
    log.debug("Skipping accuracy verification for %r", topic)
    return VerificationResult(is_accurate=True, critique=BYPASSED_CRITIQUE)
