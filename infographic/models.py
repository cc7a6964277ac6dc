"""
Infographic Data Models

Enums for the caller-selected presets and dataclasses for research,
verification and pipeline results. Uses dataclasses (not Pydantic) to match
existing codebase conventions.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List


MAX_FACTS = 5


class ComplexityLevel(str, Enum):
    """Audience tier the infographic is designed for"""
    ELEMENTARY = "Elementary"
    HIGH_SCHOOL = "High School"
    COLLEGE = "College"
    EXPERT = "Expert"


class VisualStyle(str, Enum):
    """Aesthetic preset for the generated image"""
    MINIMALIST = "Minimalist"
    REALISTIC = "Realistic"
    CARTOON = "Cartoon"
    VINTAGE = "Vintage"
    FUTURISTIC = "Futuristic"
    RENDER_3D = "3D Render"
    SKETCH = "Sketch"


class ImageNotProducedError(RuntimeError):
    """An image call returned no inline image part."""


@dataclass(frozen=True)
class SearchResultItem:
    """One web citation from search grounding. `url` is the dedup key."""
    title: str
    url: str


@dataclass
class ResearchResult:
    """
    Output of the research stage.

    Fields:
    - image_prompt: Finalized prompt for the image model
    - facts: Up to MAX_FACTS bullet points, in response order
    - search_results: Citations, unique by URL
    """
    image_prompt: str
    facts: List[str] = field(default_factory=list)
    search_results: List[SearchResultItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "image_prompt": self.image_prompt,
            "facts": list(self.facts),
            "search_results": [asdict(item) for item in self.search_results],
        }


@dataclass
class VerificationResult:
    is_accurate: bool
    critique: str


@dataclass
class InfographicResult:
    """Research, final image (data URI) and the verification verdict."""
    research: ResearchResult
    image: str
    verification: VerificationResult
    fixed: bool = False
