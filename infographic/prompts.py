"""
Prompt templates for infographic research and image generation.

Level and style presets map to fixed instruction paragraphs that are embedded
verbatim in the research prompt (and in the fallback image prompt when the
research response has no IMAGE_PROMPT section). The three image operations
each wrap the caller's text with a fixed requirements block.
"""

from typing import Union

from .models import ComplexityLevel, VisualStyle


# ── Audience levels ──────────────────────────────────────────────────────

LEVEL_INSTRUCTIONS = {
    ComplexityLevel.ELEMENTARY.value: (
        "Target Audience: Elementary School (Ages 6-10). Design Requirements: "
        "Extra large, bold text (minimum 24pt equivalent). Bright primary colors. "
        "Simple geometric icons and illustrations. Maximum 3-5 key points. "
        "Wide spacing between elements. Playful but clear layout. "
        "Minimal technical jargon."
    ),
    ComplexityLevel.HIGH_SCHOOL.value: (
        "Target Audience: High School (Ages 14-18). Design Requirements: "
        "Clear, readable text (18-22pt equivalent). Balanced color scheme. "
        "Mix of diagrams, charts, and illustrations. Include 5-8 key concepts. "
        "Standard infographic layout with sections. "
        "Some technical terms with visual explanations."
    ),
    ComplexityLevel.COLLEGE.value: (
        "Target Audience: University/College (Ages 18-25). Design Requirements: "
        "Detailed text (14-18pt equivalent). Professional color palette. "
        "Complex diagrams, data visualizations, and cross-sections. "
        "Include 8-12 detailed points. Dense but organized layout. "
        "Technical terminology with precise labels."
    ),
    ComplexityLevel.EXPERT.value: (
        "Target Audience: Industry Expert/Professional. Design Requirements: "
        "Technical precision text (12-16pt equivalent). Sophisticated color scheme "
        "or monochrome. Highly detailed schematics, blueprints, and technical "
        "diagrams. Include 12+ comprehensive points. Dense information with "
        "hierarchical organization. Advanced technical terminology and precise "
        "annotations."
    ),
}

DEFAULT_LEVEL_INSTRUCTION = (
    "Target Audience: General Public. Design Requirements: Clear, accessible "
    "design with readable text and balanced complexity."
)

# ── Visual styles ────────────────────────────────────────────────────────

STYLE_INSTRUCTIONS = {
    VisualStyle.MINIMALIST.value: (
        "Aesthetic: Bauhaus Minimalist. Flat vector art with crisp edges. "
        "Limited color palette (2-3 bold colors). Heavy use of negative white "
        "space. Simple geometric shapes (circles, squares, lines). Sans-serif "
        "typography. Grid-based layout. High contrast. Ultra-clean composition."
    ),
    VisualStyle.REALISTIC.value: (
        "Aesthetic: Photorealistic Composite. Professional photography style. "
        "Natural lighting and shadows. 8K resolution detail. Highly detailed "
        "textures and materials. Depth of field. Looks like a high-end magazine "
        "photo spread with real objects and environments."
    ),
    VisualStyle.CARTOON.value: (
        "Aesthetic: Modern Educational Comic. Vibrant saturated colors. Bold "
        "black outlines (2-3px). Cel-shaded flat colors with simple highlights. "
        "Expressive character-like elements. Dynamic compositions. Speech bubbles "
        "or callouts. Friendly and engaging visual narrative style."
    ),
    VisualStyle.VINTAGE.value: (
        "Aesthetic: 19th Century Scientific Lithograph. Hand-engraved appearance. "
        "Sepia, cream, and brown tones. Aged paper texture background. Fine "
        "cross-hatching and stippling. Ornate borders and decorative elements. "
        "Classical typography. Museum-quality historical scientific illustration."
    ),
    VisualStyle.FUTURISTIC.value: (
        "Aesthetic: Cyberpunk HUD Interface. Dark background (black or deep blue). "
        "Glowing neon lines (cyan, blue, magenta). Holographic translucent panels. "
        "Digital grid overlays. 3D wireframe elements. Geometric tech patterns. "
        "Sci-fi dashboard aesthetic with digital readouts and data streams."
    ),
    VisualStyle.RENDER_3D.value: (
        "Aesthetic: 3D Isometric Render. Clean isometric perspective. Smooth "
        "gradients and soft shadows. Glossy plastic or claymorphism materials. "
        "Studio lighting with rim lights. Soft ambient occlusion. Looks like a "
        "high-quality physical model or toy. Rounded corners and friendly shapes."
    ),
    VisualStyle.SKETCH.value: (
        "Aesthetic: Technical Blueprint/Da Vinci Notebook. Pen and ink style on "
        "cream parchment. Hand-drawn appearance with consistent line weight. "
        "Handwritten-style annotations and labels. Construction lines visible. "
        "Cross-sections and technical details. Looks like an architect's or "
        "inventor's working sketch."
    ),
}

DEFAULT_STYLE_INSTRUCTION = (
    "Aesthetic: Modern Scientific Infographic. Clean digital illustration. "
    "Professional color palette. Clear hierarchy. Mix of icons, diagrams, and "
    "data visualizations. Contemporary design trends. Publication-quality. "
    "Balanced composition with proper spacing."
)


def _preset_key(value) -> str:
    """Enum members and their plain string values resolve to the same key."""
    return getattr(value, "value", value)


def get_level_instruction(level: Union[ComplexityLevel, str]) -> str:
    return LEVEL_INSTRUCTIONS.get(_preset_key(level), DEFAULT_LEVEL_INSTRUCTION)


def get_style_instruction(style: Union[VisualStyle, str]) -> str:
    return STYLE_INSTRUCTIONS.get(_preset_key(style), DEFAULT_STYLE_INSTRUCTION)


# ── Research prompt ──────────────────────────────────────────────────────

RESEARCH_PROMPT = """
You are an expert visual researcher and infographic designer.
Your goal is to research the topic: "{topic}" and create a detailed prompt for a professional infographic.

**IMPORTANT: Use the Google Search tool to find the most accurate, up-to-date information about this topic.**

Context:
{level_instruction}
{style_instruction}
Language: {language}

Please provide your response in the following format EXACTLY:

FACTS:
- [Fact 1]
- [Fact 2]
- [Fact 3]

IMAGE_PROMPT:
[A highly detailed image generation prompt that must include:
- Explicit instruction: "Create a 16:9 widescreen format infographic"
- Overall composition and layout (horizontal panels, flowcharts, diagrams, etc.)
- Specific visual elements (icons, charts, illustrations, data visualizations)
- Color scheme and palette
- Typography guidance (large, readable text in {language})
- Background treatment
- Any specific design patterns appropriate for the style
Do not include citations or references in the prompt.]
"""


def build_research_prompt(
    topic: str,
    level: Union[ComplexityLevel, str],
    style: Union[VisualStyle, str],
    language: str,
) -> str:
    """Compose the research-and-design instruction sent to the text model."""
    return RESEARCH_PROMPT.format(
        topic=topic,
        level_instruction=get_level_instruction(level),
        style_instruction=get_style_instruction(style),
        language=language,
    )


def build_fallback_image_prompt(
    topic: str, level_instruction: str, style_instruction: str
) -> str:
    return (
        f"Create a detailed 16:9 widescreen format infographic about {topic}. "
        f"{level_instruction} {style_instruction}"
    )


# ── Image prompts ────────────────────────────────────────────────────────

ASPECT_RATIO_PREFIX = "Create a 16:9 widescreen format infographic. "

QUALITY_SUFFIX = (
    " High resolution, professional quality, crisp and clear details, "
    "well-balanced composition, maximum visual clarity."
)

CRITICAL_REQUIREMENTS = """

CRITICAL REQUIREMENTS:
- Format: 16:9 aspect ratio (widescreen/landscape orientation)
- Resolution: High-definition, print-quality
- Text: All text must be large, legible, and perfectly readable
- Layout: Professional infographic design with clear visual hierarchy
- Graphics: Sharp, detailed, high-contrast elements
- Background: Clean and complementary to the content
- Overall: Publication-ready quality suitable for educational or professional use"""

QUALITY_STANDARDS = """

MAINTAIN QUALITY STANDARDS:
- Keep 16:9 aspect ratio
- Maintain high resolution and clarity
- Ensure all text remains large and readable
- Keep professional infographic quality
- Preserve visual hierarchy and composition balance"""

FIX_PROMPT = """
Edit this image.
Goal: Simplify and Fix.
Instruction: {correction}.
Ensure the design is clean and any text is large and legible.
"""


def build_generation_prompt(prompt: str) -> str:
    return prompt + CRITICAL_REQUIREMENTS


def build_edit_prompt(instruction: str) -> str:
    return instruction + QUALITY_STANDARDS


def build_fix_prompt(correction: str) -> str:
    return FIX_PROMPT.format(correction=correction)
