"""
Infographic image generation, editing and fixing via Gemini native image models.

All three operations share one mechanism: build content parts (an optional
inline source image plus the instruction text), call the image model with the
fixed sampling settings from config, and return the first inline image in the
response as a `data:image/png;base64,...` URI.

Usage:
    from infographic.imagegen import generate_infographic_image, edit_infographic_image

    image = await generate_infographic_image(result.image_prompt)
    image = await edit_infographic_image(image, "Make the title larger")

A response with no inline image raises ImageNotProducedError. Provider errors
propagate unchanged.
"""

import base64
import binascii
import logging
import re
from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional, Union

from google.genai import types
from PIL import Image as PILImage

from .client import get_client
from .config import InfographicConfig, get_infographic_config
from .models import ImageNotProducedError
from .prompts import build_edit_prompt, build_fix_prompt, build_generation_prompt

log = logging.getLogger("infographic.imagegen")

DATA_URI_PREFIX = re.compile(r"^data:image/(png|jpeg|jpg);base64,")
PNG_DATA_URI = "data:image/png;base64,"

# Source images are always submitted as JPEG
INPUT_MIME_TYPE = "image/jpeg"


# ── Data URI helpers ─────────────────────────────────────────────────────

def strip_data_uri(image: str) -> str:
    """Drop a leading data:image/(png|jpeg|jpg);base64, prefix if present."""
    return DATA_URI_PREFIX.sub("", image, count=1)


def decode_data_uri(data_uri: str) -> bytes:
    """Raw image bytes from a data URI or bare base64 string."""
    payload = "".join(strip_data_uri(data_uri).split())
    if payload.startswith("data:"):
        raise ValueError(f"Unsupported image data URI: {payload[:30]}")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e


def encode_image_file(path: Union[str, Path]) -> str:
    """Read an image file into a base64 data URI."""
    image_file = Path(path)
    suffix = image_file.suffix.lower().lstrip(".")
    mime = "jpeg" if suffix in ("jpg", "jpeg") else "png"
    payload = base64.b64encode(image_file.read_bytes()).decode("ascii")
    return f"data:image/{mime};base64,{payload}"


def save_data_uri(data_uri: str, out_path: Union[str, Path]) -> Path:
    """Write a data-URI image to disk as PNG, flattening alpha onto white."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    img = PILImage.open(BytesIO(decode_data_uri(data_uri)))
    if img.mode == "RGBA":
        rgb = PILImage.new("RGB", img.size, (255, 255, 255))
        rgb.paste(img, mask=img.split()[3])
        rgb.save(str(out_path), "PNG")
    elif img.mode == "RGB":
        img.save(str(out_path), "PNG")
    else:
        img.convert("RGB").save(str(out_path), "PNG")

    log.debug("Saved image to %s", out_path)
    return out_path


def extract_image_data_uri(response: Any, operation: str = "generate") -> str:
    """First inline image part of the first candidate, as a PNG data URI."""
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    parts = getattr(content, "parts", None) or []

    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline and inline.data:
            data = inline.data
            if isinstance(data, bytes):
                data = base64.b64encode(data).decode("ascii")
            return PNG_DATA_URI + data

    raise ImageNotProducedError(f"Failed to {operation} image")


# ── Requests ─────────────────────────────────────────────────────────────

def _generation_config(config: InfographicConfig) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_modalities=["IMAGE", "TEXT"],
        temperature=config.temperature,
        top_k=config.top_k,
        top_p=config.top_p,
    )


def _source_image_part(image: str) -> types.Part:
    return types.Part.from_bytes(data=decode_data_uri(image), mime_type=INPUT_MIME_TYPE)


async def _request_image(
    model: str,
    parts: List[types.Part],
    operation: str,
    config: Optional[InfographicConfig] = None,
) -> str:
    config = config or get_infographic_config()
    contents = [types.Content(role="user", parts=parts)]

    log.info("Requesting image (%s) from %s", operation, model)
    response = await get_client(config).aio.models.generate_content(
        model=model,
        contents=contents,
        config=_generation_config(config),
    )

    data_uri = extract_image_data_uri(response, operation)
    log.info("Image %s succeeded (%d base64 chars)", operation, len(data_uri) - len(PNG_DATA_URI))
    return data_uri


async def generate_infographic_image(prompt: str) -> str:
    """
    Generate an infographic from a finalized prompt.

    The CRITICAL REQUIREMENTS block (aspect ratio, resolution, legibility,
    layout, graphics, background, publication quality) is appended first.
    """
    config = get_infographic_config()
    parts = [types.Part.from_text(text=build_generation_prompt(prompt))]
    return await _request_image(config.image_model, parts, "generate", config)


async def fix_infographic_image(current_image: str, correction_prompt: str) -> str:
    """Simplify-and-fix pass over an existing image."""
    config = get_infographic_config()
    parts = [
        _source_image_part(current_image),
        types.Part.from_text(text=build_fix_prompt(correction_prompt)),
    ]
    return await _request_image(config.edit_model, parts, "fix", config)


async def edit_infographic_image(current_image: str, edit_instruction: str) -> str:
    """Apply a free-text edit, keeping the 16:9 quality standards."""
    config = get_infographic_config()
    parts = [
        _source_image_part(current_image),
        types.Part.from_text(text=build_edit_prompt(edit_instruction)),
    ]
    return await _request_image(config.edit_model, parts, "edit", config)
