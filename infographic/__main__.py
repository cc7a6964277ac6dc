"""
Infographic CLI: research a topic and generate, edit or fix infographics.

Usage:
    python3 -m infographic research "Photosynthesis" --level "High School" --style Cartoon
    python3 -m infographic create "Photosynthesis" -o photosynthesis.png
    python3 -m infographic edit photosynthesis.png "Make the title larger" -o v2.png
    python3 -m infographic fix v2.png "Remove the duplicated label" -o v3.png
    python3 -m infographic levels | styles | config
"""

import argparse
import asyncio
import inspect
import json
import logging
import sys

import httpx
from google.genai import errors as genai_errors

from .config import get_infographic_config
from .imagegen import (
    edit_infographic_image,
    encode_image_file,
    fix_infographic_image,
    save_data_uri,
)
from .models import ComplexityLevel, ImageNotProducedError, VisualStyle
from .pipeline import create_infographic
from .research import research_topic_for_prompt

log = logging.getLogger("infographic")


def _print_research(result):
    print("=" * 55)
    print("  FACTS")
    print("=" * 55)
    for fact in result.facts:
        print(f"  - {fact}")
    if result.search_results:
        print()
        print("  Sources:")
        for item in result.search_results:
            print(f"    {item.title}")
            print(f"      {item.url}")
    print()
    print("  Image prompt:")
    print(f"    {result.image_prompt}")
    print("=" * 55)


async def cmd_research(args):
    """Run the research stage only."""
    result = await research_topic_for_prompt(args.topic, args.level, args.style, args.language)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_research(result)


async def cmd_create(args):
    """Research, generate and verify; save the final image."""
    result = await create_infographic(args.topic, args.level, args.style, args.language)
    path = save_data_uri(result.image, args.output)
    _print_research(result.research)
    print(f"Verification: {result.verification.critique}")
    print(f"Saved: {path}")


async def cmd_edit(args):
    image = encode_image_file(args.image)
    path = save_data_uri(await edit_infographic_image(image, args.instruction), args.output)
    print(f"Saved: {path}")


async def cmd_fix(args):
    image = encode_image_file(args.image)
    path = save_data_uri(await fix_infographic_image(image, args.correction), args.output)
    print(f"Saved: {path}")


def cmd_levels(args):
    for level in ComplexityLevel:
        print(level.value)


def cmd_styles(args):
    for style in VisualStyle:
        print(style.value)


def cmd_config(args):
    print(json.dumps(get_infographic_config().to_dict(), indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infographic",
        description="Research-grounded infographic generation with Gemini",
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    def add_preset_args(p):
        p.add_argument('topic', help='Infographic topic')
        p.add_argument('--level', '-l', default=ComplexityLevel.HIGH_SCHOOL.value,
                       help='Audience level (see `levels`)')
        p.add_argument('--style', '-s', default=VisualStyle.MINIMALIST.value,
                       help='Visual style (see `styles`)')
        p.add_argument('--language', default='English', help='Output language')

    research_p = subparsers.add_parser('research', help='Research a topic')
    add_preset_args(research_p)
    research_p.add_argument('--json', '-j', action='store_true', help='Output JSON')

    create_p = subparsers.add_parser('create', help='Research and generate an infographic')
    add_preset_args(create_p)
    create_p.add_argument('--output', '-o', required=True, help='Output PNG path')

    edit_p = subparsers.add_parser('edit', help='Edit an existing infographic')
    edit_p.add_argument('image', help='Source PNG/JPEG file')
    edit_p.add_argument('instruction', help='Edit instruction')
    edit_p.add_argument('--output', '-o', required=True, help='Output PNG path')

    fix_p = subparsers.add_parser('fix', help='Simplify and fix an infographic')
    fix_p.add_argument('image', help='Source PNG/JPEG file')
    fix_p.add_argument('correction', help='What to correct')
    fix_p.add_argument('--output', '-o', required=True, help='Output PNG path')

    subparsers.add_parser('levels', help='List audience levels')
    subparsers.add_parser('styles', help='List visual styles')
    subparsers.add_parser('config', help='Show effective configuration')

    return parser


COMMANDS = {
    "research": cmd_research,
    "create": cmd_create,
    "edit": cmd_edit,
    "fix": cmd_fix,
    "levels": cmd_levels,
    "styles": cmd_styles,
    "config": cmd_config,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = COMMANDS.get(args.command)
    if not handler:
        parser.print_help()
        return 1

    try:
        if inspect.iscoroutinefunction(handler):
            asyncio.run(handler(args))
        else:
            handler(args)
    except ImageNotProducedError as e:
        log.error("%s", e)
        return 1
    except genai_errors.APIError as e:
        log.error("Gemini request failed: %s", e)
        return 1
    except httpx.HTTPError as e:
        log.error("Gemini transport error: %s", e)
        return 1
    except (ValueError, OSError) as e:
        log.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
