"""
Gemini client factory.

A fresh google.genai.Client is built for every request so the latest API key
from the environment is used. The client is a lightweight handle; nothing is
cached between calls.
"""

import logging
from typing import Optional

from google import genai

from .config import InfographicConfig, get_infographic_config

log = logging.getLogger("infographic.client")


def get_client(config: Optional[InfographicConfig] = None) -> genai.Client:
    """
    Build a new genai client.

    A missing key is not checked here; the provider rejects the first call
    with an authentication error instead.
    """
    config = config or get_infographic_config()
    if not config.api_key:
        log.debug("No API key configured; request will fail upstream")
    return genai.Client(api_key=config.api_key)
