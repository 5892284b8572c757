import logging
import time
from typing import Optional

from openai import AsyncAzureOpenAI

from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> AsyncAzureOpenAI:
    return AsyncAzureOpenAI(
        api_key=settings.require_api_key(),
        azure_endpoint=settings.endpoint,
        api_version=settings.api_version,
    )


async def request_completion(
    system_prompt: str,
    user_prompt: str,
    *,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
    json_output: bool = False,
    settings: Optional[Settings] = None,
) -> str:
    """Send one chat completion to the configured Azure OpenAI deployment and return the reply text"""
    settings = settings or get_settings()
    client = build_client(settings)

    request = {
        "model": settings.deployment,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        "max_tokens": max_tokens if max_tokens is not None else settings.max_tokens,
        "temperature": temperature if temperature is not None else settings.temperature,
    }
    if json_output:
        request["response_format"] = {"type": "json_object"}

    logger.info(f"🔍 Requesting completion from deployment '{settings.deployment}'")
    logger.debug(f"Prompt:\n{user_prompt}")
    start_time = time.time()

    try:
        response = await client.chat.completions.create(**request)
    finally:
        await client.close()

    content = response.choices[0].message.content if response.choices else None
    logger.info(f"✅ Completion received in {time.time() - start_time:.2f} seconds")
    return content or ""
