import logging
from datetime import datetime, timezone
from typing import Any, Dict

from schemas.swot_schemas import BusinessProfileSchema, QuickSwotSchema
from services import completion_service
from services.analysis_parser import parse_analysis, parse_structured_analysis
from services.prompt_builder import build_question_prompt, build_quick_swot_prompt, build_swot_prompt
from utils.config import Settings, get_settings
from utils.constant import QUESTION_SYSTEM_PROMPT, SWOT_STRUCTURED_SYSTEM_PROMPT, SWOT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


async def _run_swot(prompt: str, settings: Settings) -> Dict[str, Any]:
    structured = settings.output_mode == "structured"
    raw = await completion_service.request_completion(
        SWOT_STRUCTURED_SYSTEM_PROMPT if structured else SWOT_SYSTEM_PROMPT,
        prompt,
        json_output=structured,
        settings=settings,
    )

    if structured:
        sections = parse_structured_analysis(raw)
        analysis = sections.to_text()
    else:
        sections = parse_analysis(raw, strict=settings.strict_parse)
        analysis = raw

    return {
        "analysis": analysis,
        "sections": sections.as_dict(),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }


async def generate_swot_analysis(profile: BusinessProfileSchema) -> Dict[str, Any]:
    """Generate a SWOT analysis and action plan for a full business profile"""
    settings = get_settings()
    settings.require_api_key()

    logger.info(f"🔍 Generating SWOT analysis for '{profile.brand_name or 'unnamed brand'}'")
    prompt = build_swot_prompt(profile, structured=settings.output_mode == "structured")
    return await _run_swot(prompt, settings)


async def generate_quick_swot_analysis(profile: QuickSwotSchema) -> Dict[str, Any]:
    settings = get_settings()
    settings.require_api_key()

    logger.info(f"🔍 Generating quick SWOT analysis for '{profile.business}'")
    prompt = build_quick_swot_prompt(profile, structured=settings.output_mode == "structured")
    return await _run_swot(prompt, settings)


async def generate_personalized_question(profile: BusinessProfileSchema) -> Dict[str, str]:
    """Ask the model for one open-ended follow-up question about the profile"""
    settings = get_settings()
    settings.require_api_key()

    logger.info(f"🔍 Generating personalized question for '{profile.brand_name or 'unnamed brand'}'")
    raw = await completion_service.request_completion(
        QUESTION_SYSTEM_PROMPT,
        build_question_prompt(profile),
        settings=settings,
    )
    return {"personalizedQuestion": raw.strip()}
