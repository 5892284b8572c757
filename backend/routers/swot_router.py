import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from schemas.swot_schemas import BusinessProfileSchema, QuickSwotSchema
from services.swot_service import (
    generate_personalized_question,
    generate_quick_swot_analysis,
    generate_swot_analysis,
)
from utils.config import MissingCredentialError, get_settings
from utils.constant import MISSING_API_KEY_ERROR, QUESTION_FAILURE_ERROR, SWOT_FAILURE_ERROR

logger = logging.getLogger(__name__)


def verify_azure_credentials():
    """Reject the request before the body is validated when no API key is configured"""
    get_settings().require_api_key()


router = APIRouter(
    tags=["SWOT"],
    dependencies=[Depends(verify_azure_credentials)]
)


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/swot")
async def post_swot(payload: BusinessProfileSchema):
    try:
        return await generate_swot_analysis(payload)
    except MissingCredentialError:
        logger.error("❌ SWOT analysis requested but AZURE_OPENAI_API_KEY is not set")
        return error_response(MISSING_API_KEY_ERROR)
    except Exception:
        logger.exception("❌ Azure OpenAI API error during SWOT analysis")
        return error_response(SWOT_FAILURE_ERROR)


@router.post("/swot/quick")
async def post_quick_swot(payload: QuickSwotSchema):
    try:
        return await generate_quick_swot_analysis(payload)
    except MissingCredentialError:
        logger.error("❌ Quick SWOT analysis requested but AZURE_OPENAI_API_KEY is not set")
        return error_response(MISSING_API_KEY_ERROR)
    except Exception:
        logger.exception("❌ Azure OpenAI API error during quick SWOT analysis")
        return error_response(SWOT_FAILURE_ERROR)


@router.post("/generateQuestion")
async def post_generate_question(payload: BusinessProfileSchema):
    try:
        return await generate_personalized_question(payload)
    except MissingCredentialError:
        logger.error("❌ Personalized question requested but AZURE_OPENAI_API_KEY is not set")
        return error_response(MISSING_API_KEY_ERROR)
    except Exception:
        logger.exception("❌ Error generating personalized question")
        return error_response(QUESTION_FAILURE_ERROR)
