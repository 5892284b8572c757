import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from schemas.swot_schemas import StructuredAnalysisSchema
from utils.constant import LINE_DELIMITER, NOT_PROVIDED, SECTION_DELIMITER, SECTION_NAMES

logger = logging.getLogger(__name__)


class AnalysisParseError(ValueError):
    """Raised when a model reply does not have the expected five sections"""


@dataclass(frozen=True)
class AnalysisSections:
    strengths: str = NOT_PROVIDED
    weaknesses: str = NOT_PROVIDED
    opportunities: str = NOT_PROVIDED
    threats: str = NOT_PROVIDED
    action_plan: str = NOT_PROVIDED
    # Validated item lists from a structured reply, keyed by section
    items: Optional[Dict[str, Tuple[str, ...]]] = field(default=None, compare=False)

    def lines(self, section: str) -> List[str]:
        if self.items is not None and self.items.get(section):
            return [f"{index}. {item}" for index, item in enumerate(self.items[section], start=1)]
        return split_lines(getattr(self, section))

    def as_dict(self) -> Dict[str, Dict[str, object]]:
        """Sections keyed by attribute name, each with its display title and lines"""
        return {
            key: {"title": title, "content": getattr(self, key), "lines": self.lines(key)}
            for key, title in SECTION_NAMES
        }

    def to_text(self) -> str:
        """Render back into the '---' delimited convention"""
        return f"\n{SECTION_DELIMITER}\n".join(getattr(self, key) for key, _ in SECTION_NAMES)


def split_lines(section: str) -> List[str]:
    """Split a section into display lines on '/', dropping empty fragments"""
    if not section:
        return []
    return [line.strip() for line in section.split(LINE_DELIMITER) if line.strip()]


def parse_analysis(raw: str, strict: bool = False) -> AnalysisSections:
    """
    Split a model reply into Strengths, Weaknesses, Opportunities, Threats and Action Plan.

    The split is positional on '---'. Missing trailing sections fall back to
    "Not provided." unless strict is set, in which case anything other than
    exactly five sections raises AnalysisParseError.
    """
    fragments = [fragment.strip() for fragment in (raw or "").split(SECTION_DELIMITER)]
    # A trailing delimiter after the action plan leaves one empty fragment
    if len(fragments) > len(SECTION_NAMES) and not fragments[-1]:
        fragments.pop()

    if len(fragments) != len(SECTION_NAMES):
        if strict:
            raise AnalysisParseError(
                f"Expected {len(SECTION_NAMES)} sections separated by '{SECTION_DELIMITER}', got {len(fragments)}"
            )
        logger.warning(f"⚠️ Analysis has {len(fragments)} section(s), expected {len(SECTION_NAMES)}")

    values = [fragment or NOT_PROVIDED for fragment in fragments[:len(SECTION_NAMES)]]
    return AnalysisSections(*values)


def _numbered(items) -> str:
    return "\n".join(f"{index}. {item}{LINE_DELIMITER}" for index, item in enumerate(items, start=1))


def parse_structured_analysis(raw: str) -> AnalysisSections:
    """Validate a JSON reply against the fixed five-list shape"""
    try:
        payload = json.loads(raw or "")
    except json.JSONDecodeError as e:
        raise AnalysisParseError(f"Analysis is not valid JSON: {e}") from e

    try:
        result = StructuredAnalysisSchema.model_validate(payload)
    except ValidationError as e:
        raise AnalysisParseError(f"Analysis does not match the expected shape: {e}") from e

    items = {key: tuple(item.strip() for item in getattr(result, key) if item.strip()) for key, _ in SECTION_NAMES}
    values = [_numbered(items[key]) or NOT_PROVIDED for key, _ in SECTION_NAMES]
    return AnalysisSections(*values, items=items)
