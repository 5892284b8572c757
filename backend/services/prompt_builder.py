from dataclasses import dataclass, replace
from typing import Any, Callable, List, Sequence

from schemas.swot_schemas import BusinessProfileSchema, QuickSwotSchema
from utils.constant import (
    AFFIRMATIVE,
    B2B,
    CONSUMER_MODELS,
    CUSTOMER_EXPERIENCE_INDUSTRIES,
    GOAL_NEW_MARKETS,
    GOAL_NEW_PRODUCTS,
    INDUSTRY_OTHER,
    INTERNATIONAL,
    LARGEST_COMPANY_SIZE,
    NOT_LAUNCHED,
    OTHER,
    QUESTION_PROMPT_FOOTER,
    QUESTION_PROMPT_HEADER,
    REGULATED_INDUSTRIES,
    SMALLEST_COMPANY_SIZE,
    SWOT_PROMPT_FOOTER,
    SWOT_PROMPT_HEADER,
    SWOT_STRUCTURED_FOOTER,
    TECHNOLOGY_INDUSTRY,
)

IDENTITY = "identity"
CONTEXT = "context"
OUTLOOK = "outlook"


def _always(profile) -> bool:
    return True


@dataclass(frozen=True)
class PromptRule:
    """One labeled prompt line, included when its predicate holds for the profile"""

    label: str
    value: Callable[[Any], str]
    when: Callable[[Any], bool] = _always
    group: str = CONTEXT

    def render(self, profile) -> str:
        return f"{self.label}: {self.value(profile)}".rstrip()


def as_text(value) -> str:
    """Render a form value; None becomes an empty string and lists are comma joined"""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def with_other(value, sentinel, other) -> str:
    """Append the companion free text when the sentinel option was picked"""
    text = as_text(value)
    if value == sentinel and as_text(other).strip():
        return f"{text} - {as_text(other)}"
    return text


def list_with_other(values, other) -> str:
    text = as_text(values or [])
    if values and OTHER in values and as_text(other).strip():
        return f"{text} - {as_text(other)}"
    return text


def field(name: str) -> Callable[[Any], str]:
    return lambda profile: as_text(getattr(profile, name))


# ========================= PREDICATES =========================

def not_launched(profile: BusinessProfileSchema) -> bool:
    return profile.brand_launch_status == NOT_LAUNCHED


def launched(profile: BusinessProfileSchema) -> bool:
    return not not_launched(profile)


def regulated(profile: BusinessProfileSchema) -> bool:
    return profile.industry in REGULATED_INDUSTRIES


def has_regulatory_details(profile: BusinessProfileSchema) -> bool:
    return regulated(profile) and profile.regulatory_environment == AFFIRMATIVE


def technology(profile: BusinessProfileSchema) -> bool:
    return profile.industry == TECHNOLOGY_INDUSTRY


def customer_facing(profile: BusinessProfileSchema) -> bool:
    return profile.industry in CUSTOMER_EXPERIENCE_INDUSTRIES


def smallest_company(profile: BusinessProfileSchema) -> bool:
    return profile.company_size == SMALLEST_COMPANY_SIZE


def largest_company(profile: BusinessProfileSchema) -> bool:
    return profile.company_size == LARGEST_COMPANY_SIZE


def business_to_business(profile: BusinessProfileSchema) -> bool:
    return profile.business_model == B2B


def consumer_facing(profile: BusinessProfileSchema) -> bool:
    return profile.business_model in CONSUMER_MODELS


def expanding_markets(profile: BusinessProfileSchema) -> bool:
    return profile.main_goal == GOAL_NEW_MARKETS


def developing_products(profile: BusinessProfileSchema) -> bool:
    return profile.main_goal == GOAL_NEW_PRODUCTS


# ========================= RULE TABLES =========================

PROFILE_RULES = (
    PromptRule("Brand Name", field("brand_name"), group=IDENTITY),
    PromptRule("Brand Launch Status", field("brand_launch_status"), group=IDENTITY),
    PromptRule("Industry/Sector",
               lambda p: with_other(p.industry, INDUSTRY_OTHER, p.industry_other), group=IDENTITY),
    PromptRule("Company Size", field("company_size"), group=IDENTITY),
    PromptRule("Market Scope",
               lambda p: with_other(p.market_scope, INTERNATIONAL, p.international_regions), group=IDENTITY),
    PromptRule("Business Model",
               lambda p: with_other(p.business_model, OTHER, p.business_model_other), group=IDENTITY),
    PromptRule("Main Goal/Objectives",
               lambda p: with_other(p.main_goal, OTHER, p.main_goal_other), group=IDENTITY),

    PromptRule("Products/Services Overview", field("products_services_overview")),
    PromptRule("Target Customers", field("target_customers")),

    PromptRule("Launch Challenges",
               lambda p: list_with_other(p.launch_challenges, p.launch_challenges_other), not_launched),
    PromptRule("Go-to-Market Strategy",
               lambda p: with_other(p.go_to_market_strategy, OTHER, p.go_to_market_strategy_other), not_launched),
    PromptRule("Market Position", field("market_position"), launched),
    PromptRule("Competitors", field("competitors"), launched),
    PromptRule("Competitive Advantage", field("competitive_advantage"), launched),
    PromptRule("Current Challenges",
               lambda p: list_with_other(p.current_challenges, p.current_challenges_other), launched),

    PromptRule("Regulatory Environment", field("regulatory_environment"), regulated),
    PromptRule("Regulatory Details", field("regulatory_details"), has_regulatory_details),
    PromptRule("Technological Innovation", field("technological_innovation"), technology),
    PromptRule("Customer Experience", field("customer_experience"), customer_facing),

    PromptRule("Resource Needs",
               lambda p: list_with_other(p.resource_needs, p.resource_needs_other), smallest_company),
    PromptRule("Organizational Challenges",
               lambda p: list_with_other(p.organizational_challenges, p.organizational_challenges_other),
               largest_company),

    PromptRule("Sales Cycle", field("sales_cycle"), business_to_business),
    PromptRule("Client Acquisition", field("client_acquisition"), business_to_business),
    PromptRule("Marketing Channels",
               lambda p: list_with_other(p.marketing_channels, p.marketing_channels_other), consumer_facing),
    PromptRule("Customer Retention", field("customer_retention"), consumer_facing),

    PromptRule("Market Research", field("market_research"), expanding_markets),
    PromptRule("Entry Strategy", field("entry_strategy"), expanding_markets),
    PromptRule("Innovation Process", field("innovation_process"), developing_products),
    PromptRule("Customer Feedback", field("customer_feedback"), developing_products),

    PromptRule("Market Trends", field("market_trends"), group=OUTLOOK),
    PromptRule("External Factors", field("external_factors"), group=OUTLOOK),
)

# The question prompt labels the industry line "Industry"
QUESTION_RULES = tuple(
    replace(rule, label="Industry") if rule.label == "Industry/Sector" else rule
    for rule in PROFILE_RULES
) + (
    PromptRule("Final Thoughts", field("final_thoughts"), group=OUTLOOK),
)

QUICK_RULES = (
    PromptRule("Business Name", field("business"), group=IDENTITY),
    PromptRule("Country", field("country"), group=IDENTITY),
    PromptRule("Industry", field("industry"), group=IDENTITY),
    PromptRule("Current Challenges", field("challenges")),
    PromptRule("Goals and Vision", field("vision")),
)


def render_profile(profile, rules: Sequence[PromptRule]) -> str:
    """Fold the rule table over the profile; a blank line separates rule groups"""
    lines: List[str] = []
    current_group = None
    for rule in rules:
        if not rule.when(profile):
            continue
        if current_group is not None and rule.group != current_group:
            lines.append("")
        current_group = rule.group
        lines.append(rule.render(profile))
    return "\n".join(lines)


def _compose(header: str, body: str, footer: str) -> str:
    return f"{header}\n\n{body}\n\n{footer}"


def build_swot_prompt(profile: BusinessProfileSchema, structured: bool = False) -> str:
    """Build the SWOT analysis prompt for a full business profile"""
    footer = SWOT_STRUCTURED_FOOTER if structured else SWOT_PROMPT_FOOTER
    return _compose(SWOT_PROMPT_HEADER, render_profile(profile, PROFILE_RULES), footer)


def build_quick_swot_prompt(profile: QuickSwotSchema, structured: bool = False) -> str:
    footer = SWOT_STRUCTURED_FOOTER if structured else SWOT_PROMPT_FOOTER
    return _compose(SWOT_PROMPT_HEADER, render_profile(profile, QUICK_RULES), footer)


def build_question_prompt(profile: BusinessProfileSchema) -> str:
    """Build the prompt asking for one personalized follow-up question"""
    return _compose(QUESTION_PROMPT_HEADER, render_profile(profile, QUESTION_RULES), QUESTION_PROMPT_FOOTER)
