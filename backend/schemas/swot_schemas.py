from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BusinessProfileSchema(BaseModel):
    """Business profile posted by the SWOT form; every field is optional"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # Identity
    brand_name: Optional[str] = None
    brand_launch_status: Optional[str] = None
    industry: Optional[str] = None
    industry_other: Optional[str] = None
    company_size: Optional[str] = None
    market_scope: Optional[str] = None
    international_regions: Union[List[str], str, None] = None
    business_model: Optional[str] = None
    business_model_other: Optional[str] = None
    main_goal: Optional[str] = None
    main_goal_other: Optional[str] = None
    products_services_overview: Optional[str] = None
    target_customers: Optional[str] = None

    # Not yet launched
    launch_challenges: List[str] = Field(default_factory=list)
    launch_challenges_other: Optional[str] = None
    go_to_market_strategy: Optional[str] = None
    go_to_market_strategy_other: Optional[str] = None

    # Already launched
    market_position: Optional[str] = None
    competitors: Optional[str] = None
    competitive_advantage: Optional[str] = None
    current_challenges: List[str] = Field(default_factory=list)
    current_challenges_other: Optional[str] = None

    # Industry specific
    regulatory_environment: Optional[str] = None
    regulatory_details: Optional[str] = None
    technological_innovation: Optional[str] = None
    customer_experience: Optional[str] = None

    # Company size specific
    resource_needs: List[str] = Field(default_factory=list)
    resource_needs_other: Optional[str] = None
    organizational_challenges: List[str] = Field(default_factory=list)
    organizational_challenges_other: Optional[str] = None

    # Business model specific
    sales_cycle: Optional[str] = None
    client_acquisition: Optional[str] = None
    marketing_channels: List[str] = Field(default_factory=list)
    marketing_channels_other: Optional[str] = None
    customer_retention: Optional[str] = None

    # Main goal specific
    market_research: Optional[str] = None
    entry_strategy: Optional[str] = None
    innovation_process: Optional[str] = None
    customer_feedback: Optional[str] = None

    # Opportunities and threats
    market_trends: Optional[str] = None
    external_factors: Optional[str] = None
    final_thoughts: Optional[str] = None


class QuickSwotSchema(BaseModel):
    """Reduced five-field form used by the quick SWOT page"""

    business: str = Field(min_length=1)
    country: str = Field(min_length=1)
    industry: str = Field(min_length=1)
    challenges: str = Field(min_length=1)
    vision: str = Field(min_length=1)


class StructuredAnalysisSchema(BaseModel):
    strengths: List[str]
    weaknesses: List[str]
    opportunities: List[str]
    threats: List[str]
    action_plan: List[str]
