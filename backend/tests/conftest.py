"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from services import completion_service

AZURE_ENV = {
    "AZURE_OPENAI_API_KEY": "test-key",
    "AZURE_OPENAI_ENDPOINT": "https://example-resource.openai.azure.com",
    "AZURE_OPENAI_API_VERSION": "2024-02-01",
    "AZURE_OPENAI_DEPLOYMENT_NAME": "gpt-4o-swot",
}


class CompletionStub:
    """Stands in for the outbound completion call and records every invocation"""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def __call__(self, system_prompt, user_prompt, **kwargs):
        self.calls.append({"system_prompt": system_prompt, "user_prompt": user_prompt, **kwargs})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def azure_env(monkeypatch):
    """Configure a complete Azure OpenAI environment"""
    for name, value in AZURE_ENV.items():
        monkeypatch.setenv(name, value)
    for name in ("SWOT_OUTPUT_MODE", "SWOT_STRICT_PARSE", "AZURE_OPENAI_MAX_TOKENS", "AZURE_OPENAI_TEMPERATURE"):
        monkeypatch.delenv(name, raising=False)
    return AZURE_ENV


@pytest.fixture
def missing_credentials(monkeypatch):
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)


@pytest.fixture
def completion_stub(monkeypatch):
    stub = CompletionStub()
    monkeypatch.setattr(completion_service, "request_completion", stub)
    return stub


@pytest.fixture
def launched_profile():
    """A launched B2C retail brand"""
    return {
        "brandName": "Harbor Roasters",
        "brandLaunchStatus": "Yes",
        "industry": "Retail",
        "companySize": "11-50",
        "marketScope": "Local",
        "businessModel": "B2C",
        "mainGoal": "Increasing revenue",
        "productsServicesOverview": "Specialty coffee beans and brewing gear",
        "targetCustomers": "Home baristas",
        "marketPosition": "Challenger",
        "competitors": "Blue Bottle, local cafes",
        "competitiveAdvantage": "Roasted to order",
        "currentChallenges": ["Cash flow"],
        "customerExperience": "Tasting events in store",
        "marketingChannels": ["Social media", "Email"],
        "customerRetention": "Subscription discounts",
        "marketTrends": "Growth in home brewing",
        "externalFactors": "Green coffee price volatility",
    }


@pytest.fixture
def startup_profile():
    """The not-yet-launched technology B2B startup scenario"""
    return {
        "brandName": "Ledgerly",
        "brandLaunchStatus": "No",
        "industry": "Technology",
        "companySize": "1-10",
        "marketScope": "National",
        "businessModel": "B2B",
        "mainGoal": "Launching the brand",
        "launchChallenges": ["Funding", "Other"],
        "launchChallengesOther": "Legal setup",
        "goToMarketStrategy": "Direct sales",
        "technologicalInnovation": "Automated reconciliation with ML",
        "resourceNeeds": ["Talent"],
        "salesCycle": "3-6 months",
        "clientAcquisition": "Partnerships with accountants",
        "marketTrends": "Cloud accounting adoption",
        "externalFactors": "Interest rates",
    }
