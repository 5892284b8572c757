SWOT_SYSTEM_PROMPT = """You are a business analyst expert. Provide a concise SWOT (Strengths, Weaknesses, Opportunities, Threats) analysis based on the given information. Use '---' to separate each section without including headers or additional text. Don't use Headers like 'Strengths', 'Weaknesses', 'Opportunities', 'Threats', etc. After the SWOT analysis, provide an action plan based on the analysis."""

SWOT_STRUCTURED_SYSTEM_PROMPT = """You are a business analyst expert. Provide a concise SWOT (Strengths, Weaknesses, Opportunities, Threats) analysis based on the given information, followed by an action plan based on the analysis. Reply with a single JSON object and nothing else."""

QUESTION_SYSTEM_PROMPT = """You are a business analyst expert helping a founder think more deeply about their business. Based on the given business profile, ask exactly one open-ended, personalized follow-up question that would most improve the quality of a SWOT analysis. Reply with the question only."""

SWOT_PROMPT_HEADER = "Analyze the following business context and provide a SWOT analysis:"

QUESTION_PROMPT_HEADER = "Based on the following information, generate a personalized question for the user:"

# Numbered lines with a trailing '/' so each section can be split into display lines
SWOT_PROMPT_FOOTER = """Provide the response in the following format:
Strengths:
---
Weaknesses:
---
Opportunities:
---
Threats:
---
Action Plan:
---
The following rule is important and must be strictly followed: Do not add Strengths:, Weaknesses:, Opportunities:, Threats:, or Action Plan: headers at the beginning of each section. Add '/' after each line. Number each line."""

SWOT_STRUCTURED_FOOTER = """Provide the response as a JSON object with exactly these keys:
"strengths", "weaknesses", "opportunities", "threats", "action_plan".
Each value must be a list of short strings, one item per point, without numbering."""

QUESTION_PROMPT_FOOTER = """Ask one open-ended follow-up question tailored to this business. Do not answer it and do not add any other text.

Question:"""

# ========================= PROFILE VALUES =========================

OTHER = "Other"
INDUSTRY_OTHER = "Others"
INTERNATIONAL = "International"
AFFIRMATIVE = "Yes"
NOT_LAUNCHED = "No"

REGULATED_INDUSTRIES = ("Healthcare", "Finance")
TECHNOLOGY_INDUSTRY = "Technology"
CUSTOMER_EXPERIENCE_INDUSTRIES = ("Retail", "Food & Beverage")

SMALLEST_COMPANY_SIZE = "1-10"
LARGEST_COMPANY_SIZE = "501+"

B2B = "B2B"
CONSUMER_MODELS = ("B2C", "D2C")

GOAL_NEW_MARKETS = "Expanding into new markets"
GOAL_NEW_PRODUCTS = "Developing new products/services"

# ========================= RESPONSE FORMAT =========================

SECTION_DELIMITER = "---"
LINE_DELIMITER = "/"
NOT_PROVIDED = "Not provided."

SECTION_NAMES = (
    ("strengths", "Strengths"),
    ("weaknesses", "Weaknesses"),
    ("opportunities", "Opportunities"),
    ("threats", "Threats"),
    ("action_plan", "Action Plan"),
)

# ========================= ERROR MESSAGES =========================

MISSING_API_KEY_ERROR = "Azure OpenAI API key not configured. Please set the AZURE_OPENAI_API_KEY environment variable."
SWOT_FAILURE_ERROR = "An error occurred during the SWOT analysis. Please check your Azure OpenAI API key and try again."
QUESTION_FAILURE_ERROR = "Failed to generate personalized question."
