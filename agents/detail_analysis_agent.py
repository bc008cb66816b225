import json

from errors import UpstreamError, ValidationError
from models import DetailRequest
from utils.llm import call_llm

MISSING_INPUT_MESSAGE = "Missing required parameters for detailed analysis."

MAX_OUTPUT_TOKENS = 3000
TEMPERATURE = 0.7


class DetailAnalysisAgent:
    def __init__(self, llm=call_llm):
        self.llm = llm

    def build_prompt(self, request: DetailRequest) -> str:
        user_profile = json.dumps(request.user_data, indent=2, ensure_ascii=False)
        return f"""
You are a market research and problem-analysis expert focused on India.

PROBLEM STATEMENT:
"{request.business_title}"

USER PROFILE:
{user_profile}

TASK:
Generate a detailed 1000+ word analysis covering:

1. Problem overview
2. Who is affected and how often
3. Root causes
4. Why current solutions fail
5. Market size and urgency in India
6. Stakeholders involved
7. Economic and social impact
8. Willingness to pay to solve this problem
9. Possible solution approaches (high-level, not business plans)
10. Why this problem fits THIS user
11. Risks and constraints
12. Scalability of solving the problem
13. Long-term relevance (5–10 years)
14. KPIs to measure problem resolution
15. Summary and opportunity insight

IMPORTANT:
- Focus on PROBLEM analysis, not business plans
- Keep it realistic and India-specific
- Write professionally and practically
"""

    def generation_config(self) -> dict:
        return {
            "maxOutputTokens": MAX_OUTPUT_TOKENS,
            "temperature": TEMPERATURE
        }

    def run(self, request: DetailRequest) -> dict:
        if request.missing_fields():
            raise ValidationError(MISSING_INPUT_MESSAGE)

        prompt = self.build_prompt(request)
        try:
            text = self.llm(prompt, generation_config=self.generation_config())
        except Exception as e:
            raise UpstreamError(str(e)) from e

        return {"detailed_analysis": text}
