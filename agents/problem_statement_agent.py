import json

from errors import UpstreamError, ValidationError
from models import GenerateRequest
from utils.llm import call_llm

MISSING_INPUT_MESSAGE = "Missing input parameters. Category, experience, mode, and goals are required."

RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "s_no": {
                "type": "NUMBER",
                "description": "Serial number from 1 to 15"
            },
            "business_title": {
                "type": "STRING",
                "description": "A clear, real-world PROBLEM STATEMENT describing a pain point people face in India. NOT a business idea."
            },
            "detail": {
                "type": "STRING",
                "description": "One-line explanation of why this problem matters and who is affected"
            }
        },
        "required": ["s_no", "business_title", "detail"]
    }
}


def reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant in Gemini output: {name}")


class ProblemStatementAgent:
    def __init__(self, llm=call_llm):
        self.llm = llm

    def build_prompt(self, request: GenerateRequest) -> str:
        return f"""
You are a problem-discovery AI focused on identifying REAL problems people face in India.

USER PROFILE:
- Categories: {request.category}
- Experience: {request.experience} years
- Business Mode: {request.mode}
- Goals: {request.goals}

TASK:
1. Generate 15 REAL-WORLD PROBLEM STATEMENTS.
2. Problems must describe pain points faced by people, businesses, or communities in India.
3. DO NOT suggest solutions.
4. DO NOT generate business ideas, startup names, or product concepts.
5. Each problem must be practical, realistic, and relevant to the user's inputs.
6. Output ONLY valid JSON matching the schema.
7. Do NOT include markdown, explanations, or extra text.
"""

    def generation_config(self) -> dict:
        return {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA
        }

    def run(self, request: GenerateRequest):
        if request.missing_fields():
            raise ValidationError(MISSING_INPUT_MESSAGE)

        prompt = self.build_prompt(request)
        try:
            text = self.llm(prompt, generation_config=self.generation_config())
            # Shape is whatever the schema-constrained output gave us; only parsing is checked.
            # NaN and Infinity are not JSON and cannot be serialized back to the caller.
            return json.loads(text.strip(), parse_constant=reject_constant)
        except Exception as e:
            raise UpstreamError(str(e)) from e
