from typing import Optional

import requests

from config import GEMINI_API_BASE, GEMINI_API_KEY, GEMINI_MODEL
from errors import LLMError


def call_llm(prompt: str, generation_config: Optional[dict] = None, model: str = GEMINI_MODEL) -> str:
    url = f"{GEMINI_API_BASE}/models/{model}:generateContent"
    headers = {
        "x-goog-api-key": GEMINI_API_KEY or "",
        "Content-Type": "application/json"
    }
    data = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}]
    }
    if generation_config:
        data["generationConfig"] = generation_config

    response = requests.post(url, headers=headers, json=data)

    try:
        resp_json = response.json()
    except ValueError:
        raise LLMError(f"Failed to parse JSON from Gemini API: {response.text}")

    if "error" in resp_json:
        error = resp_json["error"]
        raise LLMError(f"Gemini API error ({error.get('code', response.status_code)}): {error.get('message', error)}")

    if response.status_code >= 400:
        raise LLMError(f"Gemini API error ({response.status_code}): {resp_json}")

    block_reason = resp_json.get("promptFeedback", {}).get("blockReason")
    if block_reason:
        raise LLMError(f"Gemini API blocked the prompt: {block_reason}")

    candidates = resp_json.get("candidates") or []
    if not candidates:
        raise LLMError(f"Gemini API returned no candidates: {resp_json}")

    parts = candidates[0].get("content", {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)
    if not text:
        finish_reason = candidates[0].get("finishReason", "UNKNOWN")
        raise LLMError(f"Gemini API returned an empty response (finishReason: {finish_reason})")

    return text
