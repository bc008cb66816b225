import unittest
from unittest.mock import MagicMock, patch

from errors import LLMError
from utils.llm import call_llm


def make_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


class TestCallLLM(unittest.TestCase):
    """Test suite for the Gemini generateContent call."""

    @patch("utils.llm.requests.post")
    def test_builds_generate_content_request(self, mock_post):
        mock_post.return_value = make_response(payload={
            "candidates": [{"content": {"parts": [{"text": "hello"}]}}]
        })

        result = call_llm("Say hello", generation_config={"temperature": 0.7}, model="gemini-test")

        self.assertEqual(result, "hello")
        url = mock_post.call_args.args[0]
        self.assertTrue(url.endswith("/models/gemini-test:generateContent"))
        self.assertIn("x-goog-api-key", mock_post.call_args.kwargs["headers"])
        sent = mock_post.call_args.kwargs["json"]
        self.assertEqual(sent["contents"], [{"role": "user", "parts": [{"text": "Say hello"}]}])
        self.assertEqual(sent["generationConfig"], {"temperature": 0.7})

    @patch("utils.llm.requests.post")
    def test_omits_empty_generation_config(self, mock_post):
        mock_post.return_value = make_response(payload={
            "candidates": [{"content": {"parts": [{"text": "ok"}]}}]
        })
        call_llm("prompt")
        self.assertNotIn("generationConfig", mock_post.call_args.kwargs["json"])

    @patch("utils.llm.requests.post")
    def test_joins_text_parts(self, mock_post):
        mock_post.return_value = make_response(payload={
            "candidates": [{"content": {"parts": [{"text": "[1, "}, {"text": "2]"}]}}]
        })
        self.assertEqual(call_llm("prompt"), "[1, 2]")

    @patch("utils.llm.requests.post")
    def test_api_error_object(self, mock_post):
        mock_post.return_value = make_response(status_code=400, payload={
            "error": {"code": 400, "message": "API key not valid.", "status": "INVALID_ARGUMENT"}
        })
        with self.assertRaises(LLMError) as ctx:
            call_llm("prompt")
        self.assertIn("API key not valid.", str(ctx.exception))

    @patch("utils.llm.requests.post")
    def test_non_json_body(self, mock_post):
        mock_post.return_value = make_response(status_code=502, payload=ValueError("no json"), text="Bad Gateway")
        with self.assertRaises(LLMError) as ctx:
            call_llm("prompt")
        self.assertIn("Bad Gateway", str(ctx.exception))

    @patch("utils.llm.requests.post")
    def test_http_error_without_error_object(self, mock_post):
        mock_post.return_value = make_response(status_code=500, payload={"detail": "boom"})
        with self.assertRaises(LLMError):
            call_llm("prompt")

    @patch("utils.llm.requests.post")
    def test_blocked_prompt(self, mock_post):
        mock_post.return_value = make_response(payload={"promptFeedback": {"blockReason": "SAFETY"}})
        with self.assertRaises(LLMError) as ctx:
            call_llm("prompt")
        self.assertIn("SAFETY", str(ctx.exception))

    @patch("utils.llm.requests.post")
    def test_empty_candidate(self, mock_post):
        mock_post.return_value = make_response(payload={
            "candidates": [{"content": {"parts": []}, "finishReason": "MAX_TOKENS"}]
        })
        with self.assertRaises(LLMError) as ctx:
            call_llm("prompt")
        self.assertIn("MAX_TOKENS", str(ctx.exception))

    @patch("utils.llm.requests.post")
    def test_network_errors_propagate(self, mock_post):
        import requests
        mock_post.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(requests.ConnectionError):
            call_llm("prompt")


if __name__ == "__main__":
    unittest.main()
