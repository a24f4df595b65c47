import dataclasses
import json
import os
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.ai import factory  # noqa: E402
from resume_review.ai.factory import get_feedback_provider, usable_api_key  # noqa: E402
from resume_review.ai.providers.heuristic_provider import HeuristicProvider  # noqa: E402
from resume_review.ai.providers.openai_provider import (  # noqa: E402
    OpenAIProvider,
    check_review_result,
    parse_json_payload,
)
from resume_review.ai.types import MalformedExternalResponse  # noqa: E402
from resume_review.core.config import settings  # noqa: E402
from resume_review.engine import InvalidInput, analyze_job_match, analyze_resume  # noqa: E402
from resume_review.schemas.review import FeedbackResult  # noqa: E402

TEST_KEY = "sk-test-" + "a" * 32

RESUME = (
    "Professional Summary\nExperienced in building data platforms.\n"
    "Experience\nLed a migration that reduced costs by 30%.\n"
    "Skills\nPython, SQL, communication\nEducation\nBachelor degree, 2012"
)


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _provider_with_response(*, content=None, error=None) -> OpenAIProvider:
    provider = OpenAIProvider(model="gpt-4o-mini", api_key=TEST_KEY, fallback=HeuristicProvider())
    create = MagicMock()
    if error is not None:
        create.side_effect = error
    else:
        create.return_value = _completion(content)
    provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return provider


def _review_payload(**overrides):
    payload = {
        "overall_impression": "Solid resume.",
        "section_feedback": {
            "Professional Summary": "Clear.",
            "Work Experience": "Strong metrics.",
            "Skills": "Good.",
            "Education": "Complete.",
        },
        "suggestions": ["a", "b", "c", "d", "e"],
        "score": 77,
    }
    payload.update(overrides)
    return payload


def _job_match_payload(**overrides):
    payload = {
        "overall_match": 60,
        "keyword_matches": [{"keyword": "Python", "found": True}, {"keyword": "AWS", "found": False}],
        "missing_keywords": ["AWS"],
        "suggested_improvements": ["a", "b", "c", "d", "e"],
        "relevance_score": 70,
    }
    payload.update(overrides)
    return payload


class ProviderFactoryTests(unittest.TestCase):
    def setUp(self):
        env = patch.dict(os.environ, {"AI_PROVIDER": "openai"})
        env.start()
        self.addCleanup(env.stop)
        no_env_key = patch.object(factory, "settings", dataclasses.replace(settings, openai_api_key=None, ai_enabled=True))
        no_env_key.start()
        self.addCleanup(no_env_key.stop)

    def test_missing_key_selects_heuristic(self):
        self.assertIsInstance(get_feedback_provider(None), HeuristicProvider)

    def test_short_or_placeholder_key_selects_heuristic(self):
        self.assertIsNone(usable_api_key("sk-short"))
        self.assertIsNone(usable_api_key("your_openai_key_goes_here_please"))
        self.assertIsInstance(get_feedback_provider("sk-short"), HeuristicProvider)

    def test_usable_key_selects_openai(self):
        self.assertEqual(usable_api_key(f"  {TEST_KEY}  "), TEST_KEY)
        self.assertIsInstance(get_feedback_provider(TEST_KEY), OpenAIProvider)

    def test_heuristic_provider_setting_wins(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "heuristic"}):
            self.assertIsInstance(get_feedback_provider(TEST_KEY), HeuristicProvider)

    def test_unsupported_provider_raises(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "gemini"}):
            with self.assertRaises(ValueError):
                get_feedback_provider(TEST_KEY)


class ParseJsonPayloadTests(unittest.TestCase):
    def test_plain_json(self):
        self.assertEqual(parse_json_payload('{"score": 80}'), {"score": 80})

    def test_json_wrapped_in_prose(self):
        self.assertEqual(parse_json_payload('Here you go:\n{"score": 80}\nThanks'), {"score": 80})

    def test_empty_and_non_json_raise(self):
        with self.assertRaises(MalformedExternalResponse) as ctx:
            parse_json_payload("")
        self.assertEqual(ctx.exception.code, "empty_response")
        with self.assertRaises(MalformedExternalResponse):
            parse_json_payload("no braces at all")
        with self.assertRaises(MalformedExternalResponse):
            parse_json_payload("[1, 2, 3]")


class OpenAIProviderTests(unittest.TestCase):
    def test_valid_response_is_returned(self):
        provider = _provider_with_response(content=json.dumps(_review_payload()))
        result = provider.analyze_resume(RESUME)
        self.assertEqual(result.score, 77)
        self.assertEqual(result.overall_impression, "Solid resume.")
        self.assertEqual(result.section_feedback["Work Experience"], "Strong metrics.")

    def test_review_breaking_result_guarantees_falls_back(self):
        payloads = [
            _review_payload(section_feedback={"Skills": "Good."}),
            _review_payload(score=3),
            _review_payload(score=99),
            _review_payload(suggestions=["a"] * 5),
        ]
        for payload in payloads:
            provider = _provider_with_response(content=json.dumps(payload))
            with self.assertLogs("resume_review.ai.providers.openai_provider", level="WARNING") as logs:
                result = provider.analyze_resume(RESUME)
            self.assertEqual(result, analyze_resume(RESUME))
            self.assertIn("code=invalid_schema", logs.output[0])

    def test_check_review_result_reports_every_problem(self):
        result = FeedbackResult(
            overall_impression="x",
            section_feedback={"Skills": "Good."},
            suggestions=["a"] * 5,
            score=3,
        )
        with self.assertRaises(MalformedExternalResponse) as ctx:
            check_review_result(result)
        self.assertEqual(ctx.exception.code, "invalid_schema")
        self.assertIn("Professional Summary", str(ctx.exception))
        self.assertIn("score 3", str(ctx.exception))
        self.assertIn("duplicate suggestions", str(ctx.exception))

    def test_valid_job_match_is_returned(self):
        provider = _provider_with_response(content=json.dumps(_job_match_payload()))
        result = provider.analyze_job_match(RESUME, "We need Python and AWS experience.")
        self.assertEqual(result.overall_match, 60)
        self.assertEqual(result.relevance_score, 70)

    def test_job_match_breaking_result_guarantees_falls_back(self):
        description = "We need Python and AWS experience."
        payloads = [
            _job_match_payload(overall_match=10),
            _job_match_payload(overall_match=99),
            _job_match_payload(relevance_score=20),
            _job_match_payload(suggested_improvements=["same"] * 5),
        ]
        for payload in payloads:
            provider = _provider_with_response(content=json.dumps(payload))
            self.assertEqual(
                provider.analyze_job_match(RESUME, description),
                analyze_job_match(RESUME, description),
            )

    def test_api_error_falls_back_to_heuristic(self):
        provider = _provider_with_response(error=RuntimeError("quota exceeded"))
        with self.assertLogs("resume_review.ai.providers.openai_provider", level="WARNING"):
            result = provider.analyze_resume(RESUME)
        self.assertEqual(result, analyze_resume(RESUME))

    def test_malformed_response_falls_back_to_heuristic(self):
        provider = _provider_with_response(content='{"overall_impression": "missing everything else"}')
        self.assertEqual(provider.analyze_resume(RESUME), analyze_resume(RESUME))

        provider = _provider_with_response(content="not json")
        self.assertEqual(provider.analyze_resume(RESUME), analyze_resume(RESUME))

    def test_empty_resume_skips_external_call(self):
        provider = _provider_with_response(error=AssertionError("should not be called"))
        self.assertEqual(provider.analyze_resume("").score, 0)
        provider._client.chat.completions.create.assert_not_called()

    def test_job_match_validates_before_calling(self):
        provider = _provider_with_response(error=AssertionError("should not be called"))
        with self.assertRaises(InvalidInput):
            provider.analyze_job_match(RESUME, " ")
        provider._client.chat.completions.create.assert_not_called()

    def test_job_match_falls_back_on_bad_schema(self):
        provider = _provider_with_response(content=json.dumps({"overall_match": 200}))
        description = "We need Python and AWS experience."
        self.assertEqual(
            provider.analyze_job_match(RESUME, description),
            analyze_job_match(RESUME, description),
        )


if __name__ == "__main__":
    unittest.main()
