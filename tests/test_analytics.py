import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.engine import (  # noqa: E402
    analyze_resume_analytics,
    extract_experience_metrics,
    extract_skills,
)


class ResumeAnalyticsTests(unittest.TestCase):
    SAMPLE = (
        "Senior Software Engineer at Acme Inc.\n"
        "7+ years of experience as a developer.\n"
        "Python python PYTHON with Docker. Leadership across teams."
    )

    def test_skills_are_counted_and_ranked(self):
        skills = extract_skills(self.SAMPLE)
        self.assertEqual(skills[0].name, "python")
        self.assertEqual(skills[0].count, 3)
        self.assertEqual(skills[0].category, "technical")
        names = [item.name for item in skills]
        self.assertEqual(names, ["python", "docker", "leadership"])

    def test_skills_are_capped(self):
        text = " ".join(
            [
                "javascript typescript react angular vue node express python django flask",
                "java spring php laravel html css sass tailwind bootstrap jquery",
            ]
        )
        self.assertEqual(len(extract_skills(text)), 15)

    def test_no_skills_means_empty_list(self):
        self.assertEqual(extract_skills("Nothing relevant here"), [])

    def test_experience_metrics(self):
        metrics = extract_experience_metrics(self.SAMPLE)
        self.assertEqual(metrics.total_years, 7)
        self.assertEqual(metrics.companies, 1)
        self.assertEqual(metrics.roles, 3)
        self.assertEqual(metrics.recent_role, "Software Engineer")

    def test_unknown_experience_stays_unknown(self):
        metrics = extract_experience_metrics("Enjoys hiking")
        self.assertIsNone(metrics.total_years)
        self.assertEqual(metrics.companies, 0)
        self.assertEqual(metrics.roles, 0)
        self.assertIsNone(metrics.recent_role)

    def test_insights(self):
        analytics = analyze_resume_analytics(self.SAMPLE)
        self.assertEqual(
            analytics.insights,
            [
                "Your resume shows a good balance of technical and soft skills.",
                "You mention python frequently. Ensure you're using varied terminology.",
                "Your experience level positions you well for senior roles.",
            ],
        )
        self.assertEqual(analytics, analyze_resume_analytics(self.SAMPLE))


if __name__ == "__main__":
    unittest.main()
