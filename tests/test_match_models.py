import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas.match import CandidateProfile, JobPosting, RankRequest  # noqa: E402


class MatchModelsTests(unittest.TestCase):
    def test_camel_case_payloads_are_accepted(self):
        profile = CandidateProfile.model_validate(
            {
                "skills": ["SQL"],
                "experience": [{"title": "Analyst"}],
                "workStyle": "remote",
                "careerGoals": "data analysis",
                "personality": "ignored",
            }
        )
        self.assertEqual(profile.work_style, "remote")
        self.assertEqual(profile.career_goals, "data analysis")
        self.assertEqual(len(profile.experience), 1)

        job = JobPosting.model_validate(
            {
                "recordId": "rec123",
                "title": "Data Analyst",
                "companyName": "Acme",
                "experienceLevel": "Senior",
                "employmentType": "Remote",
            }
        )
        self.assertEqual(job.id, "rec123")
        self.assertEqual(job.experience_level, "Senior")
        self.assertEqual(job.employment_type, "Remote")

    def test_malformed_values_degrade_to_empty(self):
        profile = CandidateProfile.model_validate(
            {"skills": "SQL", "experience": {"years": 4}, "workStyle": 3, "careerGoals": "  "}
        )
        self.assertEqual(profile.skills, [])
        self.assertEqual(profile.experience, [])
        self.assertEqual(profile.work_style, "3")
        self.assertIsNone(profile.career_goals)

        job = JobPosting.model_validate({"id": 42, "title": None, "skills": [" React ", None, ""]})
        self.assertEqual(job.id, "42")
        self.assertEqual(job.title, "")
        self.assertEqual(job.skills, ["React"])

    def test_job_title_is_required(self):
        with self.assertRaises(ValidationError):
            JobPosting.model_validate({"skills": ["SQL"]})

    def test_null_or_blank_title_is_kept_empty(self):
        for raw in (None, "", "   "):
            with self.subTest(title=raw):
                self.assertEqual(JobPosting.model_validate({"title": raw}).title, "")

    def test_rank_request_bounds(self):
        with self.assertRaises(ValidationError):
            RankRequest.model_validate({"jobs": [], "minScore": 101})
        with self.assertRaises(ValidationError):
            RankRequest.model_validate({"jobs": [], "limit": 0})


if __name__ == "__main__":
    unittest.main()
