from __future__ import annotations

from typing import Protocol


class SkillMatcher(Protocol):
    def matches(self, job_skill: str, candidate_skill: str) -> bool:
        """Return True when the candidate skill satisfies the job skill."""


class SubstringSkillMatcher:
    """Case-insensitive, bidirectional substring match ("React" ~ "React.js")."""

    def matches(self, job_skill: str, candidate_skill: str) -> bool:
        job_lower = job_skill.strip().lower()
        candidate_lower = candidate_skill.strip().lower()
        if not job_lower or not candidate_lower:
            return False
        return job_lower in candidate_lower or candidate_lower in job_lower


def count_matched_skills(
    job_skills: list[str],
    candidate_skills: list[str],
    matcher: SkillMatcher,
) -> int:
    return sum(
        1
        for job_skill in job_skills
        if any(matcher.matches(job_skill, candidate_skill) for candidate_skill in candidate_skills)
    )
