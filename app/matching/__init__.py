from .ranking import RankedJob, rank_jobs
from .scorer import score_compatibility
from .skills import SkillMatcher, SubstringSkillMatcher
from .strength import MatchStrength, match_strength, should_display
from .weights import ExperienceBand, ScoringWeights, load_scoring_weights

__all__ = [
    "score_compatibility",
    "rank_jobs",
    "RankedJob",
    "SkillMatcher",
    "SubstringSkillMatcher",
    "MatchStrength",
    "match_strength",
    "should_display",
    "ExperienceBand",
    "ScoringWeights",
    "load_scoring_weights",
]
