from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from app.core.config.scoring import get_scoring_value


@dataclass(frozen=True)
class ExperienceBand:
    label: str
    min_years: int | None = None
    max_years: int | None = None

    def holds(self, years: int) -> bool:
        if self.min_years is not None and years < self.min_years:
            return False
        if self.max_years is not None and years > self.max_years:
            return False
        return True


DEFAULT_EXPERIENCE_BANDS: tuple[ExperienceBand, ...] = (
    ExperienceBand("entry", max_years=2),
    ExperienceBand("junior", max_years=3),
    ExperienceBand("mid", min_years=2, max_years=5),
    ExperienceBand("senior", min_years=5),
)


@dataclass(frozen=True)
class ScoringWeights:
    skills: float = 40
    experience: float = 30
    work_style: float = 20
    goals: float = 10
    skills_fallback: float = 25
    experience_fallback: float = 15
    work_style_fallback: float = 10
    neutral_score: int = 50
    max_score: int = 100
    experience_bands: tuple[ExperienceBand, ...] = DEFAULT_EXPERIENCE_BANDS
    work_style_signals: tuple[str, ...] = ("remote", "office")
    strong_threshold: int = 80
    good_threshold: int = 60
    list_badge_threshold: int = 60
    detail_card_threshold: int = 50

    @classmethod
    def from_config(cls) -> "ScoringWeights":
        defaults = cls()
        return cls(
            skills=_number("matching.weights.skills", defaults.skills),
            experience=_number("matching.weights.experience", defaults.experience),
            work_style=_number("matching.weights.work_style", defaults.work_style),
            goals=_number("matching.weights.goals", defaults.goals),
            skills_fallback=_number("matching.fallback_credits.skills", defaults.skills_fallback),
            experience_fallback=_number(
                "matching.fallback_credits.experience", defaults.experience_fallback
            ),
            work_style_fallback=_number(
                "matching.fallback_credits.work_style", defaults.work_style_fallback
            ),
            neutral_score=int(_number("matching.neutral_score", defaults.neutral_score)),
            max_score=int(_number("matching.max_score", defaults.max_score)),
            experience_bands=_experience_bands(defaults.experience_bands),
            work_style_signals=_work_style_signals(defaults.work_style_signals),
            strong_threshold=_threshold("matching.strength_thresholds.strong", defaults.strong_threshold),
            good_threshold=_threshold("matching.strength_thresholds.good", defaults.good_threshold),
            list_badge_threshold=_threshold(
                "matching.display_thresholds.list_badge", defaults.list_badge_threshold
            ),
            detail_card_threshold=_threshold(
                "matching.display_thresholds.detail_card", defaults.detail_card_threshold
            ),
        )


@lru_cache(maxsize=1)
def load_scoring_weights() -> ScoringWeights:
    """Weights from config/scoring.yaml, read once per process."""
    return ScoringWeights.from_config()


def _number(path: str, default: float) -> float:
    raw = get_scoring_value(path, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise RuntimeError(f"Scoring config value '{path}' must be a number, got {raw!r}.")
    if raw < 0:
        raise RuntimeError(f"Scoring config value '{path}' must not be negative.")
    return raw


def _threshold(path: str, default: int) -> int:
    value = int(_number(path, default))
    if value > 100:
        raise RuntimeError(f"Scoring config value '{path}' must be between 0 and 100.")
    return value


def _optional_int(entry: dict[str, Any], key: str) -> int | None:
    raw = entry.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise RuntimeError(f"Experience band '{key}' must be an integer, got {raw!r}.")
    return raw


def _experience_bands(default: tuple[ExperienceBand, ...]) -> tuple[ExperienceBand, ...]:
    raw = get_scoring_value("matching.experience_bands", None)
    if raw is None:
        return default
    if not isinstance(raw, list):
        raise RuntimeError("Scoring config 'matching.experience_bands' must be a list.")

    bands: list[ExperienceBand] = []
    for entry in raw:
        if not isinstance(entry, dict) or not str(entry.get("label", "")).strip():
            raise RuntimeError(f"Invalid experience band entry: {entry!r}")
        bands.append(
            ExperienceBand(
                label=str(entry["label"]).strip().lower(),
                min_years=_optional_int(entry, "min_years"),
                max_years=_optional_int(entry, "max_years"),
            )
        )
    return tuple(bands)


def _work_style_signals(default: tuple[str, ...]) -> tuple[str, ...]:
    raw = get_scoring_value("matching.work_style_signals", None)
    if raw is None:
        return default
    if not isinstance(raw, list):
        raise RuntimeError("Scoring config 'matching.work_style_signals' must be a list.")
    signals = tuple(str(item).strip().lower() for item in raw if str(item).strip())
    return signals or default
