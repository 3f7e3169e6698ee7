from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .corpus import Corpus


STEPS = (
    "clean",
    "trim",
    "to_lower",
    "to_upper",
    "stem",
    "remove_words",
    "remove_interpunctuation",
    "remove_newlines",
    "remove_digits",
    "remove_invalid_characters",
)


@dataclass(frozen=True)
class CleaningProfile:
    name: str = "basic"

    # applied in order
    steps: tuple[str, ...] = ("remove_invalid_characters", "remove_newlines", "clean")

    # parameters for the steps that take any
    stop_words: tuple[str, ...] = ()
    case_insensitive: bool = False
    stem_algorithm: str | None = None

    # document-level filtering
    drop_empty: bool = True
    min_token_count: int = 0
    max_digit_ratio: float = 1.0


def _steps_from_cfg(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return CleaningProfile.steps
    if isinstance(raw, str):
        raw = [raw]
    steps = tuple(str(s).strip() for s in raw)
    for s in steps:
        if s not in STEPS:
            raise ValueError(f"Unknown cleaning step: {s}")
    return steps


def profile_from_cfg(cfg: dict | None) -> CleaningProfile:
    # allow empty cfg
    cfg = cfg or {}
    stem_algorithm = cfg.get("stem_algorithm")
    return CleaningProfile(
        name=str(cfg.get("name", "basic")),
        steps=_steps_from_cfg(cfg.get("steps")),
        stop_words=tuple(str(w) for w in (cfg.get("stop_words") or [])),
        case_insensitive=bool(cfg.get("case_insensitive", False)),
        stem_algorithm=None if stem_algorithm is None else str(stem_algorithm),
        drop_empty=bool(cfg.get("drop_empty", True)),
        min_token_count=int(cfg.get("min_token_count", 0)),
        max_digit_ratio=float(cfg.get("max_digit_ratio", 1.0)),
    )


def load_profile(path: Path) -> CleaningProfile:
    cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    return profile_from_cfg(cfg)


# ---- Document filtering heuristics ----

def _tokenize_quick(text: str) -> list[str]:
    return [tok for tok in re.split(r"\s+", text.strip()) if tok]


def _digit_ratio(text: str) -> float:
    if not text:
        return 0.0
    dig = sum(ch.isdigit() for ch in text)
    return dig / max(1, len(text))


def is_noise_document(text: str, prof: CleaningProfile) -> bool:
    """True when a cleaned document carries too little signal to keep."""
    if not text.strip():
        return prof.drop_empty
    if len(_tokenize_quick(text)) < prof.min_token_count:
        return True
    if _digit_ratio(text) > prof.max_digit_ratio:
        return True
    return False


def apply_profile(corpus: Corpus, prof: CleaningProfile) -> Corpus:
    """Run the profile's steps on ``corpus`` in place, then return the kept documents.

    The returned corpus is new; ``corpus`` itself holds every document,
    transformed.
    """
    for step in prof.steps:
        if step == "remove_words":
            corpus.remove_words(list(prof.stop_words), prof.case_insensitive)
        elif step == "stem":
            corpus.stem(prof.stem_algorithm)
        elif step in STEPS:
            getattr(corpus, step)()
        else:
            raise ValueError(f"Unknown cleaning step: {step}")

    return corpus.filter(lambda text, attributes, i: not is_noise_document(text, prof))
