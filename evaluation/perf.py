"""Lightweight profiling harness for the mask pipelines.

``profile_pipeline``
    Time the mask, substitution and mutation stages over a list of lines
    using the same in-process wiring as the CLI (no I/O).

``synth_lines``
    Build a reproducible corpus of candidate lines from :mod:`evaluation.fuzz`.

Neither function prints or logs; results are returned to the caller so tests or
tools can aggregate them as needed.
"""

from __future__ import annotations

from time import perf_counter
from typing import Dict, List

from evaluation.fuzz import FuzzOptions, variants
from masktools import pipeline
from masktools.config import ConfigModel, load_config
from masktools.mask.canonicalizer import build_replacement_table

__all__ = ["profile_pipeline", "synth_lines"]


def synth_lines(count: int, *, seed: int = 0) -> List[str]:
    """Return ``count`` deterministic candidate lines."""

    return list(variants(base_seed=seed, opts=FuzzOptions(max_variants=count)))


def profile_pipeline(
    lines: List[str], cfg: ConfigModel | None = None, *, chunk_size: int = 4
) -> Dict[str, float]:
    """Return per-stage timings (seconds) plus output counts for ``lines``.

    Keys ending in ``_lines`` hold the number of lines each stage produced;
    ``total`` is the wall clock duration of all stages.
    """

    cfg = cfg or load_config()
    table = build_replacement_table(cfg.masking.class_spec)
    multibyte = cfg.masking.multibyte
    n = cfg.substitution.max_replacements
    timings: Dict[str, float] = {}
    total_start = perf_counter()

    t0 = perf_counter()
    masks = list(pipeline.generate_masks(lines, table, multibyte=multibyte, verbose=True))
    timings["mask"] = perf_counter() - t0
    timings["mask_lines"] = float(len(masks))

    tokens = lines[: max(1, len(lines) // 10)]
    t0 = perf_counter()
    subbed = list(
        pipeline.substitute_tokens(lines, tokens, table, max_replacements=n, multibyte=multibyte)
    )
    timings["sub"] = perf_counter() - t0
    timings["sub_lines"] = float(len(subbed))

    t0 = perf_counter()
    mutated = list(
        pipeline.mutate_lines(lines, chunk_size, table, max_replacements=n, multibyte=multibyte)
    )
    timings["mutate"] = perf_counter() - t0
    timings["mutate_lines"] = float(len(mutated))

    timings["total"] = perf_counter() - total_start
    return timings
