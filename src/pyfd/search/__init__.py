"""Pattern compilation and per-entry matching."""

from .matchers import candidate_text, compile_pattern, match_entry

__all__ = [
    "candidate_text",
    "compile_pattern",
    "match_entry",
]
