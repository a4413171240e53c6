"""Ingestion paths: Markdown text and structured records."""

from mdqcm.parsing.markdown import parse
from mdqcm.parsing.structured import parse_structured
from mdqcm.parsing.titles import split_score

__all__ = ["parse", "parse_structured", "split_score"]
