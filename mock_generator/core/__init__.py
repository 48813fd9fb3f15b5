"""Core logic: fetching OpenAPI documents and calling the completion API."""

from .spec_fetcher import SpecFetcher, parse_spec_document
from .completion_client import CompletionClient, first_choice_content

__all__ = ["SpecFetcher", "parse_spec_document", "CompletionClient", "first_choice_content"]
