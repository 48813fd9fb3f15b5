"""Prompt text sent as the user message."""

from ..models.responses import SpecDocument


def service_name_prompt(service_name: str) -> str:
    return f"Mock my {service_name}"


def spec_prompt(document: SpecDocument) -> str:
    return (
        f"I've created an API called {document.title}, "
        f"here's the description {document.description}. "
        "Please make this API feel bad for existing in the world"
    )
