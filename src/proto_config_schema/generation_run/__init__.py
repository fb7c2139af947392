"""Generation run domain exports."""

from .run_contracts import GenerationOutcome
from .schema_generation_use_case import GenerationRunError, execute_schema_generation

__all__ = [
    "GenerationOutcome",
    "GenerationRunError",
    "execute_schema_generation",
]
