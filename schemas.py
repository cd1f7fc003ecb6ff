"""Pydantic models for data validation and structure."""

from pydantic import BaseModel, Field
from typing import List, Literal


class Clause(BaseModel):
    """A potentially risky or unfavorable clause found in the document."""
    title: str = Field(description="A short, descriptive title for the clause.")
    source_excerpt: str = Field(description="The exact wording of the clause as it appears in the document.")
    explanation: str = Field(description="What the clause means for the user, in plain English.")
    risk_level: Literal["LOW", "MEDIUM", "HIGH"] = Field(description="The assessed risk level of the clause.")


class StructuredAnalysis(BaseModel):
    """Analysis result for a whole legal document."""
    summary: str = Field(default="", description="A clear, simple summary of the document.")
    risky_clauses: List[Clause] = Field(default_factory=list, description="Risky or unfavorable clauses, most important first.")
    explanations: str = Field(default="", description="Overall plain-English explanation of the risks and what to watch out for.")


def empty_analysis():
    """Default values used for any top-level key the model left out."""
    return StructuredAnalysis().model_dump()
