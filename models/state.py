"""
Scenario run state — one result per executed scenario, collected by the
behave hooks and written out as the run summary.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ScenarioResult(BaseModel):
    """Outcome of a single scenario."""

    name: str = Field(description="Scenario name from the feature file")
    feature: str = Field(default="", description="Feature the scenario belongs to")
    status: str = Field(description="PASSED, FAILED, SKIPPED, ...")
    duration: float = Field(default=0.0, description="Seconds spent in the scenario")
    error: Optional[str] = Field(default=None, description="First failing step's error, if any")
    finished_at: datetime = Field(default_factory=datetime.now)

    @property
    def passed(self) -> bool:
        return self.status == "PASSED"
