# bag_of_holding/web/schemas.py
"""Response bodies for the HTTP API."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, conint


class StatusResult(BaseModel):
    status: str = Field(..., description="Service status.")
    application: str = Field(..., description="Application name.")
    version: str = Field(..., description="Application version.")


class RollResult(BaseModel):
    die: str = Field(..., description="Die that was rolled, e.g. d20.")
    faces: conint(ge=2) = Field(..., description="Number of faces on the die.")
    roll: int = Field(..., description="The resulting face value (1..faces).")


class AbilityScoreResult(BaseModel):
    base: int = Field(..., description="Rolled base score.")
    racial_increase: int = Field(0, description="Increase granted by race.")
    score: int = Field(..., description="Base plus racial increase.")
    modifier: int = Field(..., description="Ability modifier derived from the score.")


class DeityResult(BaseModel):
    name: str
    alignment: str
    domains: List[str]
    pantheon: str
    symbols: List[str] = Field(default_factory=list)
    titles: List[str] = Field(default_factory=list)


class HeightAndWeightResult(BaseModel):
    height: int = Field(..., description="Height in inches.")
    weight: int = Field(..., description="Weight in pounds.")


class CharacterSheet(BaseModel):
    ability_scores: Dict[str, AbilityScoreResult]
    age: int
    alignment: str
    deity: Optional[DeityResult] = None
    height: int = Field(..., description="Height in inches.")
    weight: int = Field(..., description="Weight in pounds.")
    languages: List[str]
    name: str
    race: str
    size: str
