"""Pydantic request models for JSON driven matching.

The models only check the shape and types of a payload. Range checks stay
with :func:`porondam.compute_match` so every rejected value is reported with
its chart and field.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .catalog import mansion_by_name, sign_by_name
from .chart import ChartAttributes

__all__ = ["ChartPayload", "MatchRequest"]


class ChartPayload(BaseModel):
    """One chart as it appears in a request document.

    Field aliases follow the camel-case keys produced by chart entry forms
    (``nakshatra``, ``rashi``, ``moonLongitude``...). ``chartId`` refers to a
    stored chart; it is accepted so saved requests validate, but scoring never
    consults it.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="forbid")

    gender: str
    chart_id: Optional[StrictInt] = Field(default=None, alias="chartId")
    person_name: Optional[str] = Field(default=None, alias="personName")
    mansion_id: Optional[StrictInt] = Field(default=None, alias="nakshatra")
    mansion_name: Optional[str] = Field(default=None, alias="nakshatraName")
    sign_id: Optional[StrictInt] = Field(default=None, alias="rashi")
    sign_name: Optional[str] = Field(default=None, alias="rashiName")
    longitude: Optional[float] = Field(default=None, alias="moonLongitude")
    pada: Optional[StrictInt] = Field(default=None, alias="nakshatraPada")

    def to_attributes(self) -> ChartAttributes:
        """Convert into engine attributes, resolving catalog names to ids."""

        mansion_id = self.mansion_id
        if mansion_id is None and self.mansion_name:
            mansion_id = mansion_by_name(self.mansion_name).id
        sign_id = self.sign_id
        if sign_id is None and self.sign_name:
            sign_id = sign_by_name(self.sign_name).id
        return ChartAttributes(
            gender=self.gender,
            mansion_id=mansion_id,
            sign_id=sign_id,
            longitude=self.longitude,
            pada=self.pada,
        )


class MatchRequest(BaseModel):
    """A pair of charts to score, optionally labelled with a date.

    ``saveResult`` is a hint for whatever stores reports. The engine keeps
    nothing, so it is accepted and ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    chart_a: ChartPayload = Field(alias="chart1")
    chart_b: ChartPayload = Field(alias="chart2")
    scored_on: Optional[date] = Field(default=None, alias="date")
    save_result: bool = Field(default=False, alias="saveResult")

    def to_attributes(self) -> tuple[ChartAttributes, ChartAttributes]:
        return self.chart_a.to_attributes(), self.chart_b.to_attributes()
