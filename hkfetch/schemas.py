from pydantic import BaseModel, ConfigDict, Field
from typing import List

class ResultEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(alias="tanggal", description="Draw date as shown on the source page")
    result: str = Field(alias="hasil", description="Drawn number as shown on the source page")

class FetchBundle(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    last_updated: str = Field(alias="lastUpdated", description="ISO 8601 UTC timestamp of the run")
    hk_pools: List[ResultEntry] = Field(default_factory=list, alias="hkPools")
    hk_lotto: List[ResultEntry] = Field(default_factory=list, alias="hkLotto")
