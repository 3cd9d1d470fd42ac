from typing import List

from pydantic import BaseModel, model_validator


class Asset(BaseModel):
    """An investable asset. Returns are annual figures."""
    name: str
    mean_return: float
    std_dev: float = 0.0


class Portfolio(BaseModel):
    """Assets paired with the share of the balance invested in each."""
    assets: List[Asset]
    weights: List[float]

    @model_validator(mode="after")
    def check_weights(self):
        if len(self.assets) != len(self.weights):
            raise ValueError("portfolio needs exactly one weight per asset")
        return self
