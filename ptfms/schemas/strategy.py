from pydantic import BaseModel


class StrategySelect(BaseModel):
    strategy: str


class StrategyResponse(BaseModel):
    current: str
    current_name: str
    available: dict[str, str]
