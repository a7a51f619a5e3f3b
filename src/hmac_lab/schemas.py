from __future__ import annotations

from pydantic import BaseModel, Field


class MacResult(BaseModel):
    input: str
    tag: str
    verified: bool

    def to_line(self) -> str:
        verified = "true" if self.verified else "false"
        return f"INPUT: {self.input}, HMAC-SHA256: {self.tag}, Verified: {verified}"

class BatchSummary(BaseModel):
    count: int = Field(..., ge=0)
    elapsed_ms: float = Field(..., ge=0)
    all_verified: bool
