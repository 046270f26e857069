from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from loanquote.core.config import validate_loan_amount


class QuoteRequest(BaseModel):
    amount: int = Field(..., description="Loan amount requested, a multiple of 100 within 1000-15000")

    @field_validator("amount")
    @classmethod
    def _check_amount(cls, value: int) -> int:
        return validate_loan_amount(value)
