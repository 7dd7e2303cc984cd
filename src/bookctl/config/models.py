"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bookctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the store root.
    path: str = ".bookctl/bookctl.db"
    echo: bool = False


class RestockConfig(BaseModel):
    """[restock] section. Random amounts are drawn from [min_amount, max_amount)."""

    model_config = {"frozen": True}

    min_amount: int = 1
    max_amount: int = 10

    @model_validator(mode="after")
    def _check_range(self) -> RestockConfig:
        if self.min_amount < 1:
            msg = f"restock.min_amount must be >= 1, got {self.min_amount}"
            raise ValueError(msg)
        if self.max_amount <= self.min_amount:
            msg = (
                f"restock.max_amount ({self.max_amount}) must exceed "
                f"restock.min_amount ({self.min_amount})"
            )
            raise ValueError(msg)
        return self
