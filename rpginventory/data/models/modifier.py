"""Aggregated modifier value object."""

from pydantic import BaseModel, Field


class Modifier(BaseModel):
    """Combined effect of all eligible items on one attribute."""
    min_bonus: float = Field(default=0.0, description="Low additive delta")
    max_bonus: float = Field(default=0.0, description="High additive delta")
    min_multiplier: float = Field(default=1.0, description="Low multiplicative factor")
    max_multiplier: float = Field(default=1.0, description="High multiplicative factor")

    model_config = {"frozen": True}

    @classmethod
    def identity(cls) -> "Modifier":
        return cls()

    @property
    def is_identity(self) -> bool:
        return self == Modifier()

    def apply(self, base: float) -> tuple[float, float]:
        """Return the (low, high) value of ``base`` with this modifier applied."""
        return (
            (base + self.min_bonus) * self.min_multiplier,
            (base + self.max_bonus) * self.max_multiplier,
        )
