"""Configuration classes for kcomb components."""

from dataclasses import dataclass


@dataclass
class ChooseConfig:
    """Configuration for size bounds and input checks of the enumerator."""

    # Largest sequence length accepted; sizes are 8-bit unsigned values
    max_size: int = 255

    # Reject element sequences that are not strictly increasing
    check_ordering: bool = True

    # Default numpy dtype for array-backed results
    array_dtype: str = "uint8"

    def validate_size(self, n: int) -> None:
        """Raise ValueError when ``n`` exceeds ``max_size``."""
        if n > self.max_size:
            raise ValueError(
                f"size {n} exceeds the configured maximum of {self.max_size}"
            )


# Global configuration instance
CHOOSE_CONFIG = ChooseConfig()
