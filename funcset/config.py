"""
Library-wide configuration.

The active SetConfig is a frozen pydantic model. It is never edited in
place: `configure` validates a new model and swaps it in.
"""
import logging
import random
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Selection(str, Enum):
    """
    Policy used by HashSet.any to pick an element
    """
    RANDOM = "random"
    FIRST = "first"


class SetConfig(BaseModel):
    """
    Tunables for HashSet behavior that has no single right answer
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    selection: Selection = Field(
        default=Selection.RANDOM,
        description="How any() picks an element",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for random selection, None for OS entropy",
    )
    display_limit: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of elements shown by repr, None for all",
    )


_config = SetConfig()
_rng = random.Random(_config.seed)


def get_config() -> SetConfig:
    """Returns the active configuration."""
    return _config


def get_rng() -> random.Random:
    """Returns the random generator seeded from the active configuration."""
    return _rng


def configure(**changes) -> SetConfig:
    """
    Validates the given field changes on top of the active configuration
    and installs the result. Raises pydantic.ValidationError (a ValueError)
    on unknown fields or invalid values, leaving the active one in place.
    """
    global _config, _rng  # pylint: disable=global-statement
    new_config = SetConfig.model_validate(_config.model_dump() | changes)
    _config = new_config
    _rng = random.Random(new_config.seed)
    logger.info("funcset configuration changed: %s", new_config.model_dump(mode="json"))
    return new_config


def reset_config() -> SetConfig:
    """Restores the default configuration."""
    global _config, _rng  # pylint: disable=global-statement
    _config = SetConfig()
    _rng = random.Random(_config.seed)
    logger.info("funcset configuration reset to defaults")
    return _config
