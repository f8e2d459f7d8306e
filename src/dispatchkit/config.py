"""Configuration management for dispatchkit.

This module provides a pydantic-based configuration system that loads the
command-line defaults from environment variables (or a ``.env`` file).
"""

import sys
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dispatchkit.visitors.phase import VisitPhase


class Config(BaseSettings):
    """Configuration settings for dispatchkit.

    Environment Variables:
        DISPATCHKIT_DEFAULT_PHASES: JSON list of visit phases traced by default
            (e.g. '["pre", "post"]')
        DISPATCHKIT_INDENT: Indentation used when rendering JSON (compact if unset)
        DISPATCHKIT_RECURSION_LIMIT: Python recursion limit applied before walking
            deep trees (interpreter default if unset)

    Example:
        >>> config = Config()
        >>> config.default_phases
        [<VisitPhase.PRE: 'pre'>, <VisitPhase.IN: 'in'>, <VisitPhase.POST: 'post'>]
    """

    model_config = SettingsConfigDict(
        env_prefix="DISPATCHKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_phases: List[VisitPhase] = Field(
        default_factory=lambda: [VisitPhase.PRE, VisitPhase.IN, VisitPhase.POST],
        description="Visit phases traced when none are given on the command line",
    )

    indent: Optional[int] = Field(
        default=None,
        ge=0,
        description="Indentation of rendered JSON, None for compact output",
    )

    recursion_limit: Optional[int] = Field(
        default=None,
        gt=0,
        description="Recursion limit to apply before walking (None keeps the interpreter's)",
    )

    @field_validator("default_phases")
    @classmethod
    def _phases_not_empty(cls, value: List[VisitPhase]) -> List[VisitPhase]:
        if not value:
            raise ValueError("default_phases must contain at least one phase")
        return value

    def apply_recursion_limit(self) -> None:
        """Raise the interpreter recursion limit to ``recursion_limit`` if configured.

        The limit is never lowered.
        """
        if self.recursion_limit and self.recursion_limit > sys.getrecursionlimit():
            sys.setrecursionlimit(self.recursion_limit)

    def validate_config(self) -> dict[str, bool]:
        """Report which settings differ from their defaults.

        Returns:
            Dictionary with a status flag per setting
        """
        return {
            "phases_configured": set(self.default_phases) != set(VisitPhase),
            "indent_configured": self.indent is not None,
            "recursion_limit_configured": self.recursion_limit is not None,
        }

    def __repr__(self) -> str:
        phases = ",".join(phase.value for phase in self.default_phases)
        return (
            f"Config("
            f"default_phases={phases!r}, "
            f"indent={self.indent!r}, "
            f"recursion_limit={self.recursion_limit!r}"
            f")"
        )


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        A Config instance with settings loaded from environment.
    """
    return Config()
