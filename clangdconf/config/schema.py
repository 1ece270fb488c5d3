"""Configuration schema definitions using Pydantic for validation.

The pkg-config query is fixed: the tool, the packages, the compiler name
written into the clangd block and the failure message are all constants.
They live on a model so that the values are validated in one place and
can be swapped out in tests.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class FlagQueryConfig(BaseModel):
    """Fixed pkg-config query and clangd output settings.

    Attributes:
        tool: Executable used to query installed-library metadata.
        query_flag: Option asking the tool for compiler flags.
        packages: Native libraries whose flags are requested.
        compiler: Compiler identifier written under ``Compiler:``.
        failure_message: Line printed to stdout when the query fails.
    """

    tool: str = Field(default="pkg-config", min_length=1)
    query_flag: str = Field(default="--cflags", min_length=1)
    packages: List[str] = Field(
        default_factory=lambda: ["chafa", "ncursesw"], min_length=1
    )
    compiler: str = Field(default="clang", min_length=1)
    failure_message: str = "Pkg fail"

    model_config = {"frozen": True}

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: List[str]) -> List[str]:
        """Reject blank package names."""
        for name in v:
            if not name or not name.strip():
                raise ValueError("package names must be non-empty")
        return v

    @classmethod
    def default(cls) -> "FlagQueryConfig":
        return cls()

    def command(self) -> List[str]:
        """Return the argv list for the query subprocess."""
        return [self.tool, self.query_flag, *self.packages]
