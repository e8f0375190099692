"""Resolution result models."""

from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict


class FileUrl(BaseModel):
    """URL-shaped success value handed back to stylesheet compilers.

    Attributes:
        href: Full ``file://`` URL
        pathname: Absolute path component of the URL
    """

    model_config = ConfigDict(frozen=True)

    href: str
    pathname: str

    @classmethod
    def from_path(cls, path: Path) -> "FileUrl":
        """Build a file URL from an absolute path."""
        return cls(href=path.as_uri(), pathname=path.as_posix())

    def __str__(self) -> str:
        return self.href


class ResolvedFile(BaseModel):
    """A specifier successfully resolved to a file on disk.

    Attributes:
        path: Absolute path of the resolved file
    """

    model_config = ConfigDict(frozen=True)

    path: Path

    @property
    def pathname(self) -> str:
        return self.path.as_posix()

    def to_url(self) -> FileUrl:
        return FileUrl.from_path(self.path)
