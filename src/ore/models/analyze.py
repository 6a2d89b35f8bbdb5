"""Pydantic models for asset analysis results."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AssetInfo(BaseModel):
    """A single regular file discovered under an analyzed directory."""

    model_config = ConfigDict(frozen=True)

    path: str
    """Path of the file, relative or absolute depending on the queried root."""

    file_name: str
    """Final path component (``unknown`` if it is not valid UTF-8)."""

    extension: str | None = None
    """Extension without the leading dot (e.g., 'js')."""

    size: int = Field(ge=0)
    """File size in bytes."""

    file_type: str
    """Category label (e.g., 'JavaScript', 'Image', 'Other')."""


class AnalysisResult(BaseModel):
    """Inventory of every regular file below a directory."""

    model_config = ConfigDict(frozen=True)

    assets: list[AssetInfo]
    """Assets in traversal order (not sorted)."""

    total_files: int
    """Number of assets."""

    total_size: int
    """Sum of all asset sizes in bytes."""

    directory: str
    """Root directory that was analyzed."""

    @model_validator(mode="after")
    def check_totals(self) -> "AnalysisResult":
        if self.total_files != len(self.assets):
            raise ValueError("total_files must equal the number of assets")
        if self.total_size != sum(asset.size for asset in self.assets):
            raise ValueError("total_size must equal the sum of asset sizes")
        return self

    @classmethod
    def from_assets(cls, directory: str, assets: list[AssetInfo]) -> "AnalysisResult":
        """Build a result whose totals are derived from the asset list."""
        return cls(
            assets=assets,
            total_files=len(assets),
            total_size=sum(asset.size for asset in assets),
            directory=directory,
        )

    @property
    def type_summary(self) -> dict[str, tuple[int, int]]:
        """Map each file type label to (file count, total bytes), ordered by label."""
        summary: dict[str, tuple[int, int]] = {}
        for asset in self.assets:
            count, size = summary.get(asset.file_type, (0, 0))
            summary[asset.file_type] = (count + 1, size + asset.size)
        return dict(sorted(summary.items()))

    def filter_by_type(self, file_type: str) -> list[AssetInfo]:
        """Get assets with the given file type label."""
        return [a for a in self.assets if a.file_type == file_type]
