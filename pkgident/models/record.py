from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from pkgident.models.extractor import Extractor
from pkgident.models.extractor import get_extractor
from pkgident.models.metadata import Metadata
from pkgident.models.metadata import METADATA_KINDS
from pkgident.models.metadata import UnknownMetadata


class SourceCodeIdentifier(BaseModel):
    """Where the package's source lives, when an extractor knows it."""
    repo: str = ''
    commit: str = ''

    model_config = ConfigDict(frozen=True)


class RawRecord(BaseModel):
    """A single package observation, exactly as an extractor reported it."""
    name: str
    version: str = ''
    ecosystem: str
    locations: list[str] = Field(default_factory=list)
    source_code: SourceCodeIdentifier | None = None
    metadata: Metadata = Field(default_factory=UnknownMetadata)
    extractor: Extractor | None = None

    model_config = ConfigDict(frozen=True, extra='ignore')

    @field_validator('extractor', mode='before')
    @classmethod
    def resolve_extractor(cls, v: Any) -> Any:
        if isinstance(v, str):
            return get_extractor(v) if v else None
        if isinstance(v, dict) and 'name' in v:
            return get_extractor(v['name'])
        return v

    @field_validator('metadata', mode='before')
    @classmethod
    def default_metadata(cls, v: Any) -> Any:
        if v is None:
            return UnknownMetadata()
        if not isinstance(v, dict):
            return v
        # Null fields count as absent so the defaults apply
        fields = {key: value for key, value in v.items() if value is not None}
        if fields.get('kind') not in METADATA_KINDS:
            return UnknownMetadata()
        return fields
