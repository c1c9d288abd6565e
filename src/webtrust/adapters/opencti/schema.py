"""Pydantic models describing the OpenCTI GraphQL payloads."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OpenCTIBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IdentityPayload(OpenCTIBaseModel):
    id: str
    standard_id: str
    name: str | None = None


class LabelPayload(OpenCTIBaseModel):
    id: str
    standard_id: str
    value: str | None = None


class ObservablePayload(OpenCTIBaseModel):
    id: str
    standard_id: str
    entity_type: str
    observable_value: str
    created_by: IdentityPayload | None = Field(default=None, alias="createdBy")
    object_label: list[LabelPayload] = Field(default_factory=list, alias="objectLabel")

    @field_validator("object_label", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class IndicatorPayload(OpenCTIBaseModel):
    id: str
    standard_id: str
    pattern: str
    revoked: bool = False
    score: int | None = Field(default=None, alias="x_opencti_score")
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    created_by: IdentityPayload | None = Field(default=None, alias="createdBy")

    @field_validator("revoked", mode="before")
    @classmethod
    def _null_to_false(cls, value: object) -> object:
        return False if value is None else value


class RelationshipPayload(OpenCTIBaseModel):
    id: str
    standard_id: str


class GraphQLError(OpenCTIBaseModel):
    message: str
    path: list[str | int] | None = None
    extensions: dict[str, object] = Field(default_factory=dict)

    @property
    def code(self) -> str | None:
        code = self.extensions.get("code")
        return code if isinstance(code, str) else None


class GraphQLResponse(OpenCTIBaseModel):
    data: dict[str, object] | None = None
    errors: list[GraphQLError] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class ObservableQueryData(OpenCTIBaseModel):
    stix_cyber_observable: ObservablePayload | None = Field(alias="stixCyberObservable")


class IndicatorQueryData(OpenCTIBaseModel):
    indicator: IndicatorPayload | None


class ObservableAddData(OpenCTIBaseModel):
    stix_cyber_observable_add: ObservablePayload = Field(alias="stixCyberObservableAdd")


class ObservableEdit(OpenCTIBaseModel):
    field_patch: ObservablePayload = Field(alias="fieldPatch")


class ObservablePatchData(OpenCTIBaseModel):
    stix_cyber_observable_edit: ObservableEdit = Field(alias="stixCyberObservableEdit")


class IndicatorAddData(OpenCTIBaseModel):
    indicator_add: IndicatorPayload = Field(alias="indicatorAdd")


class IndicatorPatchData(OpenCTIBaseModel):
    indicator_field_patch: IndicatorPayload = Field(alias="indicatorFieldPatch")


class RelationshipAddData(OpenCTIBaseModel):
    stix_core_relationship_add: RelationshipPayload = Field(alias="stixCoreRelationshipAdd")
