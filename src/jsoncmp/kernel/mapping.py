"""Pydantic models for the field mapping and documentation formatting."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldMapping(BaseModel):
    """Dot paths locating each piece of completion data inside a schema file.

    ``fields_container`` is resolved against the whole document, ``detail_field``
    too. The other paths are resolved against each entry of the fields array.
    An empty path means "this facet is not available".
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    label_field: str = Field("column", alias="labelField")
    type_field: str = Field("fieldType.type", alias="typeField")
    doc_field: str = Field("fieldType.options", alias="docField")
    fallback_doc_field: str = Field("type", alias="fallbackDocField")
    detail_field: str = Field("type", alias="detailField")
    fields_container: str = Field("fields", alias="fieldsContainer")

    def can_extract(self) -> bool:
        """Whether this mapping can produce any records at all."""
        return bool(self.label_field) and bool(self.fields_container)


def _validate_template(template: str) -> str:
    """Require exactly one ``%s`` slot; ``%%`` is a literal percent sign."""
    stripped = template.replace("%%", "")
    slots = stripped.count("%s")
    if slots != 1:
        raise ValueError(
            f"Format template {template!r} must contain exactly one '%s' slot, found {slots}"
        )
    if "%" in stripped.replace("%s", ""):
        raise ValueError(
            f"Format template {template!r} contains an unsupported '%' directive (use '%%' for a literal percent)"
        )
    return template


class FormatSpec(BaseModel):
    """Templates applied to the type and documentation segments of a descriptor."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    type_format: str = Field("`%s`", alias="typeFormat")
    doc_format: str = Field("*%s*", alias="docFormat")

    @field_validator("type_format", "doc_format")
    @classmethod
    def validate_template(cls, v: str) -> str:
        return _validate_template(v)

    def apply_type(self, text: str) -> str:
        return self.type_format % (text,)

    def apply_doc(self, text: str) -> str:
        return self.doc_format % (text,)
