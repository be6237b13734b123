"""Answers-file loading for WizardFlow.

An answers file holds pre-filled form values as YAML or JSON, keyed by either
the camelCase wire names (``fullName``) or the attribute names
(``full_name``). Only the *shape* of the file is checked here: unknown keys,
wrong types and unknown themes are rejected, while the wizard's own rules are
left to the step gates.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from wizardflow.common.exceptions import LoadError
from wizardflow.constants import FILE_EXT_JSON, FILE_EXT_YAML, FILE_EXT_YML
from wizardflow.models import FormData, Theme


class FormDataModel(BaseModel):
    """Pydantic model describing the shape of an answers file."""

    full_name: StrictStr = Field(default="", alias="fullName")
    email: StrictStr = ""
    username: StrictStr = ""
    password: StrictStr = ""
    theme: Theme = Theme.NONE
    newsletter: StrictBool = False

    @field_validator("full_name", "email", "username", "password", mode="before")
    @classmethod
    def empty_text(cls, v):
        """Treat a missing YAML value as an empty string."""
        return "" if v is None else v

    @field_validator("theme", mode="before")
    @classmethod
    def coerce_theme(cls, v):
        return Theme.coerce(v)

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    def to_form_data(self) -> FormData:
        return FormData(
            full_name=self.full_name,
            email=self.email,
            username=self.username,
            password=self.password,
            theme=self.theme,
            newsletter=self.newsletter,
        )


def extract_validation_errors(error: ValidationError) -> list[str]:
    """
    Extract validation error messages from a pydantic ValidationError.

    Args:
        error: Pydantic ValidationError instance

    Returns:
        List of formatted error messages
    """
    error_messages = []
    for error_dict in error.errors():
        field_path = " -> ".join(str(loc) for loc in error_dict["loc"])
        error_messages.append(f"Field '{field_path}': {error_dict['msg']}")
    return error_messages


def build_form_data(data: Any, source: str | None = None) -> FormData:
    """
    Validate a parsed mapping and convert it to FormData.

    Raises:
        LoadError: If the data is not a mapping or has the wrong shape
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise LoadError("Answers data must be a mapping", file_path=source)
    try:
        model = FormDataModel.model_validate(data)
    except ValidationError as e:
        errors = extract_validation_errors(e)
        raise LoadError(
            f"Invalid answers data: {len(errors)} error(s)",
            file_path=source,
            errors=errors,
        ) from e
    return model.to_form_data()


def parse_form_data(text: str, fmt: str = FILE_EXT_YAML, source: str | None = None) -> FormData:
    """
    Parse answers text in the given format.

    Args:
        text: Raw YAML or JSON text
        fmt: ``yaml``, ``yml`` or ``json``
        source: Name used in error messages

    Raises:
        LoadError: If the text cannot be parsed or has the wrong shape
    """
    fmt = fmt.lower()
    try:
        if fmt == FILE_EXT_JSON:
            data = json.loads(text) if text.strip() else {}
        elif fmt in (FILE_EXT_YAML, FILE_EXT_YML):
            data = YAML(typ="safe", pure=True).load(text)
        else:
            raise LoadError(f"Unsupported answers format: {fmt}", file_path=source)
    except json.JSONDecodeError as e:
        raise LoadError(f"Error parsing JSON answers: {e}", file_path=source) from e
    except YAMLError as e:
        raise LoadError(f"Error parsing YAML answers: {e}", file_path=source) from e
    return build_form_data(data, source)


def load_form_data(file_path: str | Path) -> FormData:
    """
    Load FormData from a YAML or JSON answers file.

    Args:
        file_path: Path to the answers file

    Returns:
        FormData holding the file's values

    Raises:
        LoadError: If the file cannot be read, parsed or validated
    """
    path = Path(file_path)
    if not path.exists():
        raise LoadError(f"File not found: {path}", file_path=str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise LoadError(f"Permission denied reading {path}", file_path=str(path)) from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Encoding error reading {path}: {e}", file_path=str(path)) from e

    return parse_form_data(text, path.suffix.lstrip(".") or FILE_EXT_YAML, source=str(path))
