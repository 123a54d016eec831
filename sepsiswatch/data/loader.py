"""Import and validation of patient payloads for the SepsisWatch dashboard.

Payloads are JSON documents of the form::

    {
      "patients": [
        {
          "info":   {"id": "P001", "name": "...", "age": 55, "gender": "Male"},
          "vitals": {"hr": 75, "rr": 16, "sbp": 120, "temp": 37.0, "ams": false},
          "labs":   {"wbc": 8.5, "lactate": 1.1, "crp": 5},
          "hrHistory": [78, 76, 75, 77, 75]
        }
      ]
    }

Only ``info.id``, ``vitals.rr``, ``vitals.sbp`` and ``vitals.ams`` are
required; every other field may be omitted and is rendered as "unknown" by
the dashboard. Each record is validated against a pydantic schema and turned
into an immutable :class:`~sepsiswatch.data.records.PatientRecord`.
"""

import json
import logging
import numbers
from dataclasses import dataclass, field
from typing import Annotated, Any, List, Optional, Sequence, Tuple, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from sepsiswatch.data.records import (
    DEFAULT_PATIENT_NAME,
    HR_HISTORY_LABELS,
    Labs,
    PatientInfo,
    PatientRecord,
    Vitals,
)
from sepsiswatch.exceptions import PatientImportError

logger = logging.getLogger(__name__)

MALFORMED_PAYLOAD = "malformed payload"
INVALID_PATIENTS_LIST = "missing or invalid patients list"


def _json_number(value: Any) -> Any:
    """Reject anything that is not a JSON number (strings and bools included)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError("must be a number")
    return value


Number = Annotated[float, BeforeValidator(_json_number), Field(allow_inf_nan=False)]
PositiveNumber = Annotated[
    float, BeforeValidator(_json_number), Field(gt=0, allow_inf_nan=False)
]
NonNegativeNumber = Annotated[
    float, BeforeValidator(_json_number), Field(ge=0, allow_inf_nan=False)
]


class InfoSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictStr
    name: Optional[StrictStr] = None
    age: Optional[Annotated[StrictInt, Field(ge=0)]] = None
    gender: Optional[StrictStr] = None

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("patient id must not be empty")
        return value


class VitalsSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hr: Optional[PositiveNumber] = None
    rr: PositiveNumber
    sbp: PositiveNumber
    temp: Optional[Number] = None
    ams: StrictBool


class LabsSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    wbc: Optional[NonNegativeNumber] = None
    lactate: Optional[NonNegativeNumber] = None
    crp: Optional[NonNegativeNumber] = None


class PatientSchema(BaseModel):
    """Structural schema for one entry of the ``patients`` list."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    info: InfoSchema
    vitals: VitalsSchema
    labs: LabsSchema = Field(default_factory=LabsSchema)
    hr_history: List[PositiveNumber] = Field(default_factory=list, alias="hrHistory")


@dataclass
class ImportIssue:
    """A record that was rejected during a lenient import."""
    index: int
    reason: str


@dataclass
class ImportResult:
    """Outcome of parsing a payload."""
    patients: List[PatientRecord] = field(default_factory=list)
    skipped: List[ImportIssue] = field(default_factory=list)


def normalize_hr_history(
    values: Sequence[float],
    length: int = len(HR_HISTORY_LABELS),
) -> Tuple[float, ...]:
    """Normalize a heart-rate trend to a fixed number of samples.

    Longer trends keep their most recent ``length`` samples. Shorter,
    non-empty trends are left-padded with their earliest sample so the
    newest reading stays aligned with the "Now" label. An empty trend stays
    empty.

    Args:
        values: Heart-rate samples, oldest first.
        length: Target number of samples.

    Returns:
        Tuple of exactly ``length`` samples, or an empty tuple.

    Example:
        >>> normalize_hr_history([90, 95])
        (90, 90, 90, 90, 95)
    """
    values = tuple(values)
    if not values:
        return ()
    if len(values) > length:
        return values[-length:]
    return (values[0],) * (length - len(values)) + values


def _format_validation_error(index: int, error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "record"
    return f"invalid patient record at index {index}: {location}: {first['msg']}"


def _to_record(schema: PatientSchema, index: int, history_length: int) -> PatientRecord:
    history = normalize_hr_history(schema.hr_history, history_length)
    if history and len(schema.hr_history) != history_length:
        logger.info(
            f"Normalized hrHistory of patient {schema.info.id} (index {index}) "
            f"from {len(schema.hr_history)} to {history_length} samples"
        )

    return PatientRecord(
        info=PatientInfo(
            id=schema.info.id,
            name=schema.info.name if schema.info.name is not None else DEFAULT_PATIENT_NAME,
            age=schema.info.age,
            gender=schema.info.gender,
        ),
        vitals=Vitals(
            hr=schema.vitals.hr,
            rr=schema.vitals.rr,
            sbp=schema.vitals.sbp,
            temp=schema.vitals.temp,
            ams=schema.vitals.ams,
        ),
        labs=Labs(
            wbc=schema.labs.wbc,
            lactate=schema.labs.lactate,
            crp=schema.labs.crp,
        ),
        hr_history=history,
    )


def parse_payload(
    raw_text: Union[str, bytes],
    skip_invalid: bool = False,
    history_length: int = len(HR_HISTORY_LABELS),
) -> ImportResult:
    """Parse and validate a patient payload.

    Args:
        raw_text: JSON text (or UTF-8 bytes) of the payload.
        skip_invalid: If False (default), the first invalid record aborts
            the whole import. If True, invalid records are skipped and
            reported in ``ImportResult.skipped``.
        history_length: Number of samples each heart-rate trend is
            normalized to.

    Returns:
        ImportResult with the valid records in payload order.

    Raises:
        PatientImportError: If the payload is not valid JSON, has no
            ``patients`` list, or (when ``skip_invalid`` is False) contains
            an invalid record.
    """
    try:
        payload = json.loads(raw_text)
    except (TypeError, ValueError, RecursionError) as e:
        raise PatientImportError(MALFORMED_PAYLOAD) from e

    if not isinstance(payload, dict) or not isinstance(payload.get("patients"), list):
        raise PatientImportError(INVALID_PATIENTS_LIST)

    result = ImportResult()
    for index, entry in enumerate(payload["patients"]):
        try:
            schema = PatientSchema.model_validate(entry)
        except ValidationError as e:
            reason = _format_validation_error(index, e)
            if not skip_invalid:
                raise PatientImportError(reason, index=index) from e
            logger.warning(f"Skipping record: {reason}")
            result.skipped.append(ImportIssue(index=index, reason=reason))
            continue
        result.patients.append(_to_record(schema, index, history_length))

    logger.info(
        f"Imported {len(result.patients)} patients "
        f"({len(result.skipped)} skipped)"
    )
    return result


def import_patients(
    raw_text: Union[str, bytes],
    skip_invalid: bool = False,
    history_length: int = len(HR_HISTORY_LABELS),
) -> List[PatientRecord]:
    """Import a patient list from JSON text.

    Args:
        raw_text: JSON text (or UTF-8 bytes) of the payload.
        skip_invalid: Skip invalid records instead of failing the import.
        history_length: Number of samples each heart-rate trend is
            normalized to.

    Returns:
        List of PatientRecord in payload order (possibly empty).

    Raises:
        PatientImportError: See :func:`parse_payload`.

    Example:
        >>> import_patients('{"patients": []}')
        []
    """
    return parse_payload(
        raw_text, skip_invalid=skip_invalid, history_length=history_length
    ).patients
