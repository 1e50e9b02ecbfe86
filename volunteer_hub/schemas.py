from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VolunteerCreate(BaseModel):
    # Required fields are checked by the display client only.
    name: Any = None
    email: Any = None
    phone: Any = None
    task: Any = None
    notes: Any = None
    gate_code: Any = Field(default=None, alias="gateCode")

    model_config = ConfigDict(populate_by_name=True)


class GateCodeBody(BaseModel):
    gate_code: Any = Field(default=None, alias="gateCode")

    model_config = ConfigDict(populate_by_name=True)


class PasswordBody(BaseModel):
    password: Any = None


class EventUpdate(BaseModel):
    password: Any = None
    # Stored verbatim; the organizer owns its shape.
    event: Any = None
