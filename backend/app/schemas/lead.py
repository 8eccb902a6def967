"""Lead schemas for contact submissions and admin listings."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LeadRead(BaseModel):
    """A stored lead as written to the leads file (camelCase keys)."""

    id: int
    name: str
    email: str
    phone: str = ""
    request_type: str = Field(alias="requestType")
    service: str
    preferred_slot: str = Field(alias="preferredSlot")
    goal: str
    created_at: str = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class ContactResponse(BaseModel):
    success: bool = True
    message: str
    lead: LeadRead
    whatsapp_url: str = Field(alias="whatsappUrl")

    model_config = ConfigDict(populate_by_name=True)


class AdminLeadsResponse(BaseModel):
    success: bool = True
    # Raw records: the file may have been edited by hand.
    leads: list[Any]
