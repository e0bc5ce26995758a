"""Registration submission models"""

from pathlib import PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PhotoAttachment(BaseModel):
    """Binary photo uploaded alongside a registration"""

    filename: str
    content: bytes = Field(repr=False)
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        """File extension without the dot, lowercased ("" when the name has none)"""
        return PurePath(self.filename).suffix.lstrip(".").lower()


class RegistrationSubmission(BaseModel):
    """A single retreat registration.

    Attribute names are pythonic; aliases are the field names used on the
    wire (form field names posted by the browser and the submission client).
    """

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias="fullName")
    gender: str
    age: int
    phone: str
    email: str
    location: str
    church: Optional[str] = None
    affiliation: str
    photo: Optional[PhotoAttachment] = None
    how_heard: Optional[str] = Field(default=None, alias="howHeard")
    wants_drama_ministry: Optional[str] = Field(default=None, alias="dramaMINISTRY")
    is_worship_minister: Optional[str] = Field(default=None, alias="worshipMinister")
    expectations: Optional[str] = None
    help_needed: Optional[str] = Field(default=None, alias="helpNeeded")
    prayer_requests: Optional[str] = Field(default=None, alias="prayerRequests")
    confirmation: bool = False

    def to_form_fields(self) -> dict[str, str]:
        """Serialize into wire-name -> string pairs, omitting empty optionals"""
        data = self.model_dump(by_alias=True, exclude={"photo"})
        fields = {}
        for name, value in data.items():
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                fields[name] = "true" if value else "false"
            else:
                fields[name] = str(value)
        return fields
