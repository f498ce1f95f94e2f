"""
Pydantic models for the requests sent to the Tranco API.

They validate user input at the infrastructure layer, before anything is
put on the wire. Values are checked, never rewritten: the date sent is the
same string that names the cached file.
"""

import datetime
from typing import Dict

from pydantic import BaseModel, Field, field_validator

_DATE_FORMAT = "%Y-%m-%d"


class DailyListIdQuery(BaseModel):
    """Query parameters of the `/daily_list_id` endpoint."""

    date: str = Field(pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    subdomains: bool

    @field_validator("date")
    @classmethod
    def _is_calendar_date(cls, value: str) -> str:
        datetime.datetime.strptime(value, _DATE_FORMAT)
        return value

    def to_params(self) -> Dict[str, str]:
        """Renders the query with the literal booleans the API expects."""
        return {
            "date": self.date,
            "subdomains": "true" if self.subdomains else "false",
        }
