# schemas/types.py
"""Shared field types for request/response schemas."""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from core.timeutils import to_utc

# Incoming timestamps are normalised to aware UTC before they reach the store
UTCDateTime = Annotated[datetime, AfterValidator(to_utc)]
