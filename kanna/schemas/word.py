from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WordRecord(BaseModel):
    """A word with its cached translation payload.

    ``id`` is only set once the record has been persisted.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    word: str = Field(min_length=1)
    translations: str
    english_explanation: str = ""
    created_on: Optional[datetime] = None
    appearance_count: int = 1
    last_appeared_on: Optional[datetime] = None
