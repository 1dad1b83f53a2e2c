from __future__ import annotations
from pydantic import BaseModel

class Word(BaseModel):
    word: str
    definition: str
    translation: str
    phonetic: str

class ErrorEnvelope(BaseModel):
    # debug description of the store failure
    err: str
