"""
Pydantic schemas for the Hooked Sentiment API.

Field names follow the public wire format (camelCase where the wire
format uses it).
"""
from typing import List, Optional
from pydantic import BaseModel, Field


# =======================
# REQUESTS
# =======================

class AnalyzeRequest(BaseModel):
    text: str = Field(min_length=1)


class TaskRequestBody(BaseModel):
    recordingId: str = Field(min_length=1)
    hookId: Optional[str] = None


# =======================
# RESPONSES
# =======================

class WordScore(BaseModel):
    word: str
    score: float


class AnalysisResponse(BaseModel):
    score: float
    words: List[WordScore]


class HealthResponse(BaseModel):
    status: str
    totalSuccessfulAnalyses: int
    hookedRequests: int


class ErrorResponse(BaseModel):
    error: str
    message: str
    hookId: Optional[str] = None
    stage: Optional[str] = None
