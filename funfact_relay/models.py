from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FactRequest(BaseModel):
    theme: str


class FactResponse(BaseModel):
    theme: str
    fact: str


class ErrorResponse(BaseModel):
    error: str


# --- Gemini generateContent payload ---
class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: List[Part]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature: float
    max_output_tokens: int = Field(alias="maxOutputTokens")
    top_p: int = Field(alias="topP")
    top_k: int = Field(alias="topK")


class GenerateContentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    generation_config: GenerationConfig = Field(alias="generationConfig")
