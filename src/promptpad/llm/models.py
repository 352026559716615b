from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COMPLETIONS_MODEL = "text-davinci-003"


class CompletionParams(BaseModel):
    """Fixed generation parameters sent with every completion request."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(default=DEFAULT_COMPLETIONS_MODEL, description="Completion model identifier")
    temperature: float = Field(default=0.9, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=512, ge=1, description="Maximum tokens to generate")
    top_p: float = Field(default=1, ge=0.0, le=1.0, description="Nucleus sampling mass")
    frequency_penalty: float = Field(default=0.5, description="Penalty for repeated tokens")
    presence_penalty: float = Field(default=0.25, description="Penalty for tokens already present")

    def request_body(self, prompt: str) -> dict[str, Any]:
        """Build the JSON body for a completion request.

        Field order matches the wire format: model, prompt, then sampling
        parameters.
        """
        params = self.model_dump()
        return {
            "model": params.pop("model"),
            "prompt": prompt,
            **params,
        }


class Choice(BaseModel):
    """One generated continuation."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Generated text")
    index: int = Field(description="Position of the choice in the response")
    finish_reason: str | None = Field(default=None, description="Why generation stopped")


class Usage(BaseModel):
    """Token accounting for a completion."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class CompletionSuccess(BaseModel):
    """Successful completions payload."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice] = Field(min_length=1, description="Generated choices, first one is used")
    usage: Usage | None = None

    @property
    def text(self) -> str:
        """Text of the first choice."""
        return self.choices[0].text


class ApiErrorObject(BaseModel):
    """Body of an API error payload."""

    model_config = ConfigDict(frozen=True)

    message: str
    type: str
    param: str | None = None
    code: str | int | None = None


class CompletionApiError(BaseModel):
    """Error payload returned by the API when it rejects a request."""

    model_config = ConfigDict(frozen=True)

    error: ApiErrorObject

    @property
    def summary(self) -> str:
        """One-line message shown to the user."""
        return f"ERROR: {self.error.type}"


CompletionResult = CompletionSuccess | CompletionApiError
