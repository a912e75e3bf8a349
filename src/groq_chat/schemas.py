# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from groq_chat.models import Model

"""
Pydantic models mirroring the Groq Chat Completion wire format.
Shared message types and the response body live here; the request body is in `groq_chat.request`.
"""


class Role(str, Enum):
    """The role of the author of a message."""

    ASSISTANT = "assistant"
    SYSTEM = "system"
    USER = "user"


class FinishReason(str, Enum):
    """
    The reason the model stopped generating tokens.

    Attributes:
        STOP: The model hit a natural stop point or a provided stop sequence.
        LENGTH: The maximum number of tokens specified in the request was reached.
        CONTENT_FILTER: Content was omitted due to a flag from the content filters.
        TOOL_CALLS: The model called a tool.
    """

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"


class ResponseKind(str, Enum):
    TEXT = "text"
    JSON_OBJECT = "json_object"


class FunctionCall(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the function to call.")
    arguments: str = Field(..., description="The arguments to call the function with, as a JSON string.")


class ToolCall(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="The ID of the tool call.")
    type: str = Field("function", description="The type of the tool. Currently only `function`.")
    function: Optional[FunctionCall] = Field(None, description="The function that the model called.")


class Message(BaseModel):
    """
    An input message sent as part of a chat completion request.
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="The message content.")
    role: Role = Field(..., description="The role of the author of this message.")
    name: Optional[str] = Field(None, description="An optional name for the participant.")
    tool_calls: Optional[List[ToolCall]] = Field(None, description="Tool calls made by an assistant message.")

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(content=content, role=Role.SYSTEM)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(content=content, role=Role.USER)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(content=content, role=Role.ASSISTANT)


class ChoiceMessage(BaseModel):
    """
    A chat completion message generated by the model.
    """

    model_config = ConfigDict(frozen=True)

    content: Optional[str] = Field(None, description="The content of the message.")
    refusal: Optional[str] = Field(None, description="The refusal message generated by the model.")
    tool_calls: Optional[List[ToolCall]] = Field(
        None, description="The tool calls generated by the model, such as function calls."
    )
    role: Role = Field(..., description="The role of the author of this message.")


class TopLogProb(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    logprob: float
    bytes: Optional[List[int]] = None


class LogProbContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    # -9999.0 when the token is outside the top 20 most likely tokens
    logprob: float
    bytes: Optional[List[int]] = None
    top_logprobs: List[TopLogProb] = Field(default_factory=list)


class LogProb(BaseModel):
    """
    Log probability information for a choice.
    """

    model_config = ConfigDict(frozen=True)

    content: Optional[List[LogProbContent]] = Field(
        None, description="A list of message content tokens with log probability information."
    )
    refusal: Optional[List[LogProbContent]] = Field(
        None, description="A list of message refusal tokens with log probability information."
    )


class CompletionUsage(BaseModel):
    """
    Usage statistics for the completion request.
    """

    model_config = ConfigDict(frozen=True)

    completion_tokens: int = Field(..., description="Number of tokens in the generated completion.")
    prompt_tokens: int = Field(..., description="Number of tokens in the prompt.")
    total_tokens: int = Field(..., description="Total number of tokens used in the request (prompt + completion).")


class CompletionChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    finish_reason: FinishReason = Field(..., description="The reason the model stopped generating tokens.")
    index: int = Field(..., description="The index of the choice in the list of choices.")
    message: ChoiceMessage = Field(..., description="A chat completion message generated by the model.")
    logprobs: Optional[LogProb] = Field(None, description="Log probability information for the choice.")


class ChatCompletion(BaseModel):
    """
    Pydantic model mirroring the Chat Completion response body.
    Read-only once deserialized.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="A unique identifier for the chat completion.")
    choices: List[CompletionChoice] = Field(
        ..., description="A list of chat completion choices. Can be more than one if n is greater than 1."
    )
    created: int = Field(..., description="The Unix timestamp (in seconds) of when the chat completion was created.")
    model: Model = Field(..., description="The model used for the chat completion.")
    service_tier: Optional[str] = Field(
        None,
        description="The service tier used for processing the request. Only present if requested.",
    )
    system_fingerprint: Optional[str] = Field(
        None, description="The backend configuration that the model runs with."
    )
    object: str = Field("chat.completion", description="The object type, which is always `chat.completion`.")
    usage: CompletionUsage = Field(..., description="Usage statistics for the completion request.")

    @property
    def content(self) -> Optional[str]:
        """
        The message content of the first choice, if any.
        """
        if not self.choices:
            return None
        return self.choices[0].message.content
