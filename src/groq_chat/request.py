# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

import math
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)

from groq_chat.config import Settings, get_settings
from groq_chat.models import DEFAULT_MODEL, Model
from groq_chat.schemas import Message, ResponseKind
from groq_chat.utils.logger import logger

DEFAULT_MAX_TOKENS = 1000

TEMPERATURE_RANGE = (0.0, 2.0)
TOP_P_RANGE = (0.0, 1.0)


def clamp(name: str, value: float, low: float, high: float) -> float:
    """
    Clamps a sampling parameter into [low, high].
    Out-of-range values are corrected silently (logged at DEBUG), never rejected.
    NaN is treated as out of range and clamped to `low`.

    Args:
        name (str): The parameter name, used for logging.
        value (float): The requested value.
        low (float): Lower bound (inclusive).
        high (float): Upper bound (inclusive).

    Returns:
        float: `value` if it is within bounds, otherwise the nearest bound.
    """
    if math.isnan(value) or value < low:
        clamped = low
    elif value > high:
        clamped = high
    else:
        return value

    logger.debug(f"{name}={value} is outside [{low}, {high}], clamped to {clamped}")
    return clamped


class ResponseFormat(BaseModel):
    """
    Setting `type` to `json_object` enables JSON mode.
    The prompt must still instruct the model to produce JSON.
    """

    model_config = ConfigDict(frozen=True)

    type: ResponseKind = ResponseKind.TEXT


class StreamOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    include_usage: Optional[bool] = Field(
        None, description="If set, a final chunk with usage statistics is streamed before `data: [DONE]`."
    )


class ToolFunction(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = Field(None, description="JSON Schema of the function arguments.")


class Tool(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = "function"
    function: ToolFunction


class CreateChatCompletion(BaseModel):
    """
    Pydantic model mirroring the Chat Completion request body.

    Starts from a default configuration (default model, `max_tokens=1000`, everything else unset)
    and is refined with the chainable `with_*` methods, each of which returns a new instance.
    `temperature` and `top_p` are clamped into their valid ranges rather than rejected.
    """

    model_config = ConfigDict(frozen=True)

    model: Model = Field(DEFAULT_MODEL, description="ID of the model to use.")
    messages: List[Message] = Field(
        default_factory=list, description="A list of messages comprising the conversation so far."
    )
    frequency_penalty: Optional[float] = Field(None, description="Number between -2.0 and 2.0.")
    logit_bias: Optional[Dict[str, int]] = Field(
        None, description="Modify the likelihood of specified tokens appearing in the completion."
    )
    logprobs: Optional[bool] = Field(None, description="Whether to return log probabilities of the output tokens.")
    top_logprobs: Optional[int] = Field(
        None, description="Number of most likely tokens (0-20) to return at each token position."
    )
    max_tokens: Optional[int] = Field(
        DEFAULT_MAX_TOKENS, description="The maximum number of tokens to generate in the chat completion."
    )
    n: Optional[int] = Field(None, description="How many chat completion choices to generate for each input message.")
    presence_penalty: Optional[float] = Field(None, description="Number between -2.0 and 2.0.")
    response_format: Optional[ResponseFormat] = Field(
        None, description="An object specifying the format that the model must output."
    )
    seed: Optional[int] = Field(None, description="Seed for best-effort deterministic sampling.")
    service_tier: Optional[str] = Field(None, description="The latency tier to use for processing the request.")
    stop: Optional[Union[str, List[str]]] = Field(
        None, description="Up to 4 sequences where the API will stop generating further tokens."
    )
    stream: Optional[bool] = Field(None, description="If set, partial message deltas will be sent.")
    stream_options: Optional[StreamOptions] = Field(
        None, description="Options for streaming response. Only set this when `stream` is true."
    )
    temperature: Optional[float] = Field(None, description="What sampling temperature to use, between 0 and 2.")
    top_p: Optional[float] = Field(
        None, description="An alternative to sampling with temperature, called nucleus sampling, between 0 and 1."
    )
    parallel_tool_calls: Optional[bool] = Field(
        None, description="Whether to enable parallel function calling during tool use."
    )
    user: Optional[str] = Field(None, description="A unique identifier representing your end-user.")
    tools: Optional[List[Tool]] = Field(None, description="A list of tools the model may call.")
    tool_choice: Optional[Union[str, Dict[str, Any]]] = Field(
        None, description="Controls which (if any) tool is called by the model."
    )

    @field_validator("temperature")
    @classmethod
    def clamp_temperature(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return clamp("temperature", value, *TEMPERATURE_RANGE)

    @field_validator("top_p")
    @classmethod
    def clamp_top_p(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return clamp("top_p", value, *TOP_P_RANGE)

    @classmethod
    def new(cls, model: Model, messages: Sequence[Message]) -> "CreateChatCompletion":
        return cls(model=model, messages=list(messages))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CreateChatCompletion":
        """
        Builds the default configuration using the model and max token cap from settings.

        Args:
            settings (Optional[Settings]): Settings to read from. Loaded from the environment if None.

        Returns:
            CreateChatCompletion: A request with no messages and all other optional fields unset.
        """
        settings = settings or get_settings()
        return cls(model=settings.DEFAULT_MODEL, max_tokens=settings.DEFAULT_MAX_TOKENS)

    @model_serializer(mode="wrap")
    def keep_cleared_max_tokens(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = handler(self)
        # A cleared cap is sent as null, otherwise decoding would restore the default
        if info.exclude_none and self.max_tokens is None:
            data["max_tokens"] = None
        return data

    def _replace(self, **update: Any) -> "CreateChatCompletion":
        """
        Returns a validated copy with `update` applied; the receiver is left unchanged.
        """
        return self.model_validate({**dict(self), **update})

    def with_model(self, model: Union[Model, str]) -> "CreateChatCompletion":
        return self._replace(model=model)

    def with_messages(self, messages: Sequence[Message]) -> "CreateChatCompletion":
        return self._replace(messages=list(messages))

    def with_message(self, message: Message) -> "CreateChatCompletion":
        return self._replace(messages=[*self.messages, message])

    def with_frequency_penalty(self, frequency_penalty: float) -> "CreateChatCompletion":
        return self._replace(frequency_penalty=frequency_penalty)

    def with_logit_bias(self, logit_bias: Dict[str, int]) -> "CreateChatCompletion":
        return self._replace(logit_bias=dict(logit_bias))

    def with_logprobs(self, logprobs: bool) -> "CreateChatCompletion":
        return self._replace(logprobs=logprobs)

    def with_top_logprobs(self, top_logprobs: int) -> "CreateChatCompletion":
        return self._replace(top_logprobs=top_logprobs)

    def with_max_tokens(self, max_tokens: int) -> "CreateChatCompletion":
        return self._replace(max_tokens=max_tokens)

    def with_n(self, n: int) -> "CreateChatCompletion":
        return self._replace(n=n)

    def with_presence_penalty(self, presence_penalty: float) -> "CreateChatCompletion":
        return self._replace(presence_penalty=presence_penalty)

    def with_response_format(self, response_format: ResponseFormat) -> "CreateChatCompletion":
        return self._replace(response_format=response_format)

    def with_seed(self, seed: int) -> "CreateChatCompletion":
        return self._replace(seed=seed)

    def with_service_tier(self, service_tier: str) -> "CreateChatCompletion":
        return self._replace(service_tier=service_tier)

    def with_stop(self, stop: Union[str, List[str]]) -> "CreateChatCompletion":
        return self._replace(stop=stop if isinstance(stop, str) else list(stop))

    def with_stream(self, stream: bool) -> "CreateChatCompletion":
        return self._replace(stream=stream)

    def with_stream_options(self, stream_options: StreamOptions) -> "CreateChatCompletion":
        return self._replace(stream_options=stream_options)

    def with_temperature(self, temperature: float) -> "CreateChatCompletion":
        """
        Sets the sampling temperature, clamped to [0, 2].
        """
        return self._replace(temperature=temperature)

    def with_top_p(self, top_p: float) -> "CreateChatCompletion":
        """
        Sets nucleus sampling mass, clamped to [0, 1].
        """
        return self._replace(top_p=top_p)

    def with_parallel_tool_calls(self, parallel_tool_calls: bool) -> "CreateChatCompletion":
        return self._replace(parallel_tool_calls=parallel_tool_calls)

    def with_user(self, user: str) -> "CreateChatCompletion":
        return self._replace(user=user)

    def with_tools(self, tools: Sequence[Tool]) -> "CreateChatCompletion":
        return self._replace(tools=list(tools))

    def with_tool_choice(self, tool_choice: Union[str, Dict[str, Any]]) -> "CreateChatCompletion":
        return self._replace(tool_choice=tool_choice)

    def to_payload(self) -> Dict[str, Any]:
        """
        Returns the JSON-ready request body with unset optional fields omitted.
        A cleared `max_tokens` is kept as null so it does not fall back to the default.
        """
        return self.model_dump(mode="json", exclude_none=True)
