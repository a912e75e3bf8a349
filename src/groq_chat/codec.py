# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from groq_chat.request import CreateChatCompletion
from groq_chat.schemas import ChatCompletion
from groq_chat.utils.logger import logger

"""
JSON encoding of request bodies and decoding of wire payloads.
Validation errors are logged and re-raised unchanged.
"""

Payload = Union[str, bytes, Dict[str, Any]]

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode(model_cls: Type[ModelT], payload: Payload) -> ModelT:
    try:
        if isinstance(payload, (str, bytes)):
            return model_cls.model_validate_json(payload)
        return model_cls.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Failed to decode {model_cls.__name__}: {e.error_count()} validation error(s)")
        raise


def encode_request(request: CreateChatCompletion) -> str:
    """
    Serializes a request to its JSON body, omitting unset optional fields.

    Args:
        request (CreateChatCompletion): The request to encode.

    Returns:
        str: The JSON request body.
    """
    return request.model_dump_json(exclude_none=True)


def decode_request(payload: Payload) -> CreateChatCompletion:
    """
    Parses a request body. Out-of-range `temperature` / `top_p` values are clamped.

    Raises:
        ValidationError: If the payload does not match the request schema.
    """
    return _decode(CreateChatCompletion, payload)


def decode_response(payload: Payload) -> ChatCompletion:
    """
    Parses a chat completion response body.

    Args:
        payload (Payload): Raw JSON (str or bytes) or an already-parsed dict.

    Returns:
        ChatCompletion: The read-only response.

    Raises:
        ValidationError: If the payload does not match the response schema.
    """
    return _decode(ChatCompletion, payload)
