# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

from openai.types.chat import ChatCompletion as OpenAIChatCompletion

from groq_chat.codec import decode_response
from groq_chat.schemas import ChatCompletion

"""
Conversion between Groq responses and the OpenAI SDK's ChatCompletion type.
The two wire formats are compatible.
"""


def to_openai_completion(completion: ChatCompletion) -> OpenAIChatCompletion:
    """
    Converts a Groq response into the OpenAI SDK type.

    The result is constructed without validation so Groq-only tag values
    (e.g. `service_tier="on_demand"`) are preserved.

    Args:
        completion (ChatCompletion): The Groq response.

    Returns:
        OpenAIChatCompletion: The equivalent OpenAI SDK object.
    """
    return OpenAIChatCompletion.model_construct(**completion.model_dump(mode="json", exclude_none=True))


def from_openai_completion(completion: OpenAIChatCompletion) -> ChatCompletion:
    """
    Converts an OpenAI SDK ChatCompletion into the Groq response type.

    Raises:
        ValidationError: If the completion uses values outside the Groq schema
            (e.g. an unknown model or the deprecated `function_call` finish reason).
    """
    return decode_response(completion.model_dump(mode="json", exclude_none=True))
