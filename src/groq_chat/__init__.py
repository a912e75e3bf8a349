# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

"""
Typed request/response models and a fluent request builder for the Groq Chat Completion API.
"""

from groq_chat.codec import decode_request, decode_response, encode_request
from groq_chat.models import Model
from groq_chat.request import CreateChatCompletion, ResponseFormat, StreamOptions, Tool, ToolFunction
from groq_chat.schemas import (
    ChatCompletion,
    ChoiceMessage,
    CompletionChoice,
    CompletionUsage,
    FinishReason,
    FunctionCall,
    LogProb,
    LogProbContent,
    Message,
    ResponseKind,
    Role,
    ToolCall,
    TopLogProb,
)

__version__ = "0.1.0"

__all__ = [
    "ChatCompletion",
    "ChoiceMessage",
    "CompletionChoice",
    "CompletionUsage",
    "CreateChatCompletion",
    "FinishReason",
    "FunctionCall",
    "LogProb",
    "LogProbContent",
    "Message",
    "Model",
    "ResponseFormat",
    "ResponseKind",
    "Role",
    "StreamOptions",
    "Tool",
    "ToolCall",
    "ToolFunction",
    "TopLogProb",
    "decode_request",
    "decode_response",
    "encode_request",
]
