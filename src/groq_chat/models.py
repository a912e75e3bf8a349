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


class Model(str, Enum):
    """
    Model identifiers served by the Groq chat completion endpoint.
    The enum value is the id sent on the wire.
    """

    LLAMA3_8B = "llama3-8b-8192"
    LLAMA3_70B = "llama3-70b-8192"
    LLAMA31_8B_INSTANT = "llama-3.1-8b-instant"
    LLAMA31_70B_VERSATILE = "llama-3.1-70b-versatile"
    LLAMA33_70B_VERSATILE = "llama-3.3-70b-versatile"
    MIXTRAL_8X7B = "mixtral-8x7b-32768"
    GEMMA_7B = "gemma-7b-it"
    GEMMA2_9B = "gemma2-9b-it"

    def __str__(self) -> str:
        return self.value


DEFAULT_MODEL = Model.LLAMA3_8B
