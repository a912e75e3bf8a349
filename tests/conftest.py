# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

from typing import Any

import pytest


@pytest.fixture
def completion_payload() -> dict[str, Any]:
    return {
        "id": "chatcmpl-f51b2cd2-bef7-417e-964e-a08f0b513c22",
        "object": "chat.completion",
        "created": 1730241104,
        "model": "llama3-8b-8192",
        "system_fingerprint": "fp_179b0f92c9",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": "Fast language models matter because they reduce latency.",
                },
                "logprobs": None,
                "finish_reason": "stop",
            }
        ],
        "usage": {
            "queue_time": 0.037493756,
            "prompt_tokens": 18,
            "prompt_time": 0.000680594,
            "completion_tokens": 556,
            "completion_time": 0.463333333,
            "total_tokens": 574,
            "total_time": 0.464013927,
        },
        "x_groq": {"id": "req_01jbd6g2qdfw2adyrt2az8hz4w"},
    }


@pytest.fixture
def tool_call_payload(completion_payload: dict[str, Any]) -> dict[str, Any]:
    payload = dict(completion_payload)
    payload["service_tier"] = "on_demand"
    payload["choices"] = [
        {
            "index": 0,
            "message": {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {
                        "id": "call_d5wg",
                        "type": "function",
                        "function": {"name": "get_weather", "arguments": '{"location": "New York, NY"}'},
                    }
                ],
            },
            "logprobs": {
                "content": [
                    {"token": "get", "logprob": -0.01, "bytes": [103, 101, 116], "top_logprobs": []},
                    {"token": "_weather", "logprob": -9999.0},
                ]
            },
            "finish_reason": "tool_calls",
        }
    ]
    return payload
