# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from groq_chat.models import DEFAULT_MODEL, Model


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.

    Attributes:
        ENV (str): The deployment environment (development, testing, production).
        LOG_LEVEL (str): The logging level (default: INFO).
        LOG_DIR (str): Directory for the rotating JSON log file (default: logs).
        DEFAULT_MODEL (Model): Model used by `CreateChatCompletion.from_settings`.
        DEFAULT_MAX_TOKENS (int): Max token cap used by `CreateChatCompletion.from_settings`.
    """

    # Core
    ENV: Literal["development", "testing", "production"] = "production"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Request defaults
    DEFAULT_MODEL: Model = DEFAULT_MODEL
    DEFAULT_MAX_TOKENS: int = Field(1000, ge=1)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore")


def get_settings() -> Settings:
    return Settings()
