# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

import sys
from contextlib import suppress
from pathlib import Path

from loguru import logger

from groq_chat.config import get_settings

__all__ = ["logger"]

settings = get_settings()

log_path = Path(settings.LOG_DIR)
if not log_path.exists():
    log_path.mkdir(parents=True, exist_ok=True)

# Drop only loguru's default stderr handler (id 0); sinks added by the host application stay.
# It is already gone if the host removed it or this module was reloaded.
with suppress(ValueError):
    logger.remove(0)

handler_ids: list[int] = [
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    ),
    logger.add(
        log_path / "app.log",
        level=settings.LOG_LEVEL,
        rotation="500 MB",
        retention="10 days",
        serialize=True,
        enqueue=True,
    ),
]
