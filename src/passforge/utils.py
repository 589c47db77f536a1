from datetime import datetime
import os
from pathlib import Path
from typing import Sequence

from loguru import logger

from passforge.config import config


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_timestamp(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def format_password_file(password: str, now: datetime | None = None) -> str:
    return f"Generated password ({local_timestamp(now)}):\n{password}\n"


def format_passwords_file(passwords: Sequence[str], now: datetime | None = None) -> str:
    lines = [f"Generated passwords ({local_timestamp(now)}):", "=" * 40]
    lines.extend(f"{i}. {password}" for i, password in enumerate(passwords, start=1))
    return "\n".join(lines) + "\n"


def _write_private(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    os.chmod(path, 0o600)
    return path


def save_password_to_file(password: str, path: Path | None = None) -> Path:
    path = path or config.single_output_path
    _write_private(path, format_password_file(password))
    logger.info(f"Saved password to {path}")
    return path


def save_passwords_to_file(passwords: Sequence[str], path: Path | None = None) -> Path:
    path = path or config.multiple_output_path
    _write_private(path, format_passwords_file(passwords))
    logger.info(f"Saved {len(passwords)} passwords to {path}")
    return path
