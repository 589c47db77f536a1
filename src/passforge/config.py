from datetime import timedelta
import logging
from pathlib import Path
import sys

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PASSFORGE_")

    log_level: str = "WARNING"
    log_file_path: Path | None = None
    output_dir: Path = Path(".")
    single_output_filename: str = "password.txt"
    multiple_output_filename: str = "passwords.txt"
    variants: int = 3

    @property
    def single_output_path(self) -> Path:
        return self.output_dir / self.single_output_filename

    @property
    def multiple_output_path(self) -> Path:
        return self.output_dir / self.multiple_output_filename


config = Config()


class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller to get correct stack depth
        frame, depth = logging.currentframe(), 2
        while frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str | None = None) -> None:
    """Route stdlib logging into loguru and (re)install the sinks."""
    level = (level or config.log_level).upper()

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        backtrace=True,
        diagnose=False,
    )

    if config.log_file_path is not None:
        config.log_file_path.parent.mkdir(exist_ok=True, parents=True)
        logger.add(
            config.log_file_path.resolve(),
            rotation="10 MB",
            retention=timedelta(days=7),
            backtrace=True,
            diagnose=False,
            level=level,
        )


setup_logging()
