"""Input rejection observability.

Call this before raising LifeGridInputError.
"""

from loguru import logger

from lifegrid.engine.errors import LifeGridInputError


def log_input_rejection(err: LifeGridInputError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log an input boundary rejection with context.

    Args:
        err: The LifeGridInputError about to be raised
        context: Additional context dictionary for logging
    """
    logger.warning(
        "LIFEGRID_INPUT_REJECTED",
        code=err.code,
        details=err.details,
        **context,
    )
