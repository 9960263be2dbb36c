"""
Centralized logging configuration for recipe fetching.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_fetch_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for recipe fetch reporting.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for recipe fetch events
    """
    return get_logger(name).bind(subsystem="recipes")


def log_recipe_decision(
    logger: FilteringBoundLogger,
    key: str,
    filename: str,
    applied: bool,
    from_version: str,
    to_version: str,
) -> None:
    """
    Log whether a candidate recipe file falls inside its version range.

    Args:
        logger: Structlog logger instance
        key: Recipe directory key ("core" or "group:artifact")
        filename: Recipe file name
        applied: Whether the recipe is included
        from_version: Current version (exclusive lower bound)
        to_version: Target version (inclusive upper bound)
    """
    logger.debug(
        "Recipe included" if applied else "Recipe skipped",
        recipe_key=key,
        recipe_file=filename,
        from_version=from_version,
        to_version=to_version,
    )


def log_recipe_fetch(
    logger: FilteringBoundLogger,
    recipes_coordinate: str,
    recipe_count: int,
    current_version: str,
    target_version: str,
    build_tool: str,
    plugin_version: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a recipe fetch with standardized format.

    Args:
        logger: Structlog logger instance
        recipes_coordinate: Resolved group:artifact:version of the bundle
        recipe_count: Number of recipes selected
        current_version: Current core version
        target_version: Target core version
        build_tool: Build tool the plugin version was resolved for
        plugin_version: Resolved rewrite plugin version
        context: Additional context data
    """
    bound_logger = logger.bind(
        recipes_coordinate=recipes_coordinate,
        recipe_count=recipe_count,
        current_version=current_version,
        target_version=target_version,
        build_tool=build_tool,
        rewrite_plugin_version=plugin_version,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info(
        f"Resolved {recipes_coordinate} with {recipe_count} recipe(s) to update "
        f"from {current_version} to {target_version} (initially made for "
        f"OpenRewrite {build_tool} plugin version: {plugin_version})"
    )
