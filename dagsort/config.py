"""Configuration Management with Pydantic.

This module implements configuration models using Pydantic for parsing and
validation of YAML configuration files with environment variable overrides.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from dagsort.algorithms.base import Algorithm
from dagsort.log_config import get_logger

logger = get_logger(__name__)

# Constants
DEFAULT_WARMUP_ITERATIONS = 3
DEFAULT_TIMED_ITERATIONS = 10
MIN_STABLE_TIMED_ITERATIONS = 5
DEFAULT_CONFIG_NAMES = ("dagsort.yaml", "dagsort.yml")


class BenchmarkConfig(BaseModel):
    """Benchmark harness settings.

    Attributes:
        warmup_iterations: Untimed runs executed before measuring
        timed_iterations: Measured runs the timing statistics are computed over
    """

    warmup_iterations: int = Field(
        default=DEFAULT_WARMUP_ITERATIONS,
        ge=0,
        description="Untimed warmup runs",
    )
    timed_iterations: int = Field(
        default=DEFAULT_TIMED_ITERATIONS,
        ge=1,
        description="Timed runs",
    )


class AppConfig(BaseModel):
    """Main configuration combining all settings.

    Attributes:
        benchmark: Benchmark harness configuration
        algorithms: Algorithms to run, in order
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render logs as JSON instead of console text
    """

    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    algorithms: list[Algorithm] = Field(
        default_factory=lambda: list(Algorithm),
        min_length=1,
        description="Algorithms to benchmark",
    )
    logging_level: str = Field(
        default="WARNING",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON logs",
    )

    @field_validator("algorithms")
    @classmethod
    def validate_unique_algorithms(cls, v: list[Algorithm]) -> list[Algorithm]:
        """Reject an algorithm listed twice.

        Raises:
            ValueError: If the list contains duplicates
        """
        if len(set(v)) != len(v):
            msg = "Each algorithm may only be listed once"
            raise ValueError(msg)
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated AppConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config_data = cls._apply_env_overrides(config_data)
        config = cls(**config_data)

        logger.info(
            "configuration_loaded",
            warmup_iterations=config.benchmark.warmup_iterations,
            timed_iterations=config.benchmark.timed_iterations,
            logging_level=config.logging_level,
        )

        return config

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: DAGSORT_<SECTION>_<KEY>
        Example: DAGSORT_BENCHMARK_WARMUP, DAGSORT_LOGGING_LEVEL

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("benchmark", "warmup_iterations"): "DAGSORT_BENCHMARK_WARMUP",
            ("benchmark", "timed_iterations"): "DAGSORT_BENCHMARK_RUNS",
            ("logging_level",): "DAGSORT_LOGGING_LEVEL",
            ("json_logs",): "DAGSORT_JSON_LOGS",
        }

        for path, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is not None:
                current = config_data
                for key in path[:-1]:
                    if key not in current:
                        current[key] = {}
                    current = current[key]

                final_key = path[-1]
                if env_var.endswith(("_WARMUP", "_RUNS")):
                    value = int(value)
                elif env_var.endswith("_LOGS"):
                    value = value.lower() in ("true", "1", "yes")

                current[final_key] = value
                logger.debug(
                    "env_override_applied",
                    env_var=env_var,
                    config_path=".".join(path),
                )

        return config_data

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of warnings.

        Returns:
            List of validation warning messages (empty if no warnings)
        """
        warnings = []

        if self.benchmark.warmup_iterations == 0:
            warnings.append("Warmup is disabled - first timed runs may include cold-start cost")

        if self.benchmark.timed_iterations < MIN_STABLE_TIMED_ITERATIONS:
            warnings.append(
                f"Only {self.benchmark.timed_iterations} timed iterations - "
                "timing statistics may be noisy",
            )

        return warnings


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load configuration from file.

    Args:
        config_path: Path to configuration file. If None, looks for
            dagsort.yaml or dagsort.yml in the current directory and
            falls back to the defaults when neither exists.

    Returns:
        Loaded AppConfig instance

    Raises:
        FileNotFoundError: If an explicit config file is not found
        ValueError: If the config file is invalid
    """
    if config_path is None:
        for default_name in DEFAULT_CONFIG_NAMES:
            default_path = Path(default_name)
            if default_path.exists():
                config_path = default_path
                break
        else:
            logger.debug("no_configuration_file_using_defaults")
            return AppConfig(**AppConfig._apply_env_overrides({}))

    return AppConfig.from_yaml(config_path)


__all__ = [
    "AppConfig",
    "BenchmarkConfig",
    "load_config",
]
