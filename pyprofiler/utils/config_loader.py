import math
import tomllib
from dataclasses import dataclass
from pathlib import Path

from pyprofiler.core.exceptions import ConfigurationError


DEFAULT_DISTANCE = 5.0


@dataclass
class ProfilerConfig:
    """
    Settings of the command-line profiler.

    Attributes
    ----------
    sample_file : Path | None
        Csv-file with the recorded performance data.
    distance : float
        Travel distance of the motion profile.
    log_level : str
        Name of the logging level.
    log_file : str | None
        Log file path; None disables logging to file.
    log_console : bool
        Whether to log to the console (stderr).
    """
    sample_file: Path | None = None
    distance: float = DEFAULT_DISTANCE
    log_level: str = "WARNING"
    log_file: str | None = None
    log_console: bool = True


def load_config_toml(file_path: str | Path) -> dict:
    try:
        with Path(file_path).open("rb") as f:
            return tomllib.load(f)
    except OSError as err:
        raise ConfigurationError(f"Cannot read configuration file {file_path}: {err}") from err
    except tomllib.TOMLDecodeError as err:
        raise ConfigurationError(f"Invalid TOML in {file_path}: {err}") from err


def load_profiler_config(file_path: str | Path) -> ProfilerConfig:
    """
    Reads a `ProfilerConfig` from a TOML file with a `[profile]` table
    (`sample_file`, `distance`) and an optional `[logging]` table (`level`,
    `file`, `console`).

    A relative `sample_file` is taken relative to the directory of the
    configuration file.
    """
    file_path = Path(file_path)
    data = load_config_toml(file_path)
    profile = data.get("profile")
    if not isinstance(profile, dict):
        raise ConfigurationError(f"Missing [profile] table in {file_path}.")

    sample_file = profile.get("sample_file")
    if not isinstance(sample_file, str) or not sample_file:
        raise ConfigurationError("`profile.sample_file` must be a non-empty string.")
    sample_path = Path(sample_file)
    if not sample_path.is_absolute():
        sample_path = file_path.parent / sample_path

    distance = profile.get("distance", DEFAULT_DISTANCE)
    if isinstance(distance, bool) or not isinstance(distance, (int, float)):
        raise ConfigurationError(f"`profile.distance` must be a number, got {distance!r}.")
    if not math.isfinite(distance):
        raise ConfigurationError(f"`profile.distance` must be finite, got {distance!r}.")

    logging_cfg = data.get("logging", {})
    if not isinstance(logging_cfg, dict):
        raise ConfigurationError("`logging` must be a table.")
    level = str(logging_cfg.get("level", "WARNING")).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigurationError(f"Unknown logging level: {level}.")

    return ProfilerConfig(
        sample_file=sample_path,
        distance=float(distance),
        log_level=level,
        log_file=logging_cfg.get("file"),
        log_console=bool(logging_cfg.get("console", True))
    )
