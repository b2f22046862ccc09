"""
Configuration management using Pydantic for type validation and dot notation access.
Provides structured configuration with automatic validation.
"""

from pydantic import BaseModel, Field, validator
from typing import Optional, Literal, List
import yaml
from pathlib import Path

from vntext.correction.normalizer import NORMALIZER_STEPS, DEFAULT_STEPS


class AccentConfig(BaseModel):
    """Tone placement and accent removal"""
    style: Literal["classic", "modern"] = Field("classic", description="Tone placement style: classic (hỏa) or modern (hoả)")
    remove_mode: Literal["remove", "alphabet", "ncr_decimal"] = Field("remove", description="Mode of accent removal")
    strict: bool = Field(False, description="Raise on words outside the syllable grammar instead of leaving them unchanged")


class NormalizerConfig(BaseModel):
    """Normalization pipeline"""
    steps: List[str] = Field(list(DEFAULT_STEPS), description="Steps to run, in order")
    unicode_form: Literal["NFC", "NFD", "NFKC", "NFKD"] = Field("NFC", description="Unicode normalization form of the 'unicode' step")

    @validator('steps')
    def validate_steps(cls, v):
        """Validate step names"""
        unknown = [step for step in v if step not in NORMALIZER_STEPS]
        if unknown:
            raise ValueError(f"Invalid steps: {unknown}. Must be among: {', '.join(NORMALIZER_STEPS)}")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate steps: {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging output"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Verbosity level")
    color: bool = Field(True, description="Colorful console output")
    output: Optional[str] = Field(None, description="Log file, or directory for log.txt. None: console only")


class Config(BaseModel):
    """
    Main configuration class for vntext.

    Usage:
        config = Config.from_yaml('configs/default.yaml')
        print(config.accent.style)
        print(config.normalizer.steps)
    """
    accent: AccentConfig = Field(default_factory=AccentConfig)
    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> 'Config':
        """
        Load configuration from YAML file with Pydantic validation.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config object with validated fields

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValidationError: If configuration is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    def save_yaml(self, yaml_path: str | Path):
        """
        Save configuration to YAML file.

        Args:
            yaml_path: Path to save YAML file
        """
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, 'w', encoding='utf-8') as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False
            )

    def get(self, key: str, default=None):
        """
        Get nested configuration value using dot notation.

        Args:
            key: Dot-separated key (e.g., 'accent.style')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split('.')
        value = self

        for k in keys:
            if not hasattr(value, k):
                return default
            value = getattr(value, k)
        return value

    class Config:
        """Pydantic config."""
        extra = "forbid"  # Catch misspelled sections
        validate_assignment = True  # Validate on assignment
