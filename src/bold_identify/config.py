"""Configuration management for the BOLD identification client."""

import json
import os
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .exceptions import ConfigurationError


IDS_XML_URL = "http://boldsystems.org/index.php/Ids_xml"


@dataclass
class RequestOptions:
    """Transport options forwarded to ``requests`` for every query.

    Only options that are set are forwarded, so the defaults of the
    underlying HTTP client apply otherwise.
    """
    timeout: Optional[Union[float, Tuple[float, float]]] = None
    headers: Optional[Dict[str, str]] = None
    proxies: Optional[Dict[str, str]] = None
    verify: Optional[Union[bool, str]] = None
    cert: Optional[Union[str, Tuple[str, str]]] = None
    allow_redirects: Optional[bool] = None

    def to_requests_kwargs(self) -> Dict[str, Any]:
        """Get keyword arguments for ``requests.Session.get``."""
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = IDS_XML_URL
    default_db: str = "COX1"
    timeout_seconds: Optional[float] = 60.0
    verify_ssl: bool = True
    user_agent: Optional[str] = None

    def request_options(self) -> RequestOptions:
        """Build the transport options for these settings."""
        headers = {'User-Agent': self.user_agent} if self.user_agent else None
        return RequestOptions(
            timeout=self.timeout_seconds,
            headers=headers,
            verify=None if self.verify_ssl else False
        )


@dataclass
class ProcessingConfig:
    """How queries are dispatched and parsed."""
    max_workers: int = 1
    strict_specimen: bool = False


@dataclass
class OutputConfig:
    """Output configuration settings."""
    format: str = "tsv"
    excel_compatible: bool = False


@dataclass
class Config:
    """Main configuration container."""
    api: APIConfig = field(default_factory=APIConfig)
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def default(cls) -> 'Config':
        """Create default configuration."""
        return cls(
            api=APIConfig(),
            processing=ProcessingConfig(),
            output=OutputConfig()
        )

    @classmethod
    def from_file(cls, path: Path) -> 'Config':
        """Load configuration from JSON file."""
        if not path.exists():
            return cls.default()

        try:
            with open(path, 'r') as f:
                data = json.load(f)

            return cls(
                api=APIConfig(**data.get('api', {})),
                processing=ProcessingConfig(**data.get('processing', {})),
                output=OutputConfig(**data.get('output', {}))
            )
        except (OSError, json.JSONDecodeError, TypeError, AttributeError) as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

    def to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'api': asdict(self.api),
            'processing': asdict(self.processing),
            'output': asdict(self.output)
        }

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    def merge_env_vars(self) -> None:
        """Merge environment variables into configuration."""
        if os.getenv('BOLD_IDENTIFY_URL'):
            self.api.base_url = os.getenv('BOLD_IDENTIFY_URL')
        if os.getenv('BOLD_DB'):
            self.api.default_db = os.getenv('BOLD_DB')

        try:
            if os.getenv('BOLD_TIMEOUT'):
                self.api.timeout_seconds = float(os.getenv('BOLD_TIMEOUT'))
            if os.getenv('BOLD_WORKERS'):
                self.processing.max_workers = int(os.getenv('BOLD_WORKERS'))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric environment setting: {e}") from e

    def merge_cli_args(self, **kwargs) -> None:
        """Merge CLI arguments into configuration."""
        if kwargs.get('db'):
            self.api.default_db = kwargs['db']
        if kwargs.get('timeout') is not None:
            self.api.timeout_seconds = kwargs['timeout']
        if kwargs.get('url'):
            self.api.base_url = kwargs['url']

        if kwargs.get('workers'):
            self.processing.max_workers = kwargs['workers']
        if kwargs.get('strict'):
            self.processing.strict_specimen = True

        if kwargs.get('output_format'):
            self.output.format = kwargs['output_format']
        if kwargs.get('excel_compatible'):
            self.output.excel_compatible = True


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    locations = [
        Path.home() / '.bold' / 'config.json',
        Path.home() / '.config' / 'bold' / 'config.json',
        Path('.bold.json'),
        Path('bold.config.json')
    ]

    for path in locations:
        if path.exists():
            return path

    return Path.home() / '.bold' / 'config.json'


def create_example_config(path: Optional[Path] = None) -> Path:
    """Create an example configuration file."""
    if path is None:
        path = Path('bold.config.example.json')

    config = Config.default()
    config.api.user_agent = "bold-identify (your_email@example.com)"
    config.processing.max_workers = 2

    config.to_file(path)
    return path
