"""
Configuration settings for the Hacker News client.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin
import yaml


@dataclass
class ClientConfig:
    """Main configuration for the client."""

    # Base settings
    base_url: str = "https://news.ycombinator.com/"

    # Transport
    max_retries: int = 3
    timeout: int = 30

    # User agent - desktop Firefox, the site serves the same markup to it
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64; rv:69.0) Gecko/20100101 Firefox/69.0"
    )

    # Site paths
    listing_path: str = "news"
    item_path: str = "item"
    login_path: str = "login"
    landing_path: str = "news"

    # Extraction policy
    skip_malformed_rows: bool = False  # False = one bad row fails the listing
    strict_tree: bool = False  # False = orphaned comments become roots

    # Logging
    logs_dir: Optional[Path] = None

    def __post_init__(self):
        """Normalise the base URL and log path."""
        if not self.base_url.endswith('/'):
            self.base_url = self.base_url + '/'
        if self.logs_dir is not None:
            self.logs_dir = Path(self.logs_dir)

    def make_url(self, path: str) -> str:
        """Make absolute URL from a site-relative path."""
        return urljoin(self.base_url, path)

    @property
    def landing_url(self) -> str:
        """Where the site redirects after a successful login or signup."""
        return self.make_url(self.landing_path)

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        """Load configuration from YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        if 'client' in data:
            client = data['client']
            if 'base_url' in client:
                config.base_url = client['base_url']
            if 'max_retries' in client:
                config.max_retries = int(client['max_retries'])
            if 'timeout' in client:
                config.timeout = int(client['timeout'])
            if 'user_agent' in client:
                config.user_agent = client['user_agent']
            for key in ('listing_path', 'item_path', 'login_path', 'landing_path'):
                if key in client:
                    setattr(config, key, str(client[key]))

        if 'parsing' in data:
            parsing = data['parsing']
            if 'skip_malformed_rows' in parsing:
                config.skip_malformed_rows = bool(parsing['skip_malformed_rows'])
            if 'strict_tree' in parsing:
                config.strict_tree = bool(parsing['strict_tree'])

        if 'logging' in data:
            logging_section = data['logging']
            if logging_section.get('logs_dir'):
                config.logs_dir = Path(logging_section['logs_dir'])

        config.__post_init__()
        return config
