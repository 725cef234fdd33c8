"""Configuration management using Pydantic."""

from pathlib import Path
from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings


class StorageConfig(BaseModel):
    """Configuration for the record store."""
    backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: Optional[Path] = None


class SearchConfig(BaseModel):
    """Configuration for search and related-content lookups."""
    default_limit: int = 10
    related_limit: int = 5
    related_strategy: Literal["none", "title"] = "none"


class Config(BaseSettings):
    """Main configuration class."""

    storage_path: Path = Field(default=Path("storage"), description="Path to storage directory")

    # Component configurations
    storage: StorageConfig = Field(default_factory=StorageConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = ConfigDict(
        env_prefix="TRACE_",
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    def model_post_init(self, __context: Any) -> None:
        """Derive the database path unless one was given explicitly."""
        if self.storage.db_path is None:
            self.storage.db_path = self.storage_path / "trace.db"

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a file."""
        if config_path.suffix.lower() == '.json':
            import json
            with open(config_path) as f:
                data = json.load(f)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            import yaml
            with open(config_path) as f:
                data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.suffix.lower() == '.json':
            import json
            with open(config_path, 'w') as f:
                json.dump(self.model_dump(mode='json'), f, indent=2)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            import yaml
            with open(config_path, 'w') as f:
                yaml.safe_dump(self.model_dump(mode='json'), f, default_flow_style=False)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def get_search_config(self) -> Dict[str, Any]:
        """Get search configuration as dictionary."""
        return self.search.model_dump()
