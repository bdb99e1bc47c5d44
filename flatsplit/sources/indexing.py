"""Index definitions: the indexing configuration that seeds protected categories."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from flatsplit.errors import ConfigurationError
from flatsplit.logging_config import logger


class IndexingRule(BaseModel):
    """An indexing rule; documents are created for records of its base category."""

    base_category: str


class IndexDefinition(BaseModel):
    """One index definition.

    Implements the IndexingConfiguration protocol.
    """

    path: str
    aggregates: dict[str, list[str]] = Field(default_factory=dict)
    """Category -> relative node names aggregated into its documents."""

    rules: list[IndexingRule] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def aggregate_rules(self) -> dict[str, list[str]]:
        return self.aggregates

    @property
    def rule_base_categories(self) -> list[str]:
        return [rule.base_category for rule in self.rules]


class IndexDocument(BaseModel):
    """Top-level structure of an index definitions YAML file."""

    indexes: list[IndexDefinition] = Field(default_factory=list)


def load_index_definitions(path: Path) -> list[IndexDefinition]:
    """Load index definitions from a YAML file.

    Expected layout:

    ```
    indexes:
      - path: /oak:index/damAssetLucene
        aggregates:
          dam:Asset: [jcr:content, jcr:content/metadata]
        rules:
          - base_category: dam:Asset
    ```

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        document = IndexDocument(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigurationError(f"Cannot load index definitions {path}: {e}") from e

    logger.debug(f"Loaded {len(document.indexes)} index definitions from {path}")
    return document.indexes
