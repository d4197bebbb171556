"""Static catalogue of models available from each provider.

The catalogue is read once from ``catalog.yaml`` and never mutated. Lookups
for unknown providers or models fall back to defaults instead of failing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from doc2code.exceptions import ConfigurationError
from doc2code.logger import Logger, session_logger

DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog.yaml"
GLOBAL_DEFAULT_CONTEXT_TOKENS = 4096


@dataclass(frozen=True)
class ModelDescriptor:
    """A model offered by a provider."""

    id: str
    name: str
    provider: str
    description: str
    recommended: bool
    free: bool
    max_tokens: int
    context_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "provider": self.provider,
            "description": self.description,
            "recommended": self.recommended,
            "free": self.free,
            "maxTokens": self.max_tokens,
        }


@dataclass(frozen=True)
class ProviderCatalog:
    """Models and defaults for one provider."""

    provider: str
    display_name: str
    default_context_tokens: Optional[int]
    models: List[ModelDescriptor]


class ModelRegistry:
    """Read-only lookup of provider models and token limits."""

    def __init__(
        self,
        catalog_path: Union[str, Path, None] = None,
        logger: Logger = session_logger,
    ):
        """
        Load the model catalogue.

        Args:
            catalog_path: YAML catalogue to load (defaults to the bundled catalog.yaml)
            logger: Logger instance

        Raises:
            ConfigurationError: If the catalogue cannot be read or is malformed
        """
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self.logger = logger
        self.default_context_tokens = GLOBAL_DEFAULT_CONTEXT_TOKENS
        self._catalogs: Dict[str, ProviderCatalog] = {}
        self._load_catalog()

    def _load_catalog(self) -> None:
        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(
                "Failed to load model catalogue", path=str(self.catalog_path), error=str(e)
            )
            raise ConfigurationError(
                f"Failed to load model catalogue {self.catalog_path}: {e}",
                code="MODEL_CATALOG_INVALID",
            ) from e

        self.default_context_tokens = int(
            data.get("default_context_tokens", GLOBAL_DEFAULT_CONTEXT_TOKENS)
        )
        for provider, entry in (data.get("providers") or {}).items():
            self._catalogs[provider] = self._build_provider_catalog(provider, entry or {})

        self.logger.debug(
            "Model catalogue loaded",
            path=str(self.catalog_path),
            providers=",".join(self._catalogs),
            models=sum(len(c.models) for c in self._catalogs.values()),
        )

    def _build_provider_catalog(self, provider: str, entry: Dict[str, Any]) -> ProviderCatalog:
        models = []
        for raw in entry.get("models") or []:
            try:
                models.append(
                    ModelDescriptor(
                        id=raw["id"],
                        name=raw.get("name", raw["id"]),
                        provider=provider,
                        description=raw.get("description", ""),
                        recommended=bool(raw.get("recommended", False)),
                        free=bool(raw.get("free", False)),
                        max_tokens=int(raw.get("max_tokens", GLOBAL_DEFAULT_CONTEXT_TOKENS)),
                        context_tokens=(
                            int(raw["context_tokens"]) if raw.get("context_tokens") else None
                        ),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid model entry for provider '{provider}': {raw!r}",
                    code="MODEL_CATALOG_INVALID",
                    details={"provider": provider, "error": str(e)},
                ) from e

        default_context = entry.get("default_context_tokens")
        return ProviderCatalog(
            provider=provider,
            display_name=entry.get("display_name", provider),
            default_context_tokens=int(default_context) if default_context else None,
            models=models,
        )

    def providers(self) -> List[str]:
        """Provider identifiers in catalogue order."""
        return list(self._catalogs)

    def models_for_provider(self, provider: str) -> List[ModelDescriptor]:
        """Models for ``provider`` in catalogue order; empty for unknown providers."""
        catalog = self._catalogs.get(provider)
        return list(catalog.models) if catalog else []

    def get_model(self, provider: str, model_id: str) -> Optional[ModelDescriptor]:
        for model in self.models_for_provider(provider):
            if model.id == model_id:
                return model
        return None

    def default_model_for(self, provider: str) -> str:
        """First recommended model, else the first model, else ``""``."""
        models = self.models_for_provider(provider)
        for model in models:
            if model.recommended:
                return model.id
        return models[0].id if models else ""

    def token_limit_for(self, provider: str, model_id: str) -> int:
        """
        Prompt token budget for a model.

        Falls back to the provider's default, then to the global default, when
        the model or provider is unknown.
        """
        model = self.get_model(provider, model_id)
        if model is not None and model.context_tokens:
            return model.context_tokens

        catalog = self._catalogs.get(provider)
        if catalog is not None and catalog.default_context_tokens:
            return catalog.default_context_tokens

        return self.default_context_tokens


_default_registry: Optional[ModelRegistry] = None


def get_default_registry() -> ModelRegistry:
    """Shared registry backed by the bundled catalogue."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ModelRegistry()
    return _default_registry


def get_models_by_provider(provider: str) -> List[ModelDescriptor]:
    return get_default_registry().models_for_provider(provider)


def get_default_model(provider: str) -> str:
    return get_default_registry().default_model_for(provider)


def get_model_token_limit(provider: str, model_id: str) -> int:
    return get_default_registry().token_limit_for(provider, model_id)
