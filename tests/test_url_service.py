"""
Tests for URLService business logic, using a real store.
"""

import pytest

from shortlink_app.services.alias_strategies import AliasStrategy
from shortlink_app.services.url_service import URLService
from shortlink_app.storage import AliasExistsError, URLNotFoundError


class SequenceAliasStrategy(AliasStrategy):
    """Hands out a fixed sequence of aliases"""

    def __init__(self, aliases):
        self.aliases = list(aliases)
        self.calls = 0

    def generate(self) -> str:
        alias = self.aliases[self.calls]
        self.calls += 1
        return alias


class TestURLService:
    """Test URL service business logic directly"""

    def test_save_with_custom_alias(self, store):
        service = URLService(store)

        saved = service.save_url("https://example.com/a", "custom")

        assert saved.alias == "custom"
        assert saved.url == "https://example.com/a"
        assert saved.id == 1
        assert service.resolve_url("custom") == "https://example.com/a"

    def test_custom_alias_conflict_not_retried(self, store):
        strategy = SequenceAliasStrategy(["unused"])
        service = URLService(store, alias_strategy=strategy)
        service.save_url("https://example.com/a", "taken")

        with pytest.raises(AliasExistsError):
            service.save_url("https://example.com/b", "taken")

        assert strategy.calls == 0
        assert service.resolve_url("taken") == "https://example.com/a"

    def test_generated_alias(self, store):
        service = URLService(store, alias_strategy=SequenceAliasStrategy(["gen001"]))

        saved = service.save_url("https://example.com/a")

        assert saved.alias == "gen001"
        assert service.resolve_url("gen001") == "https://example.com/a"

    def test_generated_alias_retries_on_collision(self, store):
        store.save_url("https://example.com/x", "busy1")
        store.save_url("https://example.com/y", "busy2")
        strategy = SequenceAliasStrategy(["busy1", "busy2", "free"])
        service = URLService(store, alias_strategy=strategy)

        saved = service.save_url("https://example.com/a")

        assert saved.alias == "free"
        assert strategy.calls == 3

    def test_generated_alias_gives_up_after_max_retries(self, store):
        store.save_url("https://example.com/x", "busy")
        strategy = SequenceAliasStrategy(["busy"] * 3)
        service = URLService(store, alias_strategy=strategy, max_retries=3)

        with pytest.raises(AliasExistsError):
            service.save_url("https://example.com/a")

        assert strategy.calls == 3

    def test_generated_reserved_alias_skipped(self, store):
        strategy = SequenceAliasStrategy(["health", "docs", "free"])
        service = URLService(store, alias_strategy=strategy)

        saved = service.save_url("https://example.com/a")

        assert saved.alias == "free"
        assert strategy.calls == 3
        with pytest.raises(URLNotFoundError):
            store.get_url("health")

    def test_only_reserved_aliases_generated(self, store):
        strategy = SequenceAliasStrategy(["api"] * 2)
        service = URLService(store, alias_strategy=strategy, max_retries=2)

        with pytest.raises(AliasExistsError):
            service.save_url("https://example.com/a")

    def test_empty_alias_means_generate(self, store):
        service = URLService(store, alias_strategy=SequenceAliasStrategy(["gen002"]))

        saved = service.save_url("https://example.com/a", "")

        assert saved.alias == "gen002"

    def test_delete_then_resolve(self, store):
        service = URLService(store)
        service.save_url("https://example.com/a", "gone")

        service.delete_url("gone")
        service.delete_url("gone")

        with pytest.raises(URLNotFoundError):
            service.resolve_url("gone")

    def test_rejects_zero_retries(self, store):
        with pytest.raises(ValueError):
            URLService(store, max_retries=0)
