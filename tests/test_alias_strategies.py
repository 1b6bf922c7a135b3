"""
Tests for alias generation strategies.
"""
import string

import pytest

from shortlink_app.services.alias_strategies import RandomAliasStrategy


class TestRandomAliasStrategy:
    """Test random alias strategy"""
    
    def test_default_length(self):
        """Default alias length is 6"""
        assert len(RandomAliasStrategy().generate()) == 6
    
    def test_configured_length(self):
        strategy = RandomAliasStrategy(length=10)
        
        assert len(strategy.generate()) == 10
    
    def test_uses_letters_and_digits_only(self):
        allowed = set(string.ascii_letters + string.digits)
        strategy = RandomAliasStrategy(length=32)
        
        for _ in range(20):
            assert set(strategy.generate()) <= allowed
    
    def test_generates_varied_aliases(self):
        """Random aliases should practically never repeat"""
        strategy = RandomAliasStrategy(length=8)
        
        aliases = {strategy.generate() for _ in range(100)}
        
        assert len(aliases) > 90
    
    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            RandomAliasStrategy(length=0)
