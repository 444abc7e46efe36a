"""Unit test configuration - isolated environment and shared fixtures"""

import pytest

from search_processors.config import get_settings
from search_processors.html_boost import DEFAULT_TAG_WEIGHTS, TagWeightTable
from search_processors.models import EntityTypeInfo, Index, Item, StaticEntityInfo


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Clear SEARCH_PROCESSORS_* variables and the cached settings.

    Tests that need a setting set it with monkeypatch and call
    get_settings.cache_clear() themselves.
    """
    for name in (
        "SEARCH_PROCESSORS_LOG_FILE",
        "SEARCH_PROCESSORS_LOG_LEVEL",
        "SEARCH_PROCESSORS_MAX_NESTING_DEPTH",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def default_tags():
    """The out-of-the-box tag boosts (h1=5, h2=3, h3=2, strong=2, b=2, em=1.5, u=1.5)"""
    return TagWeightTable.from_config(DEFAULT_TAG_WEIGHTS)


@pytest.fixture
def entity_info():
    """Host entity metadata: nodes have bundles, users don't"""
    return StaticEntityInfo({
        "node": EntityTypeInfo(
            bundle_key="type",
            bundles={"article": "Article", "page": "Basic page", "blog": ""},
        ),
        "user": EntityTypeInfo(),
    })


@pytest.fixture
def node_index(entity_info):
    """Node index with a fulltext body and a string status field"""
    return Index(
        id="content",
        entity_type="node",
        fields={"title": "text", "body": "text", "type": "string"},
        entity_info=entity_info,
    )


@pytest.fixture
def node_items():
    return {
        1: Item(1, {"type": "article", "title": "Search tips", "body": "<h1>Boosting</h1> explained"}),
        2: Item(2, {"type": "page", "title": "About", "body": "<p>About <b>us</b></p>"}),
        3: Item(3, {"type": "blog", "title": "Diary", "body": "Plain text &amp; more"}),
    }
