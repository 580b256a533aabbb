"""
Unit tests for ConfigFileConfigMapRetriever
"""

import pytest

from fx_config_file.configmaps.concretes.config_file.config_file_config_map_retriever import ConfigFileConfigMapRetriever
from fx_config_file.configmaps.interfaces.config_map_retriever_interface import ConfigMapDto, IConfigMapRetriever
from fx_config_file.domain.config_map import ConfigMap


@pytest.fixture
def retriever() -> IConfigMapRetriever:
    return ConfigFileConfigMapRetriever(
        ConfigMap({"db.host": "localhost", "db.port": "5432", "dbx": "no", "timeout": "30"})
    )


@pytest.mark.asyncio
async def test_retrieve_config_map_groups_by_prefix(retriever):
    dto = await retriever.retrieve_config_map("db")
    assert dto == ConfigMapDto(name="db", values={"host": "localhost", "port": "5432"})


@pytest.mark.asyncio
async def test_retrieve_config_map_unknown_group(retriever):
    assert await retriever.retrieve_config_map("cache") is None


@pytest.mark.asyncio
async def test_retrieve_mandatory_value(retriever):
    assert await retriever.retrieve_mandatory_config_map_value("timeout") == "30"
    with pytest.raises(KeyError):
        await retriever.retrieve_mandatory_config_map_value("missing")


@pytest.mark.asyncio
async def test_retrieve_optional_value(retriever):
    assert await retriever.retrieve_optional_config_map_value("db.port") == "5432"
    assert await retriever.retrieve_optional_config_map_value("missing") is None


def test_config_map_dto_is_hashable_and_immutable():
    dto = ConfigMapDto("db", {"host": "localhost"})

    assert isinstance(dto.values, ConfigMap)
    assert hash(dto) == hash(ConfigMapDto("db", ConfigMap({"host": "localhost"})))
    with pytest.raises(TypeError):
        dto.values["host"] = "elsewhere"
